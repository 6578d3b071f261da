"""
Unit tests for core.models module.
"""
import uuid

import pytest
from core.models import (
    EMPTY_RECORD_ID,
    ContentItem,
    ExperienceMetrics,
    NodeKind,
    PageMetrics,
    TreeNode,
)


class TestTreeNode:
    """Tests for TreeNode dataclass."""

    def test_defaults(self):
        """Test a bare node has no backing item and no variant payload."""
        node = TreeNode(id="1", name="/about")

        assert node.record_id == EMPTY_RECORD_ID
        assert node.kind is NodeKind.BASE
        assert node.metrics is None
        assert node.children == []

    def test_is_root(self):
        """Test root needs depth zero and an empty record id."""
        assert TreeNode(id="r", name="", depth=0).is_root
        assert not TreeNode(id="r", name="", depth=1).is_root
        assert not TreeNode(id="r", name="/", depth=0, record_id=uuid.uuid4()).is_root

    def test_page_payload_required(self):
        """Test a page node rejects experience-only metrics."""
        with pytest.raises(TypeError):
            TreeNode(id="1", name="/", kind=NodeKind.PAGE, metrics=ExperienceMetrics())

    def test_base_rejects_payload(self):
        """Test a base node cannot carry metrics."""
        with pytest.raises(TypeError):
            TreeNode(id="1", name="/", metrics=ExperienceMetrics())

    def test_kind_from_string(self):
        """Test kind given as a string is coerced."""
        node = TreeNode(id="1", name="/", kind="page", metrics=PageMetrics())

        assert node.kind is NodeKind.PAGE


class TestTreeNodeSerialization:
    """Tests for TreeNode.from_dict and to_dict."""

    def test_from_dict_builds_variants_and_depth(self):
        """Test nested children get variants and increasing depth."""
        record_id = uuid.uuid4()
        data = {
            'id': 'root',
            'name': '',
            'kind': 'experience',
            'children': [
                {
                    'id': 'p1',
                    'name': '/products/widget',
                    'record_id': str(record_id),
                    'kind': 'page',
                    'average_duration': 42,
                    'outcome_count': 3,
                    'exit_value_potential': 12.5,
                }
            ]
        }

        root = TreeNode.from_dict(data)
        child = root.children[0]

        assert root.is_root
        assert root.kind is NodeKind.EXPERIENCE
        assert child.depth == 1
        assert child.record_id == record_id
        assert child.metrics.average_duration == 42
        assert child.metrics.outcome_count == 3
        assert child.exit_value_potential == 12.5

    def test_to_dict(self):
        """Test page metrics are flattened into the dictionary."""
        node = TreeNode(
            id="1", name="/a", kind=NodeKind.PAGE,
            metrics=PageMetrics(average_duration=7, outcome_count=1),
            exit_value_potential=3.0
        )

        data = node.to_dict()

        assert data['kind'] == 'page'
        assert data['average_duration'] == 7
        assert data['outcome_count'] == 1
        assert data['exit_value_potential'] == 3.0
        assert data['record_id'] == str(EMPTY_RECORD_ID)


class TestContentItem:
    """Tests for ContentItem dataclass."""

    def test_display_name_defaults_to_name(self):
        """Test missing display name falls back to the item name."""
        item = ContentItem(id=uuid.uuid4(), name="about")

        assert item.display_name == "about"
