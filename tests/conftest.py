"""
Pytest configuration and global fixtures.
"""
import sys
import uuid
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import (
    ContentItem,
    ExperienceMetrics,
    NodeKind,
    PageMetrics,
    TreeNode,
)
from data.db_models import Base
from data.repositories import InMemoryItemRepository
from services.localization import ResourceManager


@pytest.fixture(scope="session")
def test_db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture
def test_db_session(test_db_engine):
    """Create fresh database session for each test."""
    Session = sessionmaker(bind=test_db_engine)
    session = Session()

    yield session

    session.rollback()
    session.close()


@pytest.fixture
def resource_manager():
    """Resource manager with default English texts."""
    return ResourceManager()


@pytest.fixture
def product_item():
    """Regular content item."""
    return ContentItem(
        id=uuid.uuid4(),
        name="widget-item",
        display_name="Widget",
        template_name="Product",
        content_path="/sitecore/content/home/products/widget"
    )


@pytest.fixture
def wildcard_item():
    """Wildcard item shared by every category page."""
    return ContentItem(
        id=uuid.uuid4(),
        name="*",
        display_name="Category Wildcard",
        template_name="Category",
        content_path="/sitecore/content/home/category/*"
    )


@pytest.fixture
def protected_item():
    """Item hidden from restricted reads."""
    return ContentItem(
        id=uuid.uuid4(),
        name="members",
        display_name="Members Area",
        template_name="Page",
        content_path="/sitecore/content/home/members",
        is_protected=True
    )


@pytest.fixture
def item_repository(product_item, wildcard_item, protected_item):
    """In-memory repository holding the sample items."""
    return InMemoryItemRepository([product_item, wildcard_item, protected_item])


@pytest.fixture
def make_page_node():
    """Factory for page nodes with sensible metric defaults."""
    def _make(node_id, name, record_id=None, depth=1, children=None, **kwargs):
        metrics = PageMetrics(
            outcome_count=kwargs.pop('outcome_count', 2),
            monetary_value=kwargs.pop('monetary_value', 50.0),
            average_monetary_value=kwargs.pop('average_monetary_value', 25.0),
            average_duration=kwargs.pop('average_duration', 30)
        )
        return TreeNode(
            id=node_id,
            name=name,
            record_id=record_id or uuid.UUID(int=0),
            depth=depth,
            kind=NodeKind.PAGE,
            metrics=metrics,
            children=children or [],
            **kwargs
        )
    return _make


@pytest.fixture
def make_experience_node():
    """Factory for experience nodes."""
    def _make(node_id, name, record_id=None, depth=1, children=None, **kwargs):
        return TreeNode(
            id=node_id,
            name=name,
            record_id=record_id or uuid.UUID(int=0),
            depth=depth,
            kind=NodeKind.EXPERIENCE,
            metrics=ExperienceMetrics(outcome_count=1, monetary_value=10.0, average_monetary_value=10.0),
            children=children or [],
            **kwargs
        )
    return _make
