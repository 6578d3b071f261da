"""
Core domain models for path analyzer node projection.

These are pure data structures without business logic. Tree nodes are
produced upstream by the analytics engine and are read-only here.
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

EMPTY_RECORD_ID = uuid.UUID(int=0)


class NodeNameResolvingMode(str, Enum):
    """Strategy used to derive a node's display name."""
    RAW = "raw"
    NAME = "name"
    DISPLAY_NAME = "display_name"


class NodeKind(str, Enum):
    """Discriminant of the tree node variant."""
    BASE = "base"
    EXPERIENCE = "experience"
    PAGE = "page"


@dataclass
class ExperienceMetrics:
    """Outcome metrics carried by experience nodes."""
    outcome_count: int = 0
    monetary_value: float = 0.0
    average_monetary_value: float = 0.0


@dataclass
class PageMetrics(ExperienceMetrics):
    """Experience metrics plus page timing."""
    average_duration: int = 0


_PAYLOAD_TYPES = {
    NodeKind.BASE: type(None),
    NodeKind.EXPERIENCE: ExperienceMetrics,
    NodeKind.PAGE: PageMetrics,
}


@dataclass
class TreeNode:
    """A node of the visitor-journey tree."""
    id: str
    name: str
    record_id: uuid.UUID = EMPTY_RECORD_ID
    depth: int = 0
    kind: NodeKind = NodeKind.BASE
    metrics: Optional[ExperienceMetrics] = None
    children: List['TreeNode'] = field(default_factory=list)
    is_grouped_node: bool = False
    merged_node_count: int = 1
    prune_count: int = 0
    subtree_value: float = 0.0
    subtree_count: int = 0
    prune_value: float = 0.0
    exit_count: int = 0
    exit_value: float = 0.0
    exit_value_potential: float = 0.0

    def __post_init__(self):
        self.kind = NodeKind(self.kind)
        expected = _PAYLOAD_TYPES[self.kind]
        if type(self.metrics) is not expected:
            raise TypeError(
                f"{self.kind.value} node requires {expected.__name__} metrics, "
                f"got {type(self.metrics).__name__}"
            )

    @property
    def is_root(self) -> bool:
        """Root of the tree: depth zero without a backing item."""
        return self.depth == 0 and self.record_id == EMPTY_RECORD_ID

    @classmethod
    def from_dict(cls, data: Dict[str, Any], depth: int = 0) -> 'TreeNode':
        """Build a tree from the analytics engine's JSON shape."""
        kind = NodeKind(data.get('kind', NodeKind.BASE.value))
        metrics = None
        if kind is NodeKind.PAGE:
            metrics = PageMetrics(
                outcome_count=data.get('outcome_count', 0),
                monetary_value=data.get('monetary_value', 0.0),
                average_monetary_value=data.get('average_monetary_value', 0.0),
                average_duration=data.get('average_duration', 0),
            )
        elif kind is NodeKind.EXPERIENCE:
            metrics = ExperienceMetrics(
                outcome_count=data.get('outcome_count', 0),
                monetary_value=data.get('monetary_value', 0.0),
                average_monetary_value=data.get('average_monetary_value', 0.0),
            )

        record_id = data.get('record_id')
        return cls(
            id=str(data['id']),
            name=data.get('name', ''),
            record_id=uuid.UUID(str(record_id)) if record_id else EMPTY_RECORD_ID,
            depth=data.get('depth', depth),
            kind=kind,
            metrics=metrics,
            children=[
                cls.from_dict(child, depth + 1)
                for child in data.get('children', [])
            ],
            is_grouped_node=data.get('is_grouped_node', False),
            merged_node_count=data.get('merged_node_count', 1),
            prune_count=data.get('prune_count', 0),
            subtree_value=data.get('subtree_value', 0.0),
            subtree_count=data.get('subtree_count', 0),
            prune_value=data.get('prune_value', 0.0),
            exit_count=data.get('exit_count', 0),
            exit_value=data.get('exit_value', 0.0),
            exit_value_potential=data.get('exit_value_potential', 0.0),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for storage."""
        data = {
            'id': self.id,
            'name': self.name,
            'record_id': str(self.record_id),
            'depth': self.depth,
            'kind': self.kind.value,
            'is_grouped_node': self.is_grouped_node,
            'merged_node_count': self.merged_node_count,
            'prune_count': self.prune_count,
            'subtree_value': self.subtree_value,
            'subtree_count': self.subtree_count,
            'prune_value': self.prune_value,
            'exit_count': self.exit_count,
            'exit_value': self.exit_value,
            'exit_value_potential': self.exit_value_potential,
            'children': [child.to_dict() for child in self.children],
        }
        if self.metrics is not None:
            data.update({
                'outcome_count': self.metrics.outcome_count,
                'monetary_value': self.metrics.monetary_value,
                'average_monetary_value': self.metrics.average_monetary_value,
            })
        if isinstance(self.metrics, PageMetrics):
            data['average_duration'] = self.metrics.average_duration
        return data


@dataclass
class ContentItem:
    """A content item as returned by the item repository."""
    id: uuid.UUID
    name: str
    display_name: str = ""
    template_name: str = ""
    content_path: str = ""
    language: str = "en"
    is_protected: bool = False

    def __post_init__(self):
        if not self.display_name:
            self.display_name = self.name


@dataclass
class MasterNode:
    """Navigational node with item-aware name and URL."""
    id: str
    name: str
    record_id: uuid.UUID
    template_name: Optional[str] = None
    url: Optional[str] = None
    content_path: Optional[str] = None
    sub_nodes: List[TreeNode] = field(default_factory=list)
