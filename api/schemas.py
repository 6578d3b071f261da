"""
Pydantic view models returned to the reporting UI.
"""
import uuid
from typing import List, Optional

from pydantic import BaseModel


class NodeMetrics(BaseModel):
    """Traffic metrics shared by node view models."""
    prune_count: int = 0
    subtree_value: float = 0.0
    subtree_count: int = 0
    prune_value: float = 0.0
    exit_count: int = 0
    exit_value: float = 0.0
    outcome_count: int = 0
    monetary_value: float = 0.0
    average_monetary_value: float = 0.0


class NodeViewModel(NodeMetrics):
    """Metrics-bearing view of a tree node."""
    id: str
    record_id: uuid.UUID
    name: str
    exit_value_potential: float = 0.0
    duration: int = 0
    children: Optional[List['NodeViewModel']] = None


class ExplorerNode(NodeMetrics):
    """Path explorer view of a page node."""
    id: str
    name: str
    url: Optional[str] = None
    item_id: uuid.UUID
    time_spent: int = 0
    children: List['ExplorerNode'] = []
