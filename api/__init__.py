"""API package - View model schemas and dependency wiring."""

from .schemas import NodeMetrics, NodeViewModel, ExplorerNode

__all__ = [
    'NodeMetrics',
    'NodeViewModel',
    'ExplorerNode'
]
