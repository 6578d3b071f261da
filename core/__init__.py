"""Core package - Domain models, constants and exceptions."""

from .models import (
    EMPTY_RECORD_ID,
    NodeNameResolvingMode,
    NodeKind,
    ExperienceMetrics,
    PageMetrics,
    TreeNode,
    ContentItem,
    MasterNode,
)
from .constants import (
    TEXT_INTERNET,
    TEXT_HOME,
    TEXT_NODE_GROUPS,
    DEFAULT_TEXTS,
    WILDCARD_ITEM_NAME,
    URL_BASE_AUTHORITY,
)
from .exceptions import NodeProjectionError, NodeArgumentError, NodeVariantError

__all__ = [
    'EMPTY_RECORD_ID',
    'NodeNameResolvingMode',
    'NodeKind',
    'ExperienceMetrics',
    'PageMetrics',
    'TreeNode',
    'ContentItem',
    'MasterNode',
    'TEXT_INTERNET',
    'TEXT_HOME',
    'TEXT_NODE_GROUPS',
    'DEFAULT_TEXTS',
    'WILDCARD_ITEM_NAME',
    'URL_BASE_AUTHORITY',
    'NodeProjectionError',
    'NodeArgumentError',
    'NodeVariantError',
]
