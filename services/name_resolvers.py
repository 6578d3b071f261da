"""
Node name resolution.

Derives a display name for a tree node from its raw path or from the
content item it references, according to the configured resolving mode.
"""
import re
from typing import List, Optional
from urllib.parse import urlsplit

import structlog

from core.constants import (
    QUERY_DELIMITER,
    TEXT_HOME,
    URL_BASE_AUTHORITY,
    WILDCARD_ITEM_NAME,
)
from core.exceptions import NodeArgumentError
from core.models import ContentItem, NodeNameResolvingMode, TreeNode
from data.repositories import ItemRepository
from services.localization import ResourceManager

logger = structlog.get_logger(__name__)

_SEGMENT_PATTERN = re.compile(r'[^/]*/|[^/]+$')


def url_segments(raw_name: str, base_authority: str = URL_BASE_AUTHORITY) -> List[str]:
    """
    Split a raw node name into URL path segments.

    Every segment but the last keeps its trailing ``/``, so ``/a/b`` gives
    ``['/', 'a/', 'b']``. The query string is not part of the path.
    """
    path = urlsplit(base_authority + raw_name).path or '/'
    return _SEGMENT_PATTERN.findall(path)


def last_url_segment(raw_name: str, base_authority: str = URL_BASE_AUTHORITY) -> Optional[str]:
    """Last URL path segment of a raw node name, or None if there is none."""
    segments = url_segments(raw_name, base_authority)
    return segments[-1] if segments else None


def resolve_raw_name(raw_name: str, home_label: str) -> str:
    """
    Derive a display name from a raw node name alone.

    Args:
        raw_name: Path-like node name, possibly with a query fragment
        home_label: Localized label for the site root

    Returns:
        File name without extension, the home label for ``/``, or the raw
        name unchanged when nothing precedes the query delimiter
    """
    path = raw_name.split(QUERY_DELIMITER, 1)[0]
    if not path:
        return raw_name

    if path.lower() == '/':
        return home_label

    file_name = path.replace('\\', '/').rsplit('/', 1)[-1]
    # everything from the last dot on is the extension, so ".htaccess" has no name
    stem, dot, _ = file_name.rpartition('.')
    return stem if dot else file_name


class NodeNameResolver:
    """
    Resolves node names using one of three modes.

    - ``raw``: raw name first, the item name when that comes out empty
    - ``name``: item name, wildcard items named after their URL segment
    - ``display_name``: item display name, raw name when there is no item

    Whatever the mode, an empty result falls back to the raw node name.
    """

    def __init__(
        self,
        item_repository: ItemRepository,
        resource_manager: ResourceManager,
        mode: NodeNameResolvingMode = NodeNameResolvingMode.RAW,
        wildcard_item_name: str = WILDCARD_ITEM_NAME,
        url_base_authority: str = URL_BASE_AUTHORITY
    ):
        if item_repository is None:
            raise NodeArgumentError("item repository")
        if resource_manager is None:
            raise NodeArgumentError("resource manager")

        self.item_repository = item_repository
        self.resource_manager = resource_manager
        self.mode = NodeNameResolvingMode(mode)
        self.wildcard_item_name = wildcard_item_name
        self.url_base_authority = url_base_authority

    def resolve(self, node: TreeNode) -> str:
        """Resolve a node name with the configured mode."""
        if self.mode is NodeNameResolvingMode.RAW:
            name = self.resolve_from_raw_name(node)
            # some reverse maps have an empty root node name
            if not name:
                name = self.resolve_from_item(node)
        elif self.mode is NodeNameResolvingMode.NAME:
            name = self.resolve_from_item(node)
        else:
            item = self.get_node_item(node)
            name = item.display_name if item is not None else self.resolve_from_raw_name(node)

        if not name:
            logger.debug("node_name_fallback_to_raw", node_id=node.id, raw_name=node.name)
            return node.name
        return name

    def resolve_from_raw_name(self, node: TreeNode) -> str:
        if node is None:
            raise NodeArgumentError("node")
        return resolve_raw_name(node.name, self.resource_manager.translate(TEXT_HOME))

    def resolve_from_item(self, node: TreeNode) -> str:
        item = self.get_node_item(node)
        if item is None:
            return self.resolve_from_raw_name(node)

        if item.name != self.wildcard_item_name:
            return item.name

        # wildcard items are named after the URL segment they matched
        segment = last_url_segment(node.name, self.url_base_authority) or ''
        return segment.replace('/', '')

    def get_node_item(self, node: TreeNode) -> Optional[ContentItem]:
        return self.item_repository.get_item(node.record_id)
