"""
Node Factory - Projects analytics tree nodes into view models.

Names are resolved through a mode-dispatched resolver and memoized per
factory instance. URLs come from the link manager when the node has a
backing content item.
"""
from typing import Optional

import structlog

from api.schemas import ExplorerNode, NodeViewModel
from core.constants import TEXT_HOME, TEXT_INTERNET, TEXT_NODE_GROUPS
from core.exceptions import NodeArgumentError, NodeVariantError
from core.models import (
    ContentItem,
    MasterNode,
    NodeKind,
    NodeNameResolvingMode,
    PageMetrics,
    TreeNode,
)
from data.repositories import ItemRepository
from services.link_service import LinkManager, UrlOptions
from services.localization import ResourceManager
from services.name_cache import NameCache
from services.name_resolvers import NodeNameResolver, last_url_segment

logger = structlog.get_logger(__name__)


class NodeFactory:
    """Builds master, view model and explorer nodes from tree nodes."""

    def __init__(
        self,
        item_repository: ItemRepository,
        resource_manager: ResourceManager,
        link_manager: Optional[LinkManager] = None,
        mode: NodeNameResolvingMode = NodeNameResolvingMode.RAW,
        name_cache: Optional[NameCache] = None,
        **resolver_options
    ):
        """
        Initialize node factory.

        Args:
            item_repository: Content item lookup
            resource_manager: Localization of fixed labels
            link_manager: Item URL generation (default site if None)
            mode: Node name resolving mode
            name_cache: Cache to share; a fresh one per factory if None
            **resolver_options: ``wildcard_item_name`` / ``url_base_authority``
        """
        if item_repository is None:
            raise NodeArgumentError("item repository")
        if resource_manager is None:
            raise NodeArgumentError("resource manager")

        self.item_repository = item_repository
        self.resource_manager = resource_manager
        self.link_manager = link_manager or LinkManager()
        self.name_cache = name_cache if name_cache is not None else NameCache()
        self.name_resolver = NodeNameResolver(
            item_repository,
            resource_manager,
            mode=mode,
            **resolver_options
        )

    def create_master_node(self, node: TreeNode) -> MasterNode:
        """
        Build the navigational node for a tree node.

        The item is read with elevated access so protected items still
        provide names and URLs.
        """
        if node is None:
            raise NodeArgumentError("node")

        item = self.item_repository.get_item(node.record_id, elevated=True)

        if node.is_root:
            return MasterNode(
                id=node.id,
                name=self.resource_manager.translate(TEXT_INTERNET),
                record_id=node.record_id,
                sub_nodes=list(node.children)
            )

        master_node = MasterNode(
            id=node.id,
            name=node.name,
            record_id=node.record_id,
            sub_nodes=list(node.children)
        )

        if item is not None:
            master_node.name = self.resolve_item_name(node, item)
            master_node.template_name = item.template_name
            master_node.url = self.resolve_url(node, item, UrlOptions())
            master_node.content_path = item.content_path

        return master_node

    def create_node_view_model(self, node: TreeNode, include_children: bool = True) -> NodeViewModel:
        """
        Build the metrics view model of an experience or page node.

        Only the top-level call may leave children out; descendants are
        always projected with their children.
        """
        if node is None:
            raise NodeArgumentError("node")
        if node.kind not in (NodeKind.EXPERIENCE, NodeKind.PAGE):
            raise NodeVariantError(NodeKind.EXPERIENCE.value, node.kind.value)

        metrics = node.metrics
        duration = metrics.average_duration if node.kind is NodeKind.PAGE else 0

        children = None
        if include_children:
            children = [self.create_node_view_model(child) for child in node.children]

        return NodeViewModel(
            id=node.id,
            record_id=node.record_id,
            name=self.resolve_name(node),
            prune_count=node.prune_count,
            subtree_value=node.subtree_value,
            subtree_count=node.subtree_count,
            prune_value=node.prune_value,
            exit_count=node.exit_count,
            exit_value=node.exit_value,
            exit_value_potential=node.exit_value_potential,
            outcome_count=metrics.outcome_count,
            monetary_value=metrics.monetary_value,
            average_monetary_value=metrics.average_monetary_value,
            duration=duration,
            children=children
        )

    def create_explorer_node(self, source_node: TreeNode) -> ExplorerNode:
        """Build the path explorer node of a page node and its subtree."""
        if source_node is None:
            raise NodeArgumentError("source node")
        if source_node.kind is not NodeKind.PAGE:
            raise NodeVariantError(NodeKind.PAGE.value, source_node.kind.value)

        page: PageMetrics = source_node.metrics
        master_node = self.create_master_node(source_node)

        return ExplorerNode(
            id=master_node.id,
            name=master_node.name,
            url=master_node.url,
            item_id=source_node.record_id,
            prune_count=source_node.prune_count,
            subtree_value=source_node.subtree_value,
            subtree_count=source_node.subtree_count,
            prune_value=source_node.prune_value,
            exit_count=source_node.exit_count,
            exit_value=source_node.exit_value,
            monetary_value=page.monetary_value,
            average_monetary_value=page.average_monetary_value,
            outcome_count=page.outcome_count,
            time_spent=page.average_duration,
            children=[self.create_explorer_node(child) for child in master_node.sub_nodes]
        )

    def resolve_name(self, node: TreeNode) -> str:
        """Resolve the cached, mode-dispatched display name of a node."""
        if node is None:
            raise NodeArgumentError("node")

        if node.is_root:
            return self.resource_manager.translate(TEXT_INTERNET)

        node_name = self.name_cache.get(node.record_id, node.name)
        if node_name is None:
            logger.debug("node_name_cache_miss", node_id=node.id, record_id=str(node.record_id))
            node_name = self.name_resolver.resolve(node)
            # not found nodes stay uncached, their names may differ later
            self.name_cache.put(node.record_id, node.name, node_name)
        else:
            logger.debug("node_name_cache_hit", node_id=node.id, record_id=str(node.record_id))

        return self._with_group_suffix(node, node_name)

    def resolve_item_name(self, node: TreeNode, item: Optional[ContentItem]) -> str:
        """
        Resolve a node name from an already fetched item.

        Uses the item display name, or the last URL segment of the raw name
        without an item. Bypasses the name cache.
        """
        if node is None:
            raise NodeArgumentError("node")

        if item is not None:
            node_name = item.display_name
        else:
            node_name = last_url_segment(node.name, self.name_resolver.url_base_authority)

        if node_name and node_name.lower() == '/':
            return self.resource_manager.translate(TEXT_HOME)

        return self._with_group_suffix(node, node_name or '')

    def resolve_url(self, node: TreeNode, item: Optional[ContentItem], url_options: UrlOptions) -> str:
        """Item URL from the link manager, or the raw node name without an item."""
        if node is None:
            raise NodeArgumentError("node")
        if item is not None:
            return self.link_manager.get_item_url(item, url_options)
        return node.name

    def _with_group_suffix(self, node: TreeNode, node_name: str) -> str:
        group_suffix = ''
        if node.is_grouped_node and node.merged_node_count > 1:
            group_suffix = self.resource_manager.translate(TEXT_NODE_GROUPS, [node.merged_node_count])

        separator = ' ' if group_suffix else ''
        return f"{node_name}{separator}{group_suffix}"
