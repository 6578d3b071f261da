"""Services package - Node naming, localization, links and projection."""

from .localization import ResourceManager
from .link_service import LinkManager, UrlOptions
from .name_cache import NameCache
from .name_resolvers import NodeNameResolver, resolve_raw_name, last_url_segment
from .node_factory import NodeFactory

__all__ = [
    'ResourceManager',
    'LinkManager',
    'UrlOptions',
    'NameCache',
    'NodeNameResolver',
    'resolve_raw_name',
    'last_url_segment',
    'NodeFactory'
]
