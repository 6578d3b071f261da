"""
Link Service - Builds public URLs for content items.

Item URLs are derived from the item's content path relative to the
configured site root.
"""
from dataclasses import dataclass
from typing import Optional

from core.models import ContentItem


@dataclass
class UrlOptions:
    """Options for controlling item URLs."""
    always_include_server_url: bool = False
    language_embedding: bool = False
    lowercase_urls: bool = True
    add_extension: bool = False
    extension: str = 'aspx'
    encode_spaces: bool = True


class LinkManager:
    """Resolves item URLs under a single site."""

    def __init__(
        self,
        site_root_path: str = '/sitecore/content/home',
        host_name: str = 'localhost',
        scheme: str = 'http'
    ):
        self.site_root_path = site_root_path.rstrip('/')
        self.host_name = host_name
        self.scheme = scheme

    def get_item_url(self, item: ContentItem, options: Optional[UrlOptions] = None) -> str:
        """
        Get the URL of an item.

        Args:
            item: Item to link to
            options: URL options (defaults if None)

        Returns:
            Site-relative URL, or absolute when the options ask for the server URL
        """
        options = options or UrlOptions()
        path = self._relative_path(item.content_path)

        if options.encode_spaces:
            path = path.replace(' ', '-')
        if options.lowercase_urls:
            path = path.lower()
        if options.add_extension and path != '/':
            path = f"{path}.{options.extension}"
        if options.language_embedding:
            path = f"/{item.language}{path}" if path != '/' else f"/{item.language}/"

        if options.always_include_server_url:
            return f"{self.scheme}://{self.host_name}{path}"
        return path

    def _relative_path(self, content_path: str) -> str:
        """Strip the site root from a content path."""
        root = self.site_root_path.lower()
        if content_path.lower() == root:
            return '/'
        if content_path.lower().startswith(root + '/'):
            return content_path[len(root):]
        return content_path if content_path.startswith('/') else '/' + content_path
