"""
Configuration management using Pydantic Settings.

Environment variables:
- NODE_NAME_RESOLVING_MODE: raw, name or display_name
- DATABASE_URL: SQLAlchemy database URL of the content item store
- SITE_ROOT_PATH: Content path that maps to the site root URL
- SITE_HOST_NAME: Host used when absolute item URLs are requested
- LOG_LEVEL / LOG_JSON: Logging output
"""
from pydantic import Field
from pydantic_settings import BaseSettings

from core.constants import URL_BASE_AUTHORITY, WILDCARD_ITEM_NAME
from core.models import NodeNameResolvingMode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Node naming
    node_name_resolving_mode: NodeNameResolvingMode = Field(
        default=NodeNameResolvingMode.RAW,
        env="NODE_NAME_RESOLVING_MODE"
    )
    wildcard_item_name: str = Field(default=WILDCARD_ITEM_NAME, env="WILDCARD_ITEM_NAME")
    url_base_authority: str = Field(
        default=URL_BASE_AUTHORITY,
        env="URL_BASE_AUTHORITY"
    )

    # Content item store
    database_url: str = Field(
        default="sqlite:///content_items.db",
        env="DATABASE_URL"
    )

    # Link generation
    site_root_path: str = Field(
        default="/sitecore/content/home",
        env="SITE_ROOT_PATH"
    )
    site_host_name: str = Field(default="localhost", env="SITE_HOST_NAME")
    site_scheme: str = Field(default="http", env="SITE_SCHEME")

    # Logging
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_json: bool = Field(default=False, env="LOG_JSON")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def get_link_config(self) -> dict:
        """Get link generation configuration as dictionary."""
        return {
            'site_root_path': self.site_root_path,
            'host_name': self.site_host_name,
            'scheme': self.site_scheme,
        }


# Global settings instance
settings = Settings()
