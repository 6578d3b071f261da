"""
API Dependencies - Wiring of the node factory and its collaborators.

A factory owns its name cache, so callers build one per report render:

    with node_factory_scope() as factory:
        view_model = factory.create_node_view_model(tree)
"""
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy.orm import Session

from config.logging_config import setup_logging
from config.settings import Settings, settings as default_settings
from data.database import get_db_manager
from data.repositories import SqlItemRepository
from services.link_service import LinkManager
from services.localization import ResourceManager
from services.node_factory import NodeFactory

_logging_configured = False


def configure_logging(settings: Settings = default_settings) -> None:
    """Apply the configured log level and format once per process."""
    global _logging_configured
    if not _logging_configured:
        setup_logging(settings.log_level, settings.log_json)
        _logging_configured = True


def get_link_manager(settings: Settings = default_settings) -> LinkManager:
    """
    Dependency for the link manager.

    Returns:
        LinkManager configured for the site
    """
    return LinkManager(**settings.get_link_config())


def get_node_factory(
    session: Session,
    settings: Settings = default_settings,
    resource_manager: Optional[ResourceManager] = None
) -> NodeFactory:
    """
    Dependency for the node factory over a caller-owned session.

    Args:
        session: Item store session; the caller closes it
        settings: Settings to read the naming mode and site from
        resource_manager: Localization (default English texts if None)

    Returns:
        NodeFactory with a fresh name cache
    """
    return NodeFactory(
        item_repository=SqlItemRepository(session),
        resource_manager=resource_manager or ResourceManager(),
        link_manager=get_link_manager(settings),
        mode=settings.node_name_resolving_mode,
        wildcard_item_name=settings.wildcard_item_name,
        url_base_authority=settings.url_base_authority
    )


@contextmanager
def node_factory_scope(
    settings: Settings = default_settings,
    resource_manager: Optional[ResourceManager] = None
) -> Generator[NodeFactory, None, None]:
    """
    Node factory for one report render.

    Opens an item store session for the render and closes it on exit.
    """
    configure_logging(settings)
    with get_db_manager(settings.database_url).session() as session:
        yield get_node_factory(session, settings, resource_manager)
