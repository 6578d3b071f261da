"""
Unit tests for api.dependencies module.
"""
import uuid
from unittest.mock import MagicMock

import pytest
import api.dependencies as dependencies
from config.settings import Settings
from core.models import NodeNameResolvingMode, TreeNode
from data.database import get_db_manager
from data.repositories import SqlItemRepository
from api.dependencies import get_link_manager, get_node_factory, node_factory_scope


@pytest.fixture
def logging_setup(monkeypatch):
    """Replace logging setup so tests do not reconfigure the process."""
    mock = MagicMock()
    monkeypatch.setattr(dependencies, "setup_logging", mock)
    monkeypatch.setattr(dependencies, "_logging_configured", False)
    return mock


@pytest.fixture
def file_settings(tmp_path):
    """Settings pointing at a fresh SQLite item store."""
    settings = Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'items.db'}",
        node_name_resolving_mode="name",
        log_level="DEBUG",
        log_json=True
    )
    get_db_manager(settings.database_url).create_tables()
    return settings


class TestGetNodeFactory:
    """Tests for get_node_factory."""

    def test_wired_from_settings(self, test_db_session):
        """Test the factory reads mode and site from settings."""
        settings = Settings(
            node_name_resolving_mode="display_name",
            site_root_path="/sitecore/content/site",
            wildcard_item_name="_wildcard"
        )

        factory = get_node_factory(session=test_db_session, settings=settings)

        assert isinstance(factory.item_repository, SqlItemRepository)
        assert factory.name_resolver.mode is NodeNameResolvingMode.DISPLAY_NAME
        assert factory.name_resolver.wildcard_item_name == "_wildcard"
        assert factory.link_manager.site_root_path == "/sitecore/content/site"

    def test_fresh_cache_per_factory(self, test_db_session):
        first = get_node_factory(session=test_db_session)
        second = get_node_factory(session=test_db_session)

        assert first.name_cache is not second.name_cache


class TestNodeFactoryScope:
    """Tests for node_factory_scope."""

    def test_resolves_from_item_store(self, file_settings, logging_setup):
        """Test the scoped factory reads items from the configured store."""
        with get_db_manager(file_settings.database_url).session() as session:
            item = SqlItemRepository(session).create(
                name="widget", content_path="/sitecore/content/home/widget"
            )
        node = TreeNode(id="1", name="/w", record_id=item.id, depth=1)

        with node_factory_scope(file_settings) as factory:
            assert factory.resolve_name(node) == "widget"

    def test_session_closed_on_exit(self, file_settings, logging_setup):
        """Test the render's session is closed when the scope ends."""
        with node_factory_scope(file_settings) as factory:
            session = factory.item_repository.session
            factory.item_repository.get_item(uuid.uuid4())
            assert session.in_transaction()

        assert not session.in_transaction()

    def test_session_closed_on_error(self, file_settings, logging_setup):
        with pytest.raises(RuntimeError):
            with node_factory_scope(file_settings) as factory:
                session = factory.item_repository.session
                factory.item_repository.get_item(uuid.uuid4())
                raise RuntimeError("render failed")

        assert not session.in_transaction()

    def test_logging_configured_from_settings(self, file_settings, logging_setup):
        """Test LOG_LEVEL and LOG_JSON are applied once per process."""
        with node_factory_scope(file_settings):
            pass
        with node_factory_scope(file_settings):
            pass

        logging_setup.assert_called_once_with("DEBUG", True)


def test_get_link_manager():
    settings = Settings(site_host_name="www.example.com", site_scheme="https")

    link_manager = get_link_manager(settings)

    assert link_manager.host_name == "www.example.com"
    assert link_manager.scheme == "https"
