"""Data access layer - Content item store models, connections and repositories."""

from .db_models import Base, ContentItemRecord
from .database import DatabaseManager, get_db_manager
from .repositories import ItemRepository, SqlItemRepository, InMemoryItemRepository

__all__ = [
    # Models
    'Base',
    'ContentItemRecord',

    # Database
    'DatabaseManager',
    'get_db_manager',

    # Repositories
    'ItemRepository',
    'SqlItemRepository',
    'InMemoryItemRepository'
]
