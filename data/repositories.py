"""
Repository pattern for content item access.

Node naming only depends on the ``ItemRepository`` protocol. Reads are
restricted by default; an elevated read bypasses the protection flag.
"""
import uuid
from typing import Dict, Iterable, Optional, Protocol

from sqlalchemy.orm import Session

from core.models import ContentItem, EMPTY_RECORD_ID
from data.db_models import ContentItemRecord


class ItemRepository(Protocol):
    """Lookup contract used by the node factory."""

    def get_item(
        self,
        record_id: uuid.UUID,
        elevated: bool = False
    ) -> Optional[ContentItem]:
        ...


class SqlItemRepository:
    """Repository for ContentItem operations backed by SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    def create(
        self,
        name: str,
        content_path: str,
        display_name: Optional[str] = None,
        template_name: Optional[str] = None,
        record_id: Optional[uuid.UUID] = None,
        language: str = 'en',
        is_protected: bool = False
    ) -> ContentItem:
        """Create a new content item."""
        record = ContentItemRecord(
            id=str(record_id or uuid.uuid4()),
            name=name,
            display_name=display_name,
            template_name=template_name,
            content_path=content_path,
            language=language,
            is_protected=is_protected
        )
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record.to_item()

    def get_item(
        self,
        record_id: uuid.UUID,
        elevated: bool = False
    ) -> Optional[ContentItem]:
        """Get item by record id, or None if absent or not readable."""
        if record_id == EMPTY_RECORD_ID:
            return None

        query = self.session.query(ContentItemRecord).filter(
            ContentItemRecord.id == str(record_id)
        )
        if not elevated:
            query = query.filter(ContentItemRecord.is_protected.is_(False))

        record = query.first()
        return record.to_item() if record else None

    def delete(self, record_id: uuid.UUID) -> bool:
        """Delete an item."""
        record = self.session.get(ContentItemRecord, str(record_id))
        if record:
            self.session.delete(record)
            self.session.commit()
            return True
        return False


class InMemoryItemRepository:
    """Dictionary-backed repository for embedding callers and tests."""

    def __init__(self, items: Iterable[ContentItem] = ()):
        self._items: Dict[uuid.UUID, ContentItem] = {item.id: item for item in items}

    def add(self, item: ContentItem) -> ContentItem:
        self._items[item.id] = item
        return item

    def get_item(
        self,
        record_id: uuid.UUID,
        elevated: bool = False
    ) -> Optional[ContentItem]:
        item = self._items.get(record_id)
        if item is None or (item.is_protected and not elevated):
            return None
        return item
