"""
Database models for the content item store.

Items are addressed by their record id, the identifier analytics nodes
carry in ``TreeNode.record_id``.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import declarative_base

from core.models import ContentItem

Base = declarative_base()


def generate_uuid():
    """Generate UUID string for primary keys."""
    return str(uuid.uuid4())


class ContentItemRecord(Base):
    """Stored content item with naming and path metadata."""

    __tablename__ = 'content_items'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False)
    display_name = Column(String)
    template_name = Column(String)
    content_path = Column(String, nullable=False)
    language = Column(String, nullable=False, default='en')

    # Hidden from restricted reads
    is_protected = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<ContentItemRecord(id={self.id}, name={self.name}, path={self.content_path})>"

    def to_item(self) -> ContentItem:
        """Convert to the domain item."""
        return ContentItem(
            id=uuid.UUID(self.id),
            name=self.name,
            display_name=self.display_name or self.name,
            template_name=self.template_name or '',
            content_path=self.content_path,
            language=self.language or 'en',
            is_protected=bool(self.is_protected)
        )
