"""
MediaAsset model for ClipStack.

Stores metadata for uploaded video, image, and audio files. Files are not
stored or transcoded by this service; the row is a logical reference.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clipstack.core.database import Base, utcnow

if TYPE_CHECKING:
    from .timeline import TimelineItem
    from .user import User


MEDIA_TYPES = ("video", "image", "audio")


class MediaAsset(Base):
    """
    MediaAsset model representing an uploaded video, image, or audio file.

    ``duration`` applies to video and audio, ``width``/``height`` to video and
    images; all three are nullable.
    """

    __tablename__ = "media_assets"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Serial primary key"
    )

    # File information
    filename: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Stored filename"
    )
    original_filename: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Original uploaded filename"
    )
    file_path: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        doc="Logical path of the file"
    )
    file_size: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        doc="File size in bytes"
    )
    mime_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        doc="MIME type (e.g., image/jpeg, video/mp4)"
    )
    media_type: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        index=True,
        doc="Media type: video, image, or audio"
    )

    # Media properties
    duration: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 3),
        nullable=True,
        doc="Duration in seconds (video/audio)"
    )
    width: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        doc="Width in pixels (video/image)"
    )
    height: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        doc="Height in pixels (video/image)"
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Foreign key to owning user"
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False,
        doc="Upload timestamp"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False,
        doc="Last update timestamp"
    )

    # Relationships
    owner: Mapped["User"] = relationship(
        "User",
        back_populates="media_assets"
    )
    timeline_items: Mapped[List["TimelineItem"]] = relationship(
        "TimelineItem",
        back_populates="media_asset",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<MediaAsset(id={self.id!r}, media_type={self.media_type!r}, filename={self.original_filename!r})>"
