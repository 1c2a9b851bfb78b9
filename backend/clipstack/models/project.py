"""
Project model for ClipStack.

A video-editing container that owns its timeline items.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clipstack.core.database import Base, utcnow

if TYPE_CHECKING:
    from .timeline import TimelineItem
    from .user import User


PROJECT_STATUSES = ("draft", "in_progress", "completed", "archived")


class Project(Base):
    """
    Project model representing a video editing project.

    Numeric settings are stored as fixed-precision decimals. ``duration`` is
    derived from the timeline and only ever extended by the service layer.
    """

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Serial primary key"
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Project display title"
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Optional project description"
    )
    status: Mapped[str] = mapped_column(
        String(20),
        default="draft",
        nullable=False,
        index=True,
        doc="Project status: draft, in_progress, completed, archived"
    )
    duration: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 3),
        nullable=True,
        doc="Timeline duration in seconds"
    )
    frame_rate: Mapped[Decimal] = mapped_column(
        Numeric(5, 2),
        default=Decimal("30.00"),
        nullable=False,
        doc="Frames per second"
    )
    resolution_width: Mapped[int] = mapped_column(
        Integer,
        default=1920,
        nullable=False,
        doc="Output width in pixels"
    )
    resolution_height: Mapped[int] = mapped_column(
        Integer,
        default=1080,
        nullable=False,
        doc="Output height in pixels"
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
        doc="Project creation timestamp"
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
        back_populates="projects"
    )
    timeline_items: Mapped[List["TimelineItem"]] = relationship(
        "TimelineItem",
        back_populates="project",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id!r}, title={self.title!r}, status={self.status!r})>"
