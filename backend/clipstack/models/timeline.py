"""
TimelineItem model for ClipStack.

Places one media asset on one track of one project's timeline.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clipstack.core.database import Base, utcnow

if TYPE_CHECKING:
    from .media import MediaAsset
    from .project import Project


class TimelineItem(Base):
    """
    TimelineItem model: a clip on a project timeline.

    Owned by its project (deleted with it); references but does not own its
    media asset. Times are seconds on the project timeline, except
    ``media_start_offset`` which is seconds into the source media.
    """

    __tablename__ = "timeline_items"
    __table_args__ = (
        CheckConstraint("end_time > start_time", name="ck_timeline_items_time_order"),
        Index("ix_timeline_items_project_order", "project_id", "track_number", "start_time"),
    )

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Serial primary key"
    )
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Foreign key to owning project"
    )
    media_asset_id: Mapped[int] = mapped_column(
        ForeignKey("media_assets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Foreign key to referenced media asset"
    )

    # Placement
    track_number: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        doc="Track (layer); higher tracks render above lower ones"
    )
    start_time: Mapped[Decimal] = mapped_column(
        Numeric(10, 3),
        nullable=False,
        doc="Start time on the timeline in seconds"
    )
    end_time: Mapped[Decimal] = mapped_column(
        Numeric(10, 3),
        nullable=False,
        doc="End time on the timeline in seconds"
    )
    media_start_offset: Mapped[Decimal] = mapped_column(
        Numeric(10, 3),
        default=Decimal("0.000"),
        nullable=False,
        doc="Start offset within the source media in seconds"
    )

    # Mix and transform
    volume: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(3, 2),
        nullable=True,
        doc="Volume level (0-1)"
    )
    opacity: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(3, 2),
        nullable=True,
        doc="Opacity (0-1)"
    )
    position_x: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        doc="Horizontal position"
    )
    position_y: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        doc="Vertical position"
    )
    scale: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(5, 3),
        nullable=True,
        doc="Scale factor"
    )
    rotation: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(6, 2),
        nullable=True,
        doc="Rotation in degrees"
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False,
        doc="Creation timestamp"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False,
        doc="Last update timestamp"
    )

    # Relationships
    project: Mapped["Project"] = relationship(
        "Project",
        back_populates="timeline_items"
    )
    media_asset: Mapped["MediaAsset"] = relationship(
        "MediaAsset",
        back_populates="timeline_items"
    )

    def __repr__(self) -> str:
        return (
            f"<TimelineItem(id={self.id!r}, project_id={self.project_id!r}, "
            f"track={self.track_number!r}, start={self.start_time!r}, end={self.end_time!r})>"
        )
