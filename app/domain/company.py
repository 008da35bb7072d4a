"""SQLAlchemy ORM model for Companies."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.domain.mixins import TimestampMixin, UUIDMixin


class Company(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(60), nullable=False)
    country: Mapped[Optional[str]] = mapped_column(String(60), nullable=True)

    # Rows are removed by the FK cascade, not loaded and deleted one by one
    employees: Mapped[List["Employee"]] = relationship(
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )
