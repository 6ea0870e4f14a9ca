"""
Publisher Model

Represents a publishing house. A publisher owns zero or more books
(one-to-many); every book references exactly one publisher.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.database import Base

if TYPE_CHECKING:
    from catalog_api.models.book import Book


class Publisher(Base):
    """
    Publisher model.

    Table: publishers

    Relationships:
    - books: One-to-Many (books.publisher_id is a non-null foreign key)

    Example:
        publisher = Publisher(name="Secker & Warburg")
    """

    __tablename__ = "publishers"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Publisher name"
    )

    # Optimistic concurrency token, bumped by the ORM on every UPDATE
    version_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        comment="Row version used for optimistic concurrency checks"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # A book cannot outlive its publisher
    books: Mapped[List["Book"]] = relationship(
        "Book",
        back_populates="publisher",
        cascade="all, delete-orphan",
        order_by="Book.id",
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self) -> str:
        return f"Publisher(id={self.id}, name='{self.name}')"
