"""
Publisher Pydantic Schemas
"""

from pydantic import Field, field_validator

from catalog_api.schemas.common import CatalogSchema


class PublisherBase(CatalogSchema):
    """Shared publisher fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Publisher name",
        examples=["Secker & Warburg", "Penguin Books"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize name."""
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class PublisherCreate(PublisherBase):
    """Schema for creating a new publisher."""
    pass


class PublisherUpdate(PublisherBase):
    """Whole-record replace of a publisher; publisherId must match the path."""

    publisher_id: int = Field(
        ...,
        description="ID of the publisher being updated (must match the path)",
        examples=[1],
    )

    version_id: int | None = Field(
        default=None,
        description="Version the client last read, for conflict detection",
    )


class PublisherSummary(CatalogSchema):
    """
    List projection of a publisher with the titles it publishes.
    """

    publisher_id: int = Field(..., description="Unique identifier", examples=[1])
    name: str = Field(..., description="Publisher name")

    books: list[str] = Field(
        default_factory=list,
        description="Titles of the books owned by this publisher",
    )


class PublisherDetail(PublisherSummary):
    """Full publisher record."""

    version_id: int = Field(..., description="Current row version")
