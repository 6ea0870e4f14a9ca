"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Pydantic v2 Features Used:
- model_config: Inherited camelCase aliasing from CatalogSchema
- Field(): Define constraints and metadata
- field_validator: Validate and transform field values
"""

from pydantic import Field, field_validator

from catalog_api.schemas.common import CatalogSchema


class AuthorBase(CatalogSchema):
    """
    Base schema with shared author fields.

    Contains fields common to create, update, and response schemas.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's full name",
        examples=["George Orwell", "Jane Austen"],
    )

    bio: str | None = Field(
        default=None,
        max_length=5000,
        description="Author biography",
        examples=["English novelist and essayist, journalist and critic..."],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """
        Validate that name is not just whitespace.

        Args:
            v: The value being validated

        Returns:
            The stripped name

        Raises:
            ValueError: If the name is blank
        """
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class AuthorCreate(AuthorBase):
    """
    Schema for creating a new author.

    Example request body:
    {
        "name": "George Orwell",
        "bio": "English novelist..."
    }
    """
    pass


class AuthorUpdate(AuthorBase):
    """
    Schema for replacing an author's mutable fields.

    Update is a whole-record replace: name and bio are both written,
    an omitted bio clears it. authorId must match the id in the URL.
    versionId is optional; when sent it must equal the stored version.
    """

    author_id: int = Field(
        ...,
        description="ID of the author being updated (must match the path)",
        examples=[1],
    )

    version_id: int | None = Field(
        default=None,
        description="Version the client last read, for conflict detection",
        examples=[1],
    )


class AuthorSummary(CatalogSchema):
    """List projection of an author."""

    author_id: int = Field(..., description="Unique identifier", examples=[1])
    name: str = Field(..., description="Author's full name")


class AuthorDetail(AuthorSummary):
    """
    Full author record, including the titles of the author's books.

    Example:
    {
        "authorId": 1,
        "name": "George Orwell",
        "bio": "English novelist...",
        "titles": ["1984", "Animal Farm"],
        "versionId": 1
    }
    """

    bio: str | None = Field(default=None, description="Author biography")

    titles: list[str] = Field(
        default_factory=list,
        description="Titles of the books linked to this author",
    )

    version_id: int = Field(..., description="Current row version")
