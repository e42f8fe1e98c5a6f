"""Pydantic models describing Product payloads."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MIN_LENGTH = 5
DESCRIPTION_MIN_LENGTH = 10


class ProductCreate(BaseModel):
    """Full product payload accepted on creation."""

    title: str = Field(..., min_length=TITLE_MIN_LENGTH)
    description: str = Field(..., min_length=DESCRIPTION_MIN_LENGTH)
    price: float = Field(..., gt=0, allow_inf_nan=False)
    featured: bool = False

    model_config = ConfigDict(extra="ignore")

    @field_validator("featured", mode="before")
    @classmethod
    def null_featured_is_false(cls, v: object) -> object:
        """Treat an explicit null like an absent flag."""
        return False if v is None else v


class ProductUpdate(BaseModel):
    """Partial payload for updates.

    Defaults are never validated, so an omitted field stays unset while an
    explicit ``null`` is rejected like any other bad value. Callers read the
    supplied fields with ``model_dump(exclude_unset=True)``.
    """

    title: str = Field(None, min_length=TITLE_MIN_LENGTH)
    description: str = Field(None, min_length=DESCRIPTION_MIN_LENGTH)
    price: float = Field(None, gt=0, allow_inf_nan=False)
    featured: bool = None

    model_config = ConfigDict(extra="ignore")


class ProductRead(BaseModel):
    id: int
    title: str
    description: str
    price: float
    featured: bool

    model_config = ConfigDict(from_attributes=True)


class ValidationIssue(BaseModel):
    path: str
    message: str
