"""Request and response payloads for category commands."""

from pydantic import BaseModel, ConfigDict, Field
from models.category import Category


class CategoryPayload(BaseModel):
    """Inbound category data for create and update."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)

    def to_category(self) -> Category:
        return Category(name=self.name)


class CategoryResponse(BaseModel):
    """Outbound view of a stored category."""

    id: int
    name: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id, name=category.name)
