"""Category model."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """Represents a named category record.

    Attributes:
        name: Display name, unique among categories created through the service.
        id: Unique identifier assigned by the backend on first save.
    """

    name: str
    id: Optional[int] = None
