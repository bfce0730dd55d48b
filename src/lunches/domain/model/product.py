"""Product aggregate.

Products live independently of orders and of prices: a product is only an
identity and a display name.  What it costs on a given day is answered by
the price catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from lunches.domain.exceptions import ValidationError


@dataclass
class Product:
    """A dish or item that can appear on a lunch order."""

    id: str
    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
