"""Application service: Add Product use case."""

from __future__ import annotations

from lunches.domain.exceptions import ValidationError
from lunches.domain.model.product import Product
from lunches.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        all_products = self._product_repo.list_all()
        if any(p.name.lower() == name.strip().lower() for p in all_products):
            raise ValidationError(f"Product '{name.strip()}' already exists")

        # Auto-assign ID based on existing products
        numeric_ids = [int(p.id) for p in all_products if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product(id=next_id, name=name.strip())
        self._product_repo.save(product)
        return product
