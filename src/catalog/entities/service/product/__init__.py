"""Entity package: Product."""

from .entity import Product, Rate
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["Product", "ProductRepository", "ProductTable", "Rate"]
