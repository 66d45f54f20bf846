# src/catalog_domain/domain/repositories/catalog_repository.py
"""Catalog source interface."""
from abc import ABC, abstractmethod

from src.catalog_domain.domain.entities.product import Product


class ICatalogRepository(ABC):
    @abstractmethod
    def get_all(self) -> list[Product]:
        """Returns the complete product sequence in catalog order."""
        pass
