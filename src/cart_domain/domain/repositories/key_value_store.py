# src/cart_domain/domain/repositories/key_value_store.py
"""Durable key-value store interface."""
from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Returns the stored string for key, or None when absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Stores value under key, replacing any previous value."""
        pass

    def close(self) -> None:
        """Releases any resources held by the store."""
        pass
