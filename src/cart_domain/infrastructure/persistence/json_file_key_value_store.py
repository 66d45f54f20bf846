# src/cart_domain/infrastructure/persistence/json_file_key_value_store.py
"""JSON file implementation of the key-value store."""

import json
import logging
import os
from typing import Optional

from src.cart_domain.domain.repositories.key_value_store import IKeyValueStore
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(IKeyValueStore):
    """Keeps every key in one JSON object on disk. Each write replaces the file atomically."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path or settings.CART_STORAGE_PATH

    def _read_all(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            raise StorageError(f"Could not read key-value file {self.path}", original_exception=e)
        if not isinstance(data, dict):
            raise StorageError(f"Key-value file {self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError as e:
            logger.warning(f"Overwriting unreadable key-value file {self.path}: {e}")
            data = {}
        data[key] = value

        tmp_path = f"{self.path}.tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError as cleanup_error:
                    logger.warning(f"Could not remove temporary file {tmp_path}: {cleanup_error}")
            raise StorageError(f"Could not write key '{key}' to {self.path}", original_exception=e)
