# src/cart_domain/infrastructure/persistence/mysql_key_value_store.py
"""MySQL implementation of the key-value store."""

import logging
from typing import Optional

import mysql.connector
from mysql.connector import Error

from src.cart_domain.domain.repositories.key_value_store import IKeyValueStore
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError

logger = logging.getLogger(__name__)


class MySQLKeyValueStore(IKeyValueStore):
    """MySQL implementation of the key-value store, one row per key."""

    def __init__(self) -> None:
        """Initializes the store."""
        self._connection = None

    def _get_connection(self):
        """Establishes or returns an active MySQL database connection."""
        if not self._connection or not self._connection.is_connected():
            try:
                self._connection = mysql.connector.connect(
                    host=settings.DB_HOST,
                    database=settings.DB_DATABASE,
                    user=settings.DB_USER,
                    password=settings.DB_PASSWORD,
                    autocommit=False,
                    charset="utf8mb4",
                    use_unicode=True,
                )
            except Error as e:
                raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
        return self._connection

    def create_tables(self) -> None:
        """Creates the key-value table with the 'sf_' prefix."""
        create_table_query = """
        CREATE TABLE IF NOT EXISTS sf_key_value (
            store_key VARCHAR(255) NOT NULL PRIMARY KEY,
            store_value LONGTEXT NOT NULL,
            date_updated DATETIME DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(create_table_query)
            conn.commit()
            logger.info("SF key-value table checked/created.")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating SF key-value table: {e}", original_exception=e)
        finally:
            cursor.close()

    def get(self, key: str) -> Optional[str]:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute("SELECT store_value FROM sf_key_value WHERE store_key = %s", (key,))
            row = cursor.fetchone()
            return row["store_value"] if row else None
        except Error as e:
            raise DatabaseError(f"Error reading key '{key}': {e}", original_exception=e)
        finally:
            cursor.close()

    def set(self, key: str, value: str) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()
        upsert_query = """
        INSERT INTO sf_key_value (store_key, store_value)
        VALUES (%s, %s)
        ON DUPLICATE KEY UPDATE
        store_value = VALUES(store_value),
        date_updated = CURRENT_TIMESTAMP
        """
        try:
            cursor.execute(upsert_query, (key, value))
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error saving key '{key}': {e}", original_exception=e)
        finally:
            cursor.close()

    def close(self) -> None:
        if self._connection and self._connection.is_connected():
            self._connection.close()
        self._connection = None
