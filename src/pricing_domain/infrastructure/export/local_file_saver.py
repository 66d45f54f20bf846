"""Local disk implementation of the quotation file saver."""

import logging
import os
import re
from typing import Optional

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import StorageError
from src.pricing_domain.domain.repositories.quotation_file_saver import IQuotationFileSaver

logger = logging.getLogger(__name__)

# Path separators and characters most filesystems reject
_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


class LocalQuotationFileSaver(IQuotationFileSaver):
    def __init__(self, export_dir: Optional[str] = None) -> None:
        self.export_dir = export_dir or settings.QUOTATION_EXPORT_DIR

    def save(self, content: str, filename: str) -> str:
        safe_name = _UNSAFE_FILENAME_CHARS.sub("_", filename).strip() or "cotizacion.txt"
        path = os.path.join(self.export_dir, safe_name)
        try:
            os.makedirs(self.export_dir, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise StorageError(f"Could not write quotation to {path}", original_exception=e)
        logger.info(f"Quotation saved to {path}")
        return path
