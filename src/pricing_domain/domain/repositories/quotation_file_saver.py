# src/pricing_domain/domain/repositories/quotation_file_saver.py
"""Quotation file saver interface."""
from abc import ABC, abstractmethod


class IQuotationFileSaver(ABC):
    @abstractmethod
    def save(self, content: str, filename: str) -> str:
        """Saves the plain-text content under the suggested filename and returns where it went."""
        pass
