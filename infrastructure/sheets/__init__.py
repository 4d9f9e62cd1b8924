"""Google Sheets adapters."""

from infrastructure.sheets.client import GoogleSheetTable

__all__ = ["GoogleSheetTable"]
