"""
Spreadsheet Interface (Port).

A1-range reads and row appends against the coaching spreadsheet.
"""

from typing import Any, List, Protocol, Sequence


class SheetTable(Protocol):
    """Abstract interface for spreadsheet rows."""

    async def get_rows(self, range_: str) -> List[List[Any]]:
        """
        Read rows in an A1 range such as "users!A:D".

        Returns:
            List of rows; missing trailing cells are simply absent
        """
        ...

    async def append_row(self, range_: str, row: Sequence[Any]) -> None:
        """Append one row after the last row of range_."""
        ...
