"""
Google Sheets implementation of the SheetTable port.

The googleapiclient service is synchronous, so each call runs in FastAPI's
threadpool. The service is built lazily from the service-account JSON held in
settings.
"""

import json
import logging
from typing import Any, List, Optional, Sequence

from fastapi.concurrency import run_in_threadpool
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from application.exceptions import ConfigurationError, UpstreamError, truncate

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class GoogleSheetTable:
    """SheetTable backed by the Sheets v4 values API."""

    def __init__(
        self,
        spreadsheet_id: Optional[str],
        service_account_json: Optional[str],
        service: Any = None,
    ):
        self._spreadsheet_id = spreadsheet_id
        self._service_account_json = service_account_json
        self._service = service

    def _get_service(self) -> Any:
        if self._service is not None:
            return self._service
        if not self._spreadsheet_id or not self._service_account_json:
            raise ConfigurationError("Missing SHEET_ID / GOOGLE_SERVICE_ACCOUNT_JSON")
        try:
            info = json.loads(self._service_account_json)
        except ValueError as e:
            raise ConfigurationError("GOOGLE_SERVICE_ACCOUNT_JSON is not valid JSON") from e

        creds = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
        self._service = build("sheets", "v4", credentials=creds, cache_discovery=False)
        return self._service

    def _get_rows_sync(self, range_: str) -> List[List[Any]]:
        result = self._get_service().spreadsheets().values().get(
            spreadsheetId=self._spreadsheet_id,
            range=range_,
        ).execute()
        return result.get("values", [])

    def _append_row_sync(self, range_: str, row: Sequence[Any]) -> None:
        self._get_service().spreadsheets().values().append(
            spreadsheetId=self._spreadsheet_id,
            range=range_,
            valueInputOption="RAW",
            body={"values": [list(row)]},
        ).execute()

    async def get_rows(self, range_: str) -> List[List[Any]]:
        try:
            return await run_in_threadpool(self._get_rows_sync, range_)
        except HttpError as e:
            logger.error(f"Sheets read failed for {range_}: {e}")
            raise UpstreamError(
                "Google Sheets read failed", debug={"range": range_, "message": truncate(str(e))}
            ) from e

    async def append_row(self, range_: str, row: Sequence[Any]) -> None:
        try:
            await run_in_threadpool(self._append_row_sync, range_, row)
        except HttpError as e:
            logger.error(f"Sheets append failed for {range_}: {e}")
            raise UpstreamError(
                "Google Sheets write failed", debug={"range": range_, "message": truncate(str(e))}
            ) from e
