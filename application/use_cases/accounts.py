"""
Account Use Cases.

Accounts are rows in the users tab: user_id, email, bcrypt hash, created_at.
"""
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext

from application.exceptions import BadRequestError, UnauthorizedError
from application.ports import SheetTable

logger = logging.getLogger(__name__)

USERS_RANGE = "users!A:D"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass
class AccountResult:
    user_id: str
    success: bool = True


def _find_user(rows: List[List[Any]], email: str) -> Optional[List[Any]]:
    for row in rows:
        if len(row) > 1 and row[1] == email:
            return row
    return None


def _require_credentials(email: Any, password: Any) -> None:
    if not email or not password:
        raise BadRequestError("Missing email or password")


class RegisterUserUseCase:
    """Create a sheet-backed account."""

    def __init__(self, sheets: SheetTable):
        self._sheets = sheets

    async def execute(self, email: Any, password: Any) -> AccountResult:
        """
        Raises:
            BadRequestError: Missing credentials or the email is taken
        """
        _require_credentials(email, password)
        rows = await self._sheets.get_rows(USERS_RANGE)
        if _find_user(rows, email):
            raise BadRequestError("User already exists")

        user_id = f"usr_{int(time.time() * 1000)}"
        password_hash = await run_in_threadpool(pwd_context.hash, password)
        await self._sheets.append_row(
            USERS_RANGE,
            [user_id, email, password_hash, datetime.now(timezone.utc).isoformat()],
        )
        logger.info(f"Registered user {user_id}")
        return AccountResult(user_id=user_id)


class LoginUserUseCase:
    """Verify a password against the stored bcrypt hash."""

    def __init__(self, sheets: SheetTable):
        self._sheets = sheets

    async def execute(self, email: Any, password: Any) -> AccountResult:
        """
        Raises:
            BadRequestError: Missing credentials
            UnauthorizedError: Unknown email or wrong password
        """
        _require_credentials(email, password)
        rows = await self._sheets.get_rows(USERS_RANGE)
        user = _find_user(rows, email)
        if user is None or len(user) < 3:
            raise UnauthorizedError("Invalid credentials")

        try:
            valid = await run_in_threadpool(pwd_context.verify, password, user[2])
        except ValueError:
            logger.warning(f"Stored password hash for {user[0]} is unreadable")
            valid = False
        if not valid:
            raise UnauthorizedError("Invalid credentials")
        return AccountResult(user_id=user[0])
