"""
Unit tests for the sheet-backed account use cases (register/login).
"""

import pytest

from application.exceptions import BadRequestError, UnauthorizedError
from application.use_cases import LoginUserUseCase, RegisterUserUseCase
from application.use_cases import accounts
from application.use_cases.accounts import pwd_context
from tests.fakes import create_sheet_table


@pytest.fixture
def sheets():
    return create_sheet_table()


@pytest.fixture
def threadpool_calls(monkeypatch):
    """Record every function handed to the threadpool, then run it inline."""
    calls = []

    async def fake_run_in_threadpool(func, *args):
        calls.append(func)
        return func(*args)

    monkeypatch.setattr(accounts, "run_in_threadpool", fake_run_in_threadpool)
    return calls


@pytest.mark.unit
class TestRegister:
    @pytest.mark.asyncio
    async def test_register_appends_hashed_row(self, sheets):
        result = await RegisterUserUseCase(sheets).execute("new@example.com", "s3cret!")

        assert result.success is True
        assert result.user_id.startswith("usr_")
        row = sheets.rows("users")[-1]
        assert row[0] == result.user_id
        assert row[1] == "new@example.com"
        assert row[2] != "s3cret!"
        assert pwd_context.verify("s3cret!", row[2])
        assert sheets.appended[0]["range"] == "users!A:D"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, sheets):
        await RegisterUserUseCase(sheets).execute("new@example.com", "s3cret!")

        with pytest.raises(BadRequestError, match="User already exists"):
            await RegisterUserUseCase(sheets).execute("new@example.com", "other")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password", [("", "pw"), ("a@b.com", ""), (None, None)])
    async def test_missing_credentials(self, sheets, email, password):
        with pytest.raises(BadRequestError, match="Missing email or password"):
            await RegisterUserUseCase(sheets).execute(email, password)


@pytest.mark.unit
class TestLogin:
    @pytest.mark.asyncio
    async def test_login_after_register(self, sheets):
        registered = await RegisterUserUseCase(sheets).execute("new@example.com", "s3cret!")

        result = await LoginUserUseCase(sheets).execute("new@example.com", "s3cret!")

        assert result.user_id == registered.user_id

    @pytest.mark.asyncio
    async def test_wrong_password(self, sheets):
        await RegisterUserUseCase(sheets).execute("new@example.com", "s3cret!")

        with pytest.raises(UnauthorizedError, match="Invalid credentials"):
            await LoginUserUseCase(sheets).execute("new@example.com", "wrong")

    @pytest.mark.asyncio
    async def test_unknown_email(self, sheets):
        with pytest.raises(UnauthorizedError):
            await LoginUserUseCase(sheets).execute("ghost@example.com", "pw")

    @pytest.mark.asyncio
    async def test_unreadable_hash(self, sheets):
        sheets.seed("users", [["usr_9", "legacy@example.com", "plaintext", "2024-01-01"]])

        with pytest.raises(UnauthorizedError):
            await LoginUserUseCase(sheets).execute("legacy@example.com", "plaintext")

    @pytest.mark.asyncio
    async def test_missing_credentials(self, sheets):
        with pytest.raises(BadRequestError):
            await LoginUserUseCase(sheets).execute("a@b.com", None)


@pytest.mark.unit
class TestHashingOffEventLoop:
    @pytest.mark.asyncio
    async def test_register_hashes_in_threadpool(self, sheets, threadpool_calls):
        await RegisterUserUseCase(sheets).execute("new@example.com", "s3cret!")

        assert threadpool_calls == [pwd_context.hash]

    @pytest.mark.asyncio
    async def test_login_verifies_in_threadpool(self, sheets, threadpool_calls):
        await RegisterUserUseCase(sheets).execute("new@example.com", "s3cret!")

        await LoginUserUseCase(sheets).execute("new@example.com", "s3cret!")

        assert threadpool_calls == [pwd_context.hash, pwd_context.verify]
