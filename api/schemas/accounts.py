"""Account request schemas."""

from typing import Optional

from pydantic import BaseModel


class CredentialsRequest(BaseModel):
    """Body for POST /api/register and /api/login."""
    email: Optional[str] = None
    password: Optional[str] = None
