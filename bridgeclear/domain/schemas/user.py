"""Pydantic schemas for User."""

from typing import Optional

from pydantic import Field

from bridgeclear.domain.schemas.common import CamelModel


class UserCreate(CamelModel):
    id: Optional[str] = None
    username: str = Field(..., min_length=1)
    password: str