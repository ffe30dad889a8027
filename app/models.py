from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class RegistrationRequest(BaseModel):
    # No constraints here: the rule pipeline decides which check fails first.
    username: Optional[str] = Field(default=None, description="Requested username")
    password: Optional[str] = Field(default=None, description="Plaintext password, stored as given")
    email: Optional[str] = Field(default=None, description="Single email address")


class RegistrationOutcome(BaseModel):
    username: str
    message: str = Field(default="Registration successful", min_length=1)
