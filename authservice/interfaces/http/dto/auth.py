from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class RegisterRequestDTO(BaseModel):
    """Only presence is checked; anything beyond the credentials is kept as profile data."""

    username: str
    password: str

    model_config = ConfigDict(extra="allow")

    @property
    def profile(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class LoginRequestDTO(BaseModel):
    username: str
    password: str


class LoginResponseDTO(BaseModel):
    message: str
    token: str


class WhoAmIResponseDTO(BaseModel):
    subject: str
    username: str
    expires_at: int
