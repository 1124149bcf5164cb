"""Pydantic request/response schemas for the Staff API."""

from datetime import datetime

from shared.api import CamelModel
from staff.account.account import StaffProfile


class LoginRequest(CamelModel):
    email: str
    password: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "kasir@spmcafe.com",
                    "password": "spmlogin1",
                }
            ]
        }
    }


class LoginResponse(CamelModel):
    token: str
    expires_at: datetime
    account: StaffProfile


class UpdateProfileRequest(CamelModel):
    display_name: str | None = None
    phone: str | None = None
    avatar_color: str | None = None
    avatar_initials: str | None = None
    bio: str | None = None
    default_route: str | None = None


class UpdatePasswordRequest(CamelModel):
    current_password: str
    password: str


class PresenceEntry(CamelModel):
    email: str
    role: str | None
    last_seen: datetime
    last_login: datetime
    active: bool
    online: bool
