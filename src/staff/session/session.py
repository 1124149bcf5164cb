"""Bearer-token sessions for signed-in staff."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import ClassVar

from pydantic import Field

from shared.config import get_settings
from shared.exceptions import AuthenticationError
from shared.model import DomainModel
from shared.repository import repository_for
from staff.account.account import normalize_email
from staff.account.management import find_account, verify_password
from staff.domain import logger
from staff.presence import mark_active, mark_inactive


class StaffSession(DomainModel):
    identity_field: ClassVar[str] = "token"

    token: str = Field(default_factory=lambda: secrets.token_hex(32))
    email: str
    role: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) >= self.expires_at


def login(email: str | None, password: str | None) -> StaffSession:
    if not verify_password(email, password):
        logger.warning("staff_login_failed", email=normalize_email(email))
        raise AuthenticationError("Email atau kata sandi salah.")

    profile = find_account(email)
    now = datetime.now(UTC)
    session = StaffSession(
        email=normalize_email(profile.email),
        role=profile.role,
        created_at=now,
        expires_at=now + timedelta(hours=get_settings().staff_session_hours),
    )
    repository_for(StaffSession).add(session)
    mark_active(session.email, session.role)
    logger.info("staff_logged_in", email=session.email, role=session.role)
    return session


def logout(token: str | None) -> bool:
    repo = repository_for(StaffSession)
    session = repo.find(token or "")
    if session is None:
        return False
    repo.remove(session.token)
    mark_inactive(session.email)
    logger.info("staff_logged_out", email=session.email)
    return True


def resolve_session(token: str | None) -> StaffSession | None:
    """The live session for ``token``; expired sessions are dropped."""
    if not token:
        return None
    repo = repository_for(StaffSession)
    session = repo.find(token)
    if session is None:
        return None
    if session.is_expired():
        repo.remove(token)
        logger.info("staff_session_expired", email=session.email)
        return None
    return session
