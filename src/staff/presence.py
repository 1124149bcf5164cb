"""Who on the staff is signed in and recently active."""

from datetime import UTC, datetime, timedelta
from typing import ClassVar

from shared.model import DomainModel
from shared.repository import repository_for
from staff.account.account import normalize_email

ACTIVITY_THRESHOLD = timedelta(minutes=2)
DEFAULT_MAX_IDLE = timedelta(hours=24)

_EPOCH = datetime.fromtimestamp(0, UTC)


class PresenceRecord(DomainModel):
    identity_field: ClassVar[str] = "email"

    email: str
    role: str | None = None
    last_seen: datetime = _EPOCH
    last_login: datetime = _EPOCH
    active: bool = False


def _upsert(email: str | None, **updates) -> PresenceRecord | None:
    key = normalize_email(email)
    if not key:
        return None
    repo = repository_for(PresenceRecord)
    record = repo.find(key) or repo.add(PresenceRecord(email=key))
    for field, value in updates.items():
        if field == "role" and value is None:
            continue
        setattr(record, field, value)
    return record


def mark_active(email: str | None, role: str | None = None) -> PresenceRecord | None:
    now = datetime.now(UTC)
    return _upsert(email, role=role, last_seen=now, last_login=now, active=True)


def heartbeat(email: str | None, role: str | None = None) -> PresenceRecord | None:
    return _upsert(email, role=role, last_seen=datetime.now(UTC), active=True)


def mark_inactive(email: str | None) -> PresenceRecord | None:
    return _upsert(email, last_seen=datetime.now(UTC), active=False)


def load_presence() -> dict[str, PresenceRecord]:
    return {record.email: record for record in repository_for(PresenceRecord).all()}


def clear_stale(max_idle: timedelta = DEFAULT_MAX_IDLE) -> int:
    cutoff = datetime.now(UTC) - max_idle
    repo = repository_for(PresenceRecord)
    stale = repo.filter(lambda record: record.last_seen < cutoff)
    for record in stale:
        repo.remove(record.email)
    return len(stale)


def is_online(record: PresenceRecord, now: datetime | None = None) -> bool:
    now = now or datetime.now(UTC)
    return record.active and now - record.last_seen <= ACTIVITY_THRESHOLD
