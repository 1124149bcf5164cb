"""Store bounded context — the café's profile, hours, payment and notification settings."""

import structlog

logger = structlog.get_logger(__name__)
