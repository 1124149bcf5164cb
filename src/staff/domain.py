"""Staff bounded context — accounts, sign-in sessions and presence.

Staff accounts are fixed; each person can only adjust their own profile
(display name, phone, avatar, bio, landing page, password). Signing in
issues a bearer token that the admin, cashier and kitchen endpoints require.
"""

import structlog

logger = structlog.get_logger(__name__)
