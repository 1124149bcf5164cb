"""FastAPI dependencies guarding the staff-only endpoints."""

from fastapi import Depends, Header

from shared.exceptions import AuthenticationError
from staff.account.roles import is_route_allowed_for_role
from staff.session.session import StaffSession, resolve_session


def bearer_token(authorization: str = Header(default="")) -> str | None:
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_staff(token: str | None = Depends(bearer_token)) -> StaffSession:
    session = resolve_session(token)
    if session is None:
        raise AuthenticationError("Silakan masuk terlebih dahulu.")
    return session


def require_screen(path: str):
    """Require a session whose role may open ``path`` (e.g. ``/cashier``)."""

    def dependency(session: StaffSession = Depends(require_staff)) -> StaffSession:
        if not is_route_allowed_for_role(path, session.role):
            raise AuthenticationError("Akses tidak diizinkan untuk peran ini.")
        return session

    return dependency
