"""FastAPI routes for the Staff domain — sign-in, profile and presence."""

from fastapi import APIRouter, Depends

from shared.api import StatusResponse
from staff.account.account import StaffProfile
from staff.account.management import accounts_for_settings, get_account, update_password, update_profile
from staff.api.dependencies import bearer_token, require_staff
from staff.api.schemas import (
    LoginRequest,
    LoginResponse,
    PresenceEntry,
    UpdatePasswordRequest,
    UpdateProfileRequest,
)
from staff.presence import clear_stale, heartbeat, is_online, load_presence
from staff.session.session import StaffSession, login, logout

router = APIRouter(prefix="/staff", tags=["staff"])


@router.post("/login", response_model=LoginResponse)
async def staff_login(body: LoginRequest) -> LoginResponse:
    session = login(body.email, body.password)
    return LoginResponse(token=session.token, expires_at=session.expires_at, account=get_account(session.email))


@router.post("/logout", response_model=StatusResponse)
async def staff_logout(token: str | None = Depends(bearer_token)) -> StatusResponse:
    logout(token)
    return StatusResponse()


@router.get("/me", response_model=StaffProfile)
async def current_account(session: StaffSession = Depends(require_staff)) -> StaffProfile:
    return get_account(session.email)


@router.patch("/profile", response_model=StaffProfile)
async def edit_profile(body: UpdateProfileRequest, session: StaffSession = Depends(require_staff)) -> StaffProfile:
    return update_profile(session.email, **body.model_dump(exclude_unset=True))


@router.post("/password", response_model=StaffProfile)
async def change_password(body: UpdatePasswordRequest, session: StaffSession = Depends(require_staff)) -> StaffProfile:
    return update_password(session.email, body.password, current_password=body.current_password)


@router.get("/accounts")
async def list_accounts(session: StaffSession = Depends(require_staff)):
    return {"data": accounts_for_settings()}


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------
@router.post("/presence/heartbeat", response_model=StatusResponse)
async def presence_heartbeat(session: StaffSession = Depends(require_staff)) -> StatusResponse:
    heartbeat(session.email, session.role)
    return StatusResponse()


@router.get("/presence")
async def list_presence(session: StaffSession = Depends(require_staff)):
    clear_stale()
    entries = [
        PresenceEntry(
            email=record.email,
            role=record.role,
            last_seen=record.last_seen,
            last_login=record.last_login,
            active=record.active,
            online=is_online(record),
        ).model_dump(mode="json", by_alias=True)
        for record in load_presence().values()
    ]
    return {"data": entries}
