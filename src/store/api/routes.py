"""FastAPI routes for store settings."""

from fastapi import APIRouter, Depends, Request

from shared.exceptions import ValidationError
from staff.api.dependencies import require_screen, require_staff
from staff.session.session import StaffSession
from store.settings import charge_config, get_store_settings, update_settings

router = APIRouter(prefix="/admin/settings", tags=["settings"])


@router.get("")
async def read_settings(session: StaffSession = Depends(require_staff)):
    return get_store_settings()


@router.patch("")
async def edit_settings(request: Request, session: StaffSession = Depends(require_screen("/admin"))):
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        raise ValidationError({"settings": ["Format pengaturan tidak valid"]})
    return update_settings(payload)


@router.get("/charges")
async def read_charges():
    config = charge_config()
    return {"serviceChargeRate": config["service_charge_rate"], "taxRate": config["tax_rate"]}
