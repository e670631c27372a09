# estates/routers/seller.py
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..models import SellerLead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["seller"])


@router.post("/seller", status_code=201)
async def seller_lead(request: Request):
    """Acknowledge a 'sell your property' lead. Leads are only logged for now."""
    try:
        if request.headers.get("content-type", "").startswith("application/json"):
            payload = await request.json()
        else:
            payload = dict(await request.form())
        lead = SellerLead.model_validate(payload)
    except (ValueError, ValidationError):
        logger.exception("Seller error")
        return JSONResponse(status_code=500, content={"success": False})

    logger.info("New seller lead: %s", lead.model_dump(exclude_none=True))
    return {"success": True, "message": "Seller data received"}
