# estates/routers/admin.py
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..config import Settings
from ..db import get_session
from ..deps import get_settings
from ..models import Property
from ..services.ingestion import NUMERIC_FIELDS, TEXT_FIELDS, ingest_property
from ..services.storage import MAX_IMAGES, remove_images, save_uploads

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


async def property_form(request: Request) -> Dict[str, Any]:
    """Raw text fields of the admin form.

    Read from the parsed form directly so a blank input stays ``""``
    instead of collapsing into "absent".
    """
    form = await request.form()
    fields: Dict[str, Any] = {}
    for name in (*TEXT_FIELDS, *NUMERIC_FIELDS, "negotiable"):
        value = form.get(name)
        fields[name] = value if isinstance(value, str) else None
    videos = [v for v in form.getlist("videos") if isinstance(v, str)]
    fields["videos"] = videos if "videos" in form else None
    return fields


@router.post("/upload-property")
def upload_property(
    fields: Dict[str, Any] = Depends(property_form),
    images: List[UploadFile] = File(default=[]),
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    """Create a property from the admin form (images on disk, record in the store)."""
    if len(images) > MAX_IMAGES:
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": f"Too many images. Maximum {MAX_IMAGES}"},
        )

    logger.debug("Upload fields: %s", fields)

    try:
        uploads = save_uploads(images, settings.upload_dir)
        logger.debug("Upload files: %s", uploads)
        ingest_property(session, fields, uploads, settings.base_url)
    except Exception as e:
        logger.exception("Upload error")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Error uploading property.", "error": str(e)},
        )

    return PlainTextResponse("Property uploaded successfully!")


@router.delete("/delete-property/{pid}")
def delete_property(
    pid: str,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    try:
        prop = session.get(Property, pid)
        if not prop:
            return JSONResponse(status_code=404, content={"success": False, "message": "Property not found"})

        report = remove_images(prop.images or [], settings.upload_dir)
        logger.info(
            "Property %s image cleanup: %d removed, %d missing, %d skipped, %d failed",
            pid, report.count("removed"), report.count("missing"), report.count("skipped"), report.count("failed"),
        )

        session.delete(prop)
        session.commit()
    except SQLAlchemyError:
        logger.exception("Delete failed for property %s", pid)
        return JSONResponse(status_code=500, content={"success": False, "message": "Delete failed"})

    return {"success": True, "message": "Property deleted successfully"}
