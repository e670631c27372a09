import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..config import Settings
from ..db import get_session
from ..deps import get_settings
from ..models import Property
from ..services.sitemap import render_sitemap, sitemap_urls

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sitemap"])


@router.get("/sitemap.xml")
def sitemap(session: Session = Depends(get_session), settings: Settings = Depends(get_settings)):
    try:
        ids = session.exec(select(Property.id)).all()
    except SQLAlchemyError:
        logger.exception("Could not build sitemap")
        return PlainTextResponse("Error generating sitemap", status_code=500)
    return Response(content=render_sitemap(sitemap_urls(settings.site_url, ids)), media_type="application/xml")
