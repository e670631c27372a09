import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..db import get_session
from ..models import Property, PropertyRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["properties"])


@router.get("/properties", response_model=List[PropertyRead])
def list_properties(session: Session = Depends(get_session)):
    try:
        q = select(Property).order_by(Property.created_at.desc())
        return [PropertyRead.model_validate(p) for p in session.exec(q).all()]
    except (SQLAlchemyError, ValidationError):
        logger.exception("Could not load properties")
        return JSONResponse(status_code=500, content=[])
