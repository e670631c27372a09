# estates/models.py
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Property(SQLModel, table=True):
    id: str = Field(default_factory=_new_id, primary_key=True)
    title: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None  # "Apartment", "Villa", "Plot", ...

    price: float = 0
    negotiable: bool = False
    bedrooms: float = 0
    bathrooms: float = 0
    carpet_area: float = 0  # sq.ft
    builtup_area: float = 0  # sq.ft

    # Absolute URLs of uploaded images / external video links, in submission order
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    videos: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=_utcnow, index=True)


class PropertyRead(BaseModel):
    """Public JSON shape of a listing (camelCase keys)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    title: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price: float
    negotiable: bool
    bedrooms: float
    bathrooms: float
    carpet_area: float
    builtup_area: float
    images: List[str]
    videos: List[str]
    created_at: datetime


class SellerLead(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
