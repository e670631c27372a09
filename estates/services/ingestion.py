# estates/services/ingestion.py
import logging
from typing import Any, Mapping, Sequence

from sqlmodel import Session

from ..models import Property
from .parsing import parse_checkbox, parse_number, parse_video_links
from .storage import UploadedFile, image_url

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("title", "location", "description", "category")

# form field -> model attribute
NUMERIC_FIELDS = {
    "price": "price",
    "bedrooms": "bedrooms",
    "bathrooms": "bathrooms",
    "carpetArea": "carpet_area",
    "builtupArea": "builtup_area",
}


def build_property(fields: Mapping[str, Any], uploads: Sequence[UploadedFile], base_url: str) -> Property:
    """Turn raw form fields plus the saved-image manifest into a Property."""
    data = {name: fields.get(name) for name in TEXT_FIELDS}

    defaulted = []
    for form_name, attr in NUMERIC_FIELDS.items():
        parsed = parse_number(fields.get(form_name))
        if parsed.defaulted:
            defaulted.append(form_name)
        data[attr] = parsed.value
    if defaulted:
        logger.debug("Numeric fields defaulted to 0: %s", ", ".join(defaulted))

    data["negotiable"] = parse_checkbox(fields.get("negotiable")).value
    data["images"] = [image_url(base_url, u.storage_filename) for u in uploads]
    data["videos"] = parse_video_links(fields.get("videos"))
    return Property(**data)


def ingest_property(session: Session, fields: Mapping[str, Any], uploads: Sequence[UploadedFile], base_url: str) -> Property:
    prop = build_property(fields, uploads, base_url)
    session.add(prop)
    session.commit()
    session.refresh(prop)
    logger.info("Created property %s with %d images and %d videos", prop.id, len(prop.images), len(prop.videos))
    return prop
