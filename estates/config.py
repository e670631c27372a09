# estates/config.py
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    database_url: str = Field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./data/estates.db"))
    base_url: str = Field(default_factory=lambda: os.getenv("BASE_URL", "http://localhost:8000"))
    site_url: str = Field(default_factory=lambda: os.getenv("SITE_URL", "http://localhost:8000"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    public_dir: Path = Field(default_factory=lambda: Path(os.getenv("PUBLIC_DIR", "public")))
    data_dir: Path = Field(default_factory=lambda: Path(os.getenv("APP_DATA_DIR", "data")))
    cors_origins: List[str] = Field(default_factory=_origins)
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @property
    def upload_root(self) -> Path:
        return self.public_dir / "uploads"

    @property
    def upload_dir(self) -> Path:
        # served at /uploads/images/<file>
        return self.upload_root / "images"
