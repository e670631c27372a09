# estates/services/storage.py
"""Image files on disk: saving uploads and best-effort removal."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Iterable, List, Optional, Protocol

logger = logging.getLogger(__name__)

UPLOAD_URL_SEGMENT = "/uploads/images/"
MAX_IMAGES = 10


class IncomingFile(Protocol):
    filename: Optional[str]
    file: BinaryIO


@dataclass(frozen=True)
class UploadedFile:
    original_filename: str
    storage_filename: str


def _basename(name: str) -> str:
    # Browsers on Windows may send full paths
    return PurePosixPath(name.replace("\\", "/")).name


def storage_filename(original: str, now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}-{_basename(original)}"


def save_uploads(files: Iterable[IncomingFile], upload_dir: Path) -> List[UploadedFile]:
    """Write each file under ``upload_dir`` and return the manifest in order.

    Parts without a filename (an empty file input) are ignored. Files already
    written stay on disk if a later step fails.
    """
    upload_dir.mkdir(parents=True, exist_ok=True)
    saved = []
    for incoming in files:
        if not incoming.filename or not _basename(incoming.filename):
            continue
        name = storage_filename(incoming.filename)
        with open(upload_dir / name, "wb") as buffer:
            buffer.write(incoming.file.read())
        saved.append(UploadedFile(original_filename=incoming.filename, storage_filename=name))
    return saved


def image_url(base_url: str, filename: str) -> str:
    return f"{base_url.rstrip('/')}{UPLOAD_URL_SEGMENT}{filename}"


def filename_from_url(url: str) -> Optional[str]:
    _, sep, rest = url.partition(UPLOAD_URL_SEGMENT)
    if not sep:
        return None
    name = _basename(rest)
    return name or None


@dataclass
class CleanupStep:
    target: str
    outcome: str  # "removed" | "missing" | "skipped" | "failed"
    error: Optional[str] = None


@dataclass
class CleanupReport:
    steps: List[CleanupStep] = field(default_factory=list)

    def count(self, outcome: str) -> int:
        return sum(1 for s in self.steps if s.outcome == outcome)

    @property
    def failed(self) -> List[CleanupStep]:
        return [s for s in self.steps if s.outcome == "failed"]


def remove_images(urls: Iterable[str], upload_dir: Path) -> CleanupReport:
    """Delete the files behind ``urls``, one independent attempt each. Never raises."""
    report = CleanupReport()
    for url in urls:
        name = filename_from_url(url)
        if name is None:
            report.steps.append(CleanupStep(url, "skipped"))
            continue
        path = upload_dir / name
        try:
            path.unlink()
        except FileNotFoundError:
            report.steps.append(CleanupStep(url, "missing"))
        except OSError as e:
            logger.warning("Could not delete image %s: %s", path, e)
            report.steps.append(CleanupStep(url, "failed", str(e)))
        else:
            report.steps.append(CleanupStep(url, "removed"))
    return report
