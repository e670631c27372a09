"""
Lenient coercion of raw form values.

Admin forms post everything as text. Bad numeric input never fails a
submission: it is replaced by a default, and the result says so through
``Parsed.defaulted`` so callers can log or test the substitution.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Union

CHECKBOX_ON = "on"


@dataclass(frozen=True)
class Parsed:
    value: Any
    defaulted: bool = False


def parse_number(raw: Optional[str], default: float = 0) -> Parsed:
    """Parse ``raw`` as a finite float.

    Blank text counts as zero (a cleared input), not as a substitution.
    Absent, non-numeric, NaN and infinite values yield ``default``.
    """
    if raw is None:
        return Parsed(default, defaulted=True)
    text = str(raw).strip()
    if not text:
        return Parsed(0.0)
    # float() also takes digit separators and non-ASCII digits
    if "_" in text or not text.isascii():
        return Parsed(default, defaulted=True)
    try:
        value = float(text)
    except ValueError:
        return Parsed(default, defaulted=True)
    if not math.isfinite(value):
        return Parsed(default, defaulted=True)
    return Parsed(value)


def parse_checkbox(raw: Optional[str]) -> Parsed:
    if raw is None:
        return Parsed(False, defaulted=True)
    return Parsed(raw == CHECKBOX_ON)


def parse_video_links(raw: Union[None, str, Sequence[str]]) -> List[str]:
    """Normalize a single link or a list of links; blank entries are dropped."""
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]
    links = []
    for item in raw:
        if item is None:
            continue
        link = str(item).strip()
        if link:
            links.append(link)
    return links
