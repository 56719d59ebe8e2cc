# electrolight/normalize.py
import re
from collections.abc import Mapping
from urllib.parse import unquote
from typing import Any, List, Optional

# ---------------------------------------------------------
# 🧹 ID normalization (fixes %0A and control chars)
# ---------------------------------------------------------
_CTRL = ''.join(map(chr, list(range(0, 32)) + [127]))
_CTRL_TABLE = str.maketrans('', '', _CTRL)
_RE_TRAILING_NEWLINES = re.compile(r'(?:%0A|%0D)+$', re.IGNORECASE)


def normalize_id(raw: Optional[str]) -> str:
    """
    Normalize a catalog id taken from a URL path:
      - Strip whitespace, quotes, encoded newlines (%0A/%0D)
      - Decode URL-encoded chars
      - Remove control / zero-width chars
    """
    if raw is None:
        return ""
    s = str(raw).strip().strip('"').strip("'")
    s = _RE_TRAILING_NEWLINES.sub('', s)
    s = unquote(s)
    s = s.replace('\u200b', '').replace('\ufeff', '')
    s = s.translate(_CTRL_TABLE)
    return s.strip()


# ---------------------------------------------------------
# 🔤 Text helpers shared by ranking and search
# ---------------------------------------------------------
def field(item: Any, name: str, default: Any = None) -> Any:
    """Read `name` from a mapping or an object; absent means `default`."""
    if isinstance(item, Mapping):
        return item.get(name, default)
    return getattr(item, name, default)


def normalize_query(q: Optional[str]) -> str:
    """Trim and lower-case a search query; None becomes ''."""
    if not isinstance(q, str):
        return ""
    return q.strip().lower()


def first_token(text: str) -> str:
    """First whitespace-delimited token, lower-cased ('' for blank text)."""
    parts = text.lower().split()
    return parts[0] if parts else ""


def name_words(name: Optional[str]) -> List[str]:
    if not name:
        return []
    return name.lower().split()


def contains(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive containment; a missing haystack never matches."""
    if not haystack:
        return False
    return needle in str(haystack).lower()
