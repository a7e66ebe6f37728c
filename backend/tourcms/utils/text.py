import re

import unicodedata



_WS = re.compile(r"\s+")

_PUNCT = re.compile(r"[^\w\s]", re.UNICODE)

SLUG_RE = re.compile(r"^[a-z0-9-]+$")



def normalize_key(s: str | None) -> str | None:

    """

    Lowercased, accents removed, punctuation stripped, whitespace collapsed.

    Returns None if empty after normalization.

    """

    if s is None:

        return None

    s = str(s).strip()

    if not s:

        return None

    # Unicode NFKD, remove diacritics

    s = unicodedata.normalize("NFKD", s)

    s = "".join(ch for ch in s if not unicodedata.combining(ch))

    s = s.lower()

    s = _PUNCT.sub(" ", s)

    s = _WS.sub(" ", s).strip()

    return s or None



def slugify(s: str | None) -> str | None:

    """'Leh & Ladakh (UT)' -> 'leh-ladakh-ut'."""

    key = normalize_key(s)

    if key is None:

        return None

    slug = re.sub(r"[^a-z0-9]+", "-", key).strip("-")

    return slug or None



def is_valid_slug(s: str) -> bool:

    return bool(SLUG_RE.match(s))
