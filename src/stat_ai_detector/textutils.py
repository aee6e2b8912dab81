from __future__ import annotations

import re
from typing import List

WHITESPACE_RE = re.compile(r"\s+")
# Unicode letters and numbers (\w minus underscore) plus the apostrophe.
TOKEN_RE = re.compile(r"(?:[^\W_]|')+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim the result."""
    return WHITESPACE_RE.sub(" ", text).strip()


def word_tokens(text: str) -> List[str]:
    """Lowercase word tokens made of letters, numbers and apostrophes."""
    lowered = text.lower().replace("\u2019", "'")
    return [match for match in TOKEN_RE.findall(lowered) if match]
