"""Text helpers shared by the lookup stages."""

import re
from typing import Iterable, List
from urllib.parse import quote

# Characters left unescaped by encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"

_WHITESPACE_RUN = re.compile(r"\s+")


def encode_component(text: str) -> str:
    """Percent-encode a single URL component (UTF-8)."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def collapse_whitespace(text: str) -> str:
    """Trim text and collapse every whitespace run into a single space."""
    return _WHITESPACE_RUN.sub(" ", text.strip())


def unique_lines(lines: Iterable[str]) -> List[str]:
    """Deduplicate preserving first occurrence, dropping empty strings."""
    seen = set()
    result = []
    for line in lines:
        if not line or line in seen:
            continue
        seen.add(line)
        result.append(line)
    return result
