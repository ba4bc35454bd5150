"""Search queries and their short identifiers."""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass

_TERM_PATTERNS = [
    re.compile(pattern, re.ASCII)
    for pattern in (
        r"(\w+)\[gene\]",
        r"(\w+)\[protein\]",
        r"(\w+)\[title\]",
        r'"([^"]+)"',
        r"(\w+)",
    )
]


@dataclass(frozen=True)
class Query:
    """A search expression."""

    content: str

    def query_id(self) -> str:
        """Return an identifier made of the first term and a short content hash."""
        prefix = extract_first_term(self.content)
        short_hash = hashlib.md5(self.content.encode("utf-8")).hexdigest()[:6]
        return f"{prefix}-{short_hash}"

    def __str__(self) -> str:
        return self.query_id()


def extract_first_term(content: str) -> str:
    """Return the most telling first term of a query: gene, protein, title, quoted text or word."""
    content = content.strip()
    if not content:
        return "EMPTY"
    for pattern in _TERM_PATTERNS:
        match = pattern.search(content)
        if match:
            return match.group(1)
    return content[:10]