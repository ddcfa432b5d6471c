"""Comment content filter.

Pure text checks used to decide whether a comment may be auto-approved.
"""

import re
from typing import Iterable

from .base import Service

_LINK_PATTERN = re.compile(r"(https?://\S+)|(www\.\S+)")


class ContentFilter(Service):
    """Forbidden-word and spam-likelihood detection.

    Stateless: the word list and link limit are fixed at construction.
    Length limits are enforced by callers, not here.
    """

    def __init__(self, forbidden_words: Iterable[str], max_links: int = 2) -> None:
        """Initialize content filter.

        Args:
            forbidden_words: Substrings that must not appear (case-insensitive)
            max_links: Link count above which content is likely spam
        """
        self.forbidden_words = tuple(w.lower() for w in forbidden_words if w)
        self.max_links = max_links

    def contains_forbidden_words(self, text: str) -> bool:
        """Check for forbidden substrings.

        Matching is not word-boundary aware: "sex" matches "Essex".
        """
        lowered = text.lower()
        return any(word in lowered for word in self.forbidden_words)

    def count_links(self, text: str) -> int:
        """Count http://, https:// and www. tokens (whitespace-delimited)."""
        return len(_LINK_PATTERN.findall(text))

    def is_likely_spam(self, text: str) -> bool:
        """Forbidden words or more links than allowed."""
        return (
            self.contains_forbidden_words(text)
            or self.count_links(text) > self.max_links
        )
