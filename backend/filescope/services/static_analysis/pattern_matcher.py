"""
FileScope Pattern Matcher

Scan extracted strings for:
- Suspicious keywords (case-insensitive literal substrings, with counts)
- Network indicators (http/https URLs and dotted-quad IPv4 tokens)
"""

import re
from typing import Iterable, List, Sequence

from filescope.models.static_analysis import KeywordHit
from filescope.utils.constants import SUSPICIOUS_KEYWORDS


class PatternMatcher:
    """
    Keyword and indicator matching over extracted strings.

    Strings are joined with a newline before scanning. Extracted strings
    never contain a newline, and no configured keyword or indicator
    pattern matches across one.
    """

    SEPARATOR = '\n'

    # Lowercase scheme only; URL runs end at whitespace, quotes, angle
    # brackets or backticks
    URL_PATTERN = re.compile(r'https?://[^\s"\'<>`]+')

    # No octet range check: 999.1.1.1 is harvested too
    IPV4_PATTERN = re.compile(r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}')

    def __init__(self, keywords: Sequence[str] = SUSPICIOUS_KEYWORDS):
        """
        Args:
            keywords: Suspicious keywords in priority order. Regex
                metacharacters are matched literally.
        """
        # dict keeps first occurrence order and drops duplicates
        self.keywords = tuple(dict.fromkeys(k for k in keywords if k))
        self._keyword_patterns = tuple(
            (keyword, re.compile(re.escape(keyword.lower())))
            for keyword in self.keywords
        )

    def find_keywords(self, strings: Iterable[str]) -> List[KeywordHit]:
        """
        Count occurrences of each configured keyword.

        Args:
            strings: Extracted strings

        Returns:
            Hits with count > 0, highest count first; equal counts keep
            the configured keyword order
        """
        haystack = self.SEPARATOR.join(strings).lower()
        if not haystack:
            return []

        hits = []
        for keyword, pattern in self._keyword_patterns:
            count = sum(1 for _ in pattern.finditer(haystack))
            if count:
                hits.append(KeywordHit(keyword=keyword, count=count))

        # sorted() is stable
        return sorted(hits, key=lambda hit: hit.count, reverse=True)

    def find_indicators(self, strings: Iterable[str]) -> List[str]:
        """
        Harvest URLs and IPv4-shaped tokens.

        Returns:
            Unique indicators, URLs first, each group in first-seen order
        """
        text = self.SEPARATOR.join(strings)
        if not text:
            return []

        found = self.URL_PATTERN.findall(text) + self.IPV4_PATTERN.findall(text)
        return list(dict.fromkeys(found))
