"""Text helpers shared by the analyzers.

Markup is handled with regular expressions rather than an HTML parser so
that tag counts mean "opening tag occurrences" and malformed editor output
never raises.
"""

import re

TAG_PATTERN = re.compile(r'<[^>]*>')
WHITESPACE_PATTERN = re.compile(r'\s+')
SENTENCE_PATTERN = re.compile(r'[.!?]+')


def strip_tags(html: str) -> str:
    """Replace every tag with a space."""
    return TAG_PATTERN.sub(' ', html)


def split_words(text: str) -> list[str]:
    """Split text on whitespace, dropping empty pieces."""
    return text.split()


def split_sentences(text: str) -> list[str]:
    """Split text on runs of sentence terminators, dropping blank pieces."""
    return [s for s in SENTENCE_PATTERN.split(text) if s.strip()]


def raw_tokens(text: str) -> list[str]:
    """Split on whitespace runs, keeping the leading/trailing empty pieces.

    Keyword density is measured against this token count.
    """
    return WHITESPACE_PATTERN.split(text)


def count_html_words(html: str) -> int:
    """Number of words in an HTML fragment once tags are removed."""
    if not html:
        return 0
    return len(split_words(strip_tags(html)))
