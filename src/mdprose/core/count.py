"""Word counting over normalized markdown"""

from mdprose.core.normalize import normalize


def words(text: str) -> list[str]:
    """Return the whitespace-separated tokens of the normalized text."""
    return normalize(text).split()


def word_count(text: str) -> int:
    """Count words in markdown, ignoring syntax, annotation payloads, and sentinels."""
    plain = normalize(text).strip()
    if not plain:
        return 0
    return len(plain.split())
