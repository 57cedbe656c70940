"""Utility functions for woord application."""

import unicodedata


def normalize_text(text: str | None) -> str:
    """Trim and lowercase text for matching."""
    return (text or '').strip().lower()


def sort_key(text: str | None) -> tuple[str, str]:
    """Case-insensitive, accent-aware key for ordering Dutch words.

    Accents only break ties, so 'café' sorts right after 'cafe'.
    """
    folded = (text or '').casefold()
    decomposed = unicodedata.normalize('NFKD', folded)
    base = ''.join(c for c in decomposed if not unicodedata.combining(c))
    return (base, folded)


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leave the rest alone."""
    if not text:
        return text
    return text[0].upper() + text[1:]
