"""Context sentence search: matching rules and a memoised front end."""

import logging

from .config import SEARCH_RESULT_LIMIT
from .interfaces import Cache
from .models import ContextSentence
from .utils import normalize_text

logger = logging.getLogger(__name__)

# Match kinds, best first
MATCH_EXACT = 1
MATCH_WORD = 2
MATCH_PREFIX = 3
MATCH_SUFFIX = 4
MATCH_SUBSTRING = 5


def normalize_query(query: str | None) -> str:
    return normalize_text(query)


def match_priority(text: str, query: str) -> int | None:
    """Return how well ``text`` matches an already normalised ``query``.

    Lower is better; None means no match. Plain string operations only, so
    characters like '.' or '*' in the query are always literal.
    """
    if not query:
        return None
    text = normalize_text(text)
    if text == query:
        return MATCH_EXACT
    if f' {query} ' in text:
        return MATCH_WORD
    if text.startswith(f'{query} '):
        return MATCH_PREFIX
    if text.endswith(f' {query}'):
        return MATCH_SUFFIX
    if query in text:
        return MATCH_SUBSTRING
    return None


def search_sentences(sentences: list[ContextSentence], query: str,
                     limit: int = SEARCH_RESULT_LIMIT) -> list[ContextSentence]:
    """All sentences matching ``query`` in corpus order, at most ``limit``."""
    q = normalize_query(query)
    if not q:
        return []
    results = []
    for sentence in sentences:
        if match_priority(sentence.dutch, q) is not None:
            results.append(sentence)
            if len(results) >= limit:
                break
    return results


def escape_like(value: str) -> str:
    """Escape SQL LIKE wildcards so they match literally (ESCAPE '\\')."""
    return value.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def like_patterns(query: str) -> dict:
    """LIKE patterns equivalent to ``match_priority``, keyed by match kind.

    The exact pattern is a plain value compared with '=' and is not escaped.
    """
    q = normalize_query(query)
    escaped = escape_like(q)
    return {
        MATCH_EXACT: q,
        MATCH_WORD: f'% {escaped} %',
        MATCH_PREFIX: f'{escaped} %',
        MATCH_SUFFIX: f'% {escaped}',
        MATCH_SUBSTRING: f'%{escaped}%'
    }


class CachedSearch:
    """Search front end that memoises results per normalised query.

    ``source`` is anything with a ``search_context(query)`` method: a
    Storage on the server, the API client in the console. The corpus is
    immutable after seeding, so entries never expire.
    """

    def __init__(self, source, cache: Cache):
        self.source = source
        self.cache = cache

    def search(self, query: str) -> list[ContextSentence]:
        q = normalize_query(query)
        if not q:
            return []
        cached = self.cache.get(q)
        if cached is not None:
            return cached
        try:
            results = self.source.search_context(q)
        except Exception as e:
            logger.warning(f"Context search failed for {q!r}: {e}")
            return []
        self.cache.set(q, results)
        return results
