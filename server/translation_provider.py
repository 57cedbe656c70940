"""MyMemory translation provider implementation."""

import logging
import os
from concurrent.futures import ThreadPoolExecutor

import requests

from core.config import TRANSLATION_LANGUAGES, TRANSLATION_MIN_LENGTH, LANGUAGE
from core.interfaces import TranslationProvider, Cache
from core.utils import capitalize_first, normalize_text

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'https://api.mymemory.translated.net/get'


class MyMemoryProvider(TranslationProvider):
    """Looks words up in the public MyMemory API, one request per language.

    Results are best-effort: a failed or echoed translation becomes ''.
    Successful lookups are stored in the injected cache.
    """

    def __init__(self, cache: Cache, api_url: str = None, timeout: float = None,
                 session: requests.Session = None):
        self.cache = cache
        self.api_url = api_url or os.environ.get('WOORD_TRANSLATE_URL', DEFAULT_API_URL)
        self.timeout = timeout or float(os.environ.get('WOORD_TRANSLATE_TIMEOUT', '5'))
        self.session = session or requests.Session()

    def _lookup(self, word: str, target: str) -> str:
        try:
            response = self.session.get(
                self.api_url,
                params={'q': word, 'langpair': f'{LANGUAGE}|{target}'},
                timeout=self.timeout
            )
            response.raise_for_status()
            text = (response.json().get('responseData') or {}).get('translatedText') or ''
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Translation lookup failed for {word!r} ({target}): {e}")
            return ''
        text = text.strip()
        # MyMemory echoes the input when it has nothing better
        if not text or text.lower() == word.lower():
            return ''
        return capitalize_first(text)

    def translate(self, word: str) -> dict:
        word = normalize_text(word)
        empty = {lang: '' for lang in TRANSLATION_LANGUAGES}
        if len(word) < TRANSLATION_MIN_LENGTH:
            return empty
        cached = self.cache.get(word)
        if cached is not None:
            return cached
        # One request per language, all in flight at once
        with ThreadPoolExecutor(max_workers=len(TRANSLATION_LANGUAGES)) as pool:
            texts = pool.map(lambda lang: self._lookup(word, lang), TRANSLATION_LANGUAGES)
        result = dict(zip(TRANSLATION_LANGUAGES, texts))
        if any(result.values()):
            self.cache.set(word, result)
        return result
