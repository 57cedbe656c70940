"""REST API client for woord server."""

import requests
from typing import Optional

from core.models import Word, ContextSentence


class WoordAPIClient:
    """Client for communicating with the woord REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None):
        """Make a GET request."""
        response = self.session.get(f"{self.base_url}{endpoint}", params=params or {},
                                    timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None):
        """Make a POST request."""
        response = self.session.post(f"{self.base_url}{endpoint}", json=data or {},
                                     timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        return self._get("/api/health")

    def get_queue(self, mode: str, level: Optional[str] = None,
                  sub_mode: Optional[str] = None) -> list[Word]:
        """Get the ordered study queue for a mode."""
        params = {'mode': mode}
        if level:
            params['level'] = level
        if sub_mode:
            params['sub_mode'] = sub_mode
        data = self._get("/api/words/queue", params)
        return [Word.from_dict(w) for w in data['words']]

    def add_word(self, dutch: str, translation_en: str = '', translation_ru: str = '',
                 translation_uk: str = '', level: Optional[str] = None,
                 in_repeat_list: bool = False) -> Word:
        return Word.from_dict(self._post("/api/words", {
            'dutch': dutch,
            'translation_en': translation_en,
            'translation_ru': translation_ru,
            'translation_uk': translation_uk,
            'level': level,
            'in_repeat_list': in_repeat_list
        }))

    def answer(self, word_id: int, mode: str, answer: str,
               sub_mode: Optional[str] = None) -> Word:
        """Submit a know / dont-know answer."""
        return Word.from_dict(self._post(f"/api/words/{word_id}/answer", {
            'mode': mode,
            'answer': answer,
            'sub_mode': sub_mode
        }))

    def undo_learned(self, word_id: int) -> Word:
        return Word.from_dict(self._post(f"/api/words/{word_id}/undo-learned"))

    def translate(self, word: str) -> dict:
        return self._get("/api/translate", {'word': word})

    def search_context(self, query: str) -> list[ContextSentence]:
        return [ContextSentence.from_dict(s) for s in self._get("/api/context", {'q': query})]
