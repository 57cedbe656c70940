"""Console UI for woord application."""

import logging

import requests

from core.cache import MemoryCache
from core.config import MODE_REVIEW, ANSWER_KNOW, ANSWER_DONT_KNOW, GRADUATION_STREAK
from core.queue import StudyQueue, current, advance, reset, is_complete, remaining
from core.search import CachedSearch
from cli.api_client import WoordAPIClient

logger = logging.getLogger(__name__)


def error_message(e: requests.RequestException) -> str:
    """Prefer the server's JSON message over the HTTP status line."""
    if e.response is not None:
        try:
            return e.response.json().get('message') or str(e)
        except ValueError:
            pass
    return str(e)


class ConsoleUI:
    """Console user interface for woord application."""

    def __init__(self, client: WoordAPIClient, lang: str = 'en', input_fn=input):
        self.client = client
        self.lang = lang
        self.input = input_fn
        # One cache per console session; the sentence corpus does not change
        self.search = CachedSearch(client, MemoryCache())

    def connect(self) -> bool:
        """Check the server is reachable before starting a command."""
        try:
            self.client.health_check()
        except requests.RequestException as e:
            logger.error(f"Health check failed: {e}")
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return False
        return True

    def translation_of(self, word) -> str:
        return getattr(word, f'translation_{self.lang}', '') or word.translation_en

    def print_card(self, word, queue: StudyQueue, mode: str):
        """Print the front of a flashcard."""
        print('\n' + '=' * 40)
        print(f'  {word.dutch}')
        if mode == MODE_REVIEW:
            print(f'  progress: {word.repeat_known_count}/{GRADUATION_STREAK}')
        print(f'  ({remaining(queue)} left)')
        print('=' * 40)

    def print_failures(self, failures: list):
        print(f'\n{len(failures)} answer(s) could not be saved:')
        for word, error in failures:
            print(f'  {word.dutch}: {error}')

    def fetch_queue(self, mode: str, level: str = None, sub_mode: str = None) -> StudyQueue | None:
        try:
            return StudyQueue(self.client.get_queue(mode, level, sub_mode))
        except requests.RequestException as e:
            logger.error(f"Could not load words: {e}")
            print(f'Could not load words: {e}')
            return None

    def study(self, mode: str, level: str = None, sub_mode: str = None) -> list:
        """Run a flashcard session. Returns the answers that failed to save."""
        queue = self.fetch_queue(mode, level, sub_mode)
        if queue is None:
            return []
        if len(queue) == 0:
            print('Nothing to study here.')
            return []

        failures = []
        while True:
            while not is_complete(queue):
                word = current(queue)
                self.print_card(word, queue, mode)
                choice = self.input('[k]now / [d]on\'t know / [s]how / [q]uit > ').strip().lower()
                if choice == 'q':
                    self.summarize(failures)
                    return failures
                if choice == 's':
                    print(f'  -> {self.translation_of(word)}')
                    continue
                if choice not in ('k', 'd'):
                    continue
                answer = ANSWER_KNOW if choice == 'k' else ANSWER_DONT_KNOW
                try:
                    self.client.answer(word.id, mode, answer, sub_mode)
                except requests.RequestException as e:
                    # Keep studying; the failure is reported at the end
                    logger.warning(f"Answer for word {word.id} not saved: {e}")
                    failures.append((word, e))
                if answer == ANSWER_DONT_KNOW:
                    print(f'  -> {self.translation_of(word)}')
                queue = advance(queue)

            print('\nSession complete!')
            choice = self.input('[r]estart / [q]uit > ').strip().lower()
            if choice != 'r':
                break
            fresh = self.fetch_queue(mode, level, sub_mode)
            queue = fresh if fresh is not None else reset(queue)
            if len(queue) == 0:
                print('Nothing left to study here.')
                break

        self.summarize(failures)
        return failures

    def summarize(self, failures: list):
        if failures:
            self.print_failures(failures)

    def search_loop(self):
        """Search example sentences until an empty query is entered."""
        while True:
            query = self.input('search (empty to quit) > ')
            if not query.strip():
                return
            results = self.search.search(query)
            if not results:
                print('  no sentences found')
                continue
            for sentence in results:
                level = f' [{sentence.level}]' if sentence.level else ''
                print(f'  {sentence.dutch}{level}')
                print(f'      {sentence.english}')

    def show_learned(self, level: str = None):
        queue = self.fetch_queue('learned', level)
        if queue is None:
            return
        if len(queue) == 0:
            print('No learned words at this level yet.')
            return
        for word in queue.items:
            print(f'  {word.id:>5}  {word.dutch:<25} {self.translation_of(word)}')

    def undo_learned(self, word_id: int):
        try:
            word = self.client.undo_learned(word_id)
        except requests.RequestException as e:
            print(f'Could not undo: {e}')
            return
        print(f'{word.dutch} is back in study.')

    def add_word(self, dutch: str, translations: dict, level: str = None,
                 in_repeat_list: bool = False):
        """Add a word, pre-filling missing translations from the server."""
        if not all(translations.get(lang) for lang in ('en', 'ru', 'uk')):
            try:
                suggested = self.client.translate(dutch)
            except requests.RequestException as e:
                logger.warning(f"Translation pre-fill failed: {e}")
                suggested = {}
            translations = {
                lang: translations.get(lang) or suggested.get(lang) or ''
                for lang in ('en', 'ru', 'uk')
            }
        try:
            word = self.client.add_word(
                dutch,
                translation_en=translations.get('en', ''),
                translation_ru=translations.get('ru', ''),
                translation_uk=translations.get('uk', ''),
                level=level,
                in_repeat_list=in_repeat_list
            )
        except requests.RequestException as e:
            print(f'Could not add word: {error_message(e)}')
            return None
        print(f'Added {word.dutch} ({word.level})')
        return word
