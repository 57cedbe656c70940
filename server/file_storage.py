"""File-based storage implementation."""

import json
import logging
import os
import threading

from core.config import SEARCH_RESULT_LIMIT
from core.interfaces import Storage, StorageError
from core.models import Word, GrammarRule, Verb, ContextSentence
from core.review import apply_transition
from core.search import search_sentences

logger = logging.getLogger(__name__)


class FileStorage(Storage):
    """File-based storage implementation.

    Each collection lives in its own JSON file ``woord_<name>.json`` holding
    ``{"next_id": int, "items": [...]}``. Writes are serialised with a lock.
    """

    def __init__(self, state_dir: str = None):
        # Project root is one level up from server/
        project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.state_dir = state_dir or os.environ.get('WOORD_STATE_DIR') or project_root
        self._lock = threading.RLock()

    def _get_file(self, name: str) -> str:
        return os.path.join(self.state_dir, f'woord_{name}.json')

    def _load(self, name: str) -> dict:
        path = self._get_file(name)
        if not os.path.exists(path):
            return {'next_id': 1, 'items': []}
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading {path}: {e}")
            raise StorageError(f"Cannot read {name}") from e

    def _save(self, name: str, data: dict) -> None:
        path = self._get_file(name)
        tmp_path = path + '.tmp'
        try:
            os.makedirs(self.state_dir, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Error saving {path}: {e}")
            raise StorageError(f"Cannot write {name}") from e

    def _insert(self, name: str, fields: dict) -> dict:
        with self._lock:
            data = self._load(name)
            item = {'id': data['next_id'], **fields}
            data['items'].append(item)
            data['next_id'] += 1
            self._save(name, data)
            return item

    def _update(self, name: str, item_id: int, compute) -> dict | None:
        """Read-modify-write one item. ``compute(item) -> dict`` of new values."""
        with self._lock:
            data = self._load(name)
            for item in data['items']:
                if item['id'] == item_id:
                    item.update(compute(item))
                    self._save(name, data)
                    return item
            return None

    # Words

    def list_words(self) -> list[Word]:
        return [Word.from_dict(item) for item in self._load('words')['items']]

    def get_word(self, word_id: int) -> Word | None:
        for item in self._load('words')['items']:
            if item['id'] == word_id:
                return Word.from_dict(item)
        return None

    def create_word(self, fields: dict) -> Word:
        return Word.from_dict(self._insert('words', fields))

    def update_word(self, word_id: int, fields: dict) -> Word | None:
        item = self._update('words', word_id, lambda _: fields)
        return Word.from_dict(item) if item else None

    def transition_word(self, word_id: int, transition) -> Word | None:
        item = self._update(
            'words', word_id,
            lambda current: apply_transition(Word.from_dict(current), transition)
        )
        return Word.from_dict(item) if item else None

    def delete_word(self, word_id: int) -> bool:
        with self._lock:
            data = self._load('words')
            remaining = [item for item in data['items'] if item['id'] != word_id]
            if len(remaining) == len(data['items']):
                return False
            data['items'] = remaining
            self._save('words', data)
            return True

    # Grammar rules

    def list_rules(self) -> list[GrammarRule]:
        return [GrammarRule.from_dict(item) for item in self._load('rules')['items']]

    def create_rule(self, fields: dict) -> GrammarRule:
        return GrammarRule.from_dict(self._insert('rules', fields))

    # Irregular verbs

    def list_verbs(self) -> list[Verb]:
        return [Verb.from_dict(item) for item in self._load('verbs')['items']]

    def update_verb(self, verb_id: int, fields: dict) -> Verb | None:
        item = self._update('verbs', verb_id, lambda _: fields)
        return Verb.from_dict(item) if item else None

    # Context sentences

    def search_context(self, query: str) -> list[ContextSentence]:
        sentences = [ContextSentence.from_dict(item) for item in self._load('context')['items']]
        return search_sentences(sentences, query, SEARCH_RESULT_LIMIT)

    def count_context(self) -> int:
        return len(self._load('context')['items'])

    def bulk_insert_context(self, sentences: list[dict]) -> None:
        if not sentences:
            return
        with self._lock:
            data = self._load('context')
            for sentence in sentences:
                data['items'].append({
                    'id': data['next_id'],
                    'dutch': sentence['dutch'],
                    'english': sentence['english'],
                    'level': sentence.get('level')
                })
                data['next_id'] += 1
            self._save('context', data)

    # Seeding

    def seed(self, words: list[dict], rules: list[dict], verbs: list[dict],
             sentences: list[dict]) -> None:
        with self._lock:
            if not self._load('words')['items']:
                for fields in words:
                    self._insert('words', Word.validate_new(fields))
                logger.info(f"Seeded {len(words)} words")
            if not self._load('rules')['items']:
                for fields in rules:
                    self._insert('rules', GrammarRule.validate_new(fields))
                logger.info(f"Seeded {len(rules)} grammar rules")
            if not self._load('verbs')['items']:
                for fields in verbs:
                    self._insert('verbs', {**fields, 'is_learned': False})
                logger.info(f"Seeded {len(verbs)} verbs")
            if self.count_context() == 0:
                self.bulk_insert_context(sentences)
                logger.info(f"Seeded {len(sentences)} context sentences")
