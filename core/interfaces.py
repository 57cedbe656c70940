"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class StorageError(Exception):
    """Raised when the store cannot complete a read or write."""


class Cache(ABC):
    """Key/value cache injected where results are memoised."""

    @abstractmethod
    def get(self, key: str, default=None):
        """Return the cached value or ``default``."""
        pass

    @abstractmethod
    def set(self, key: str, value) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def __contains__(self, key: str) -> bool:
        pass


class TranslationProvider(ABC):
    """Best-effort word translation used to pre-fill the add-word form."""

    @abstractmethod
    def translate(self, word: str) -> dict:
        """Translate a Dutch word. Returns {en, ru, uk}; missing ones are ''."""
        pass


class Storage(ABC):
    """Abstract base class for vocabulary, rule, verb and sentence storage."""

    # Words

    @abstractmethod
    def list_words(self) -> list:
        """Return all words. Raises StorageError if the store is unreachable."""
        pass

    @abstractmethod
    def get_word(self, word_id: int):
        """Return the Word or None."""
        pass

    @abstractmethod
    def create_word(self, fields: dict):
        """Insert a validated word (see Word.validate_new). Returns the Word."""
        pass

    @abstractmethod
    def update_word(self, word_id: int, fields: dict):
        """Set the given columns. Returns the updated Word or None if not found."""
        pass

    @abstractmethod
    def transition_word(self, word_id: int, transition):
        """Apply a review transition atomically.
        Returns the updated Word or None if not found."""
        pass

    @abstractmethod
    def delete_word(self, word_id: int) -> bool:
        """Delete a word. Returns True if it existed."""
        pass

    # Grammar rules

    @abstractmethod
    def list_rules(self) -> list:
        pass

    @abstractmethod
    def create_rule(self, fields: dict):
        """Insert a validated rule. Returns the GrammarRule."""
        pass

    # Irregular verbs

    @abstractmethod
    def list_verbs(self) -> list:
        pass

    @abstractmethod
    def update_verb(self, verb_id: int, fields: dict):
        """Returns the updated Verb or None if not found."""
        pass

    # Context sentences

    @abstractmethod
    def search_context(self, query: str) -> list:
        """Return up to SEARCH_RESULT_LIMIT sentences matching a normalised query."""
        pass

    @abstractmethod
    def count_context(self) -> int:
        pass

    @abstractmethod
    def bulk_insert_context(self, sentences: list[dict]) -> None:
        """Insert sentences given as {dutch, english, level} dicts."""
        pass

    # Seeding

    @abstractmethod
    def seed(self, words: list[dict], rules: list[dict], verbs: list[dict],
             sentences: list[dict]) -> None:
        """Insert each collection only if its table is empty."""
        pass
