from .models import Word, ContextSentence, GrammarRule, Verb, ValidationError
from .interfaces import Storage, StorageError, TranslationProvider, Cache
from .cache import MemoryCache
from .review import (
    InvalidTransition, RecordAnswer, MarkLearned, UndoLearned, SetRepeatList,
    apply_transition, apply_update
)
from .queue import StudyQueue, filter_words, build_queue, advance, reset, current, is_complete
from .search import normalize_query, match_priority, search_sentences, CachedSearch
from .config import (
    LEVELS, CUSTOM_LEVEL, STUDY_MODES, REVIEW_SUB_MODES, ANSWERS,
    GRADUATION_STREAK, SEARCH_RESULT_LIMIT
)

__all__ = [
    'Word', 'ContextSentence', 'GrammarRule', 'Verb', 'ValidationError',
    'Storage', 'StorageError', 'TranslationProvider', 'Cache', 'MemoryCache',
    'InvalidTransition', 'RecordAnswer', 'MarkLearned', 'UndoLearned', 'SetRepeatList',
    'apply_transition', 'apply_update',
    'StudyQueue', 'filter_words', 'build_queue', 'advance', 'reset', 'current', 'is_complete',
    'normalize_query', 'match_priority', 'search_sentences', 'CachedSearch',
    'LEVELS', 'CUSTOM_LEVEL', 'STUDY_MODES', 'REVIEW_SUB_MODES', 'ANSWERS',
    'GRADUATION_STREAK', 'SEARCH_RESULT_LIMIT'
]
