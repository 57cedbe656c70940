"""Study queue: which words to show, in which order, and where we are."""

from .config import (
    STUDY_MODES, MODE_NEW, MODE_MY, MODE_LEARNED, MODE_REVIEW,
    REVIEW_SUB_MODES, SUB_MODE_WEAK, DEFAULT_LEVEL
)
from .models import Word
from .utils import sort_key


def _matches(word: Word, mode: str, level: str, sub_mode: str) -> bool:
    if mode == MODE_NEW:
        return not word.is_user_added and not word.is_learned and word.level == level
    if mode == MODE_MY:
        return word.is_user_added and not word.is_learned and word.known_count == 0
    if mode == MODE_LEARNED:
        return word.is_learned and word.level == level
    if sub_mode == SUB_MODE_WEAK:
        return not word.is_learned and word.wrong_count > 0
    return not word.is_learned and word.in_repeat_list


def filter_words(words: list[Word], mode: str, level: str = None,
                 sub_mode: str = None) -> list[Word]:
    """Select and order the words for a study mode.

    ``level`` applies to the new and learned modes, ``sub_mode`` (weak or
    list) to review. Ordering is by Dutch text, case-insensitive with
    accents ignored; equal keys keep their input order.
    """
    if mode not in STUDY_MODES:
        raise ValueError(f"Unknown study mode: {mode}")
    level = level or DEFAULT_LEVEL
    if mode == MODE_REVIEW:
        sub_mode = sub_mode or SUB_MODE_WEAK
        if sub_mode not in REVIEW_SUB_MODES:
            raise ValueError(f"Unknown review sub-mode: {sub_mode}")

    selected = [w for w in words if _matches(w, mode, level, sub_mode)]
    return sorted(selected, key=lambda w: sort_key(w.dutch))


class StudyQueue:
    """Immutable snapshot of a study session: the items and a cursor."""

    def __init__(self, items: list, cursor: int = 0):
        self.items = tuple(items)
        self.cursor = max(0, min(cursor, len(self.items)))

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, StudyQueue):
            return NotImplemented
        return self.items == other.items and self.cursor == other.cursor

    def __repr__(self) -> str:
        return f"StudyQueue(cursor={self.cursor}, size={len(self.items)})"


def build_queue(words: list[Word], mode: str, level: str = None,
                sub_mode: str = None) -> StudyQueue:
    return StudyQueue(filter_words(words, mode, level, sub_mode))


def current(queue: StudyQueue):
    """The item under the cursor, or None when the session is complete."""
    if is_complete(queue):
        return None
    return queue.items[queue.cursor]


def advance(queue: StudyQueue) -> StudyQueue:
    """Move to the next item. Past the end the queue stays complete."""
    return StudyQueue(queue.items, queue.cursor + 1)


def reset(queue: StudyQueue) -> StudyQueue:
    return StudyQueue(queue.items, 0)


def is_complete(queue: StudyQueue) -> bool:
    return queue.cursor >= len(queue.items)


def remaining(queue: StudyQueue) -> int:
    return len(queue.items) - queue.cursor
