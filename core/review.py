"""Review state machine: how study actions change a word's progress.

Every change to progress fields goes through one of the transitions below.
``apply_transition`` is pure: it reads the current word and returns the
partial update to persist, so the caller decides when and where to write it.

    new / my     + know       -> is_learned
    new / my     + dont-know  -> wrong_count + 1
    review       + know       -> repeat_known_count + 1, graduates at 5
    review       + dont-know  -> wrong_count + 1, repeat_known_count = 0
"""

from .config import (
    ANSWER_MODES, ANSWERS, ANSWER_KNOW, MODE_REVIEW,
    REVIEW_SUB_MODES, SUB_MODE_WEAK, GRADUATION_STREAK
)
from .models import Word


class InvalidTransition(ValueError):
    """Raised for an unknown mode, sub-mode or answer."""


class Transition:
    """Base class for study actions."""

    name = None

    def to_dict(self) -> dict:
        return {'type': self.name}

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()})"


class RecordAnswer(Transition):
    """The user answered know / dont-know on a flashcard."""

    name = 'answer'

    def __init__(self, mode: str, answer: str, sub_mode: str = None):
        if mode not in ANSWER_MODES:
            raise InvalidTransition(f"Cannot answer in mode: {mode}")
        if answer not in ANSWERS:
            raise InvalidTransition(f"Unknown answer: {answer}")
        if mode == MODE_REVIEW:
            sub_mode = sub_mode or SUB_MODE_WEAK
            if sub_mode not in REVIEW_SUB_MODES:
                raise InvalidTransition(f"Unknown review sub-mode: {sub_mode}")
        else:
            sub_mode = None
        self.mode = mode
        self.answer = answer
        self.sub_mode = sub_mode

    def to_dict(self) -> dict:
        return {
            'type': self.name,
            'mode': self.mode,
            'answer': self.answer,
            'sub_mode': self.sub_mode
        }


class MarkLearned(Transition):
    name = 'learn'


class UndoLearned(Transition):
    name = 'undo_learned'


class SetRepeatList(Transition):
    """Add a word to, or remove it from, the manual repetition list."""

    name = 'repeat_list'

    def __init__(self, in_list: bool):
        self.in_list = bool(in_list)

    def to_dict(self) -> dict:
        return {'type': self.name, 'in_list': self.in_list}


def _answer_update(word: Word, transition: RecordAnswer) -> dict:
    know = transition.answer == ANSWER_KNOW
    if transition.mode != MODE_REVIEW:
        if know:
            return {'is_learned': True}
        return {'wrong_count': word.wrong_count + 1}

    if not know:
        return {'wrong_count': word.wrong_count + 1, 'repeat_known_count': 0}

    streak = min(word.repeat_known_count + 1, GRADUATION_STREAK)
    update = {'repeat_known_count': streak}
    if streak >= GRADUATION_STREAK:
        update['is_learned'] = True
        update['in_repeat_list'] = False
    return update


def apply_transition(word: Word, transition: Transition) -> dict:
    """Compute the partial progress update for a study action."""
    if isinstance(transition, RecordAnswer):
        return _answer_update(word, transition)
    if isinstance(transition, MarkLearned):
        return {'is_learned': True}
    if isinstance(transition, UndoLearned):
        return {'is_learned': False, 'known_count': 0, 'repeat_known_count': 0}
    if isinstance(transition, SetRepeatList):
        return {'in_repeat_list': transition.in_list}
    raise InvalidTransition(f"Unknown transition: {transition!r}")


def apply_update(word: Word, update: dict) -> Word:
    """Return a copy of ``word`` with ``update`` applied."""
    data = word.to_dict()
    data.update(update)
    return Word.from_dict(data)

