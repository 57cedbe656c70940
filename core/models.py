"""Domain models for woord application."""

from .config import LEVELS, CUSTOM_LEVEL


class ValidationError(ValueError):
    """Raised when a record is created or edited with bad fields."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field


def _require_text(fields: dict, name: str) -> str:
    value = fields.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} is required", field=name)
    return value.strip()


def _optional_text(fields: dict, name: str) -> str:
    value = fields.get(name)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string", field=name)
    return value.strip()


class Word:
    """A vocabulary entry together with its study progress."""

    # Fields the review state machine owns; never edited directly
    PROGRESS_FIELDS = (
        'is_learned', 'known_count', 'wrong_count',
        'repeat_known_count', 'in_repeat_list'
    )
    CONTENT_FIELDS = ('dutch', 'translation_en', 'translation_ru', 'translation_uk', 'level')

    def __init__(self, id: int, dutch: str, translation_en: str = '', translation_ru: str = '',
                 translation_uk: str = '', level: str = None, is_user_added: bool = False,
                 is_learned: bool = False, known_count: int = 0, wrong_count: int = 0,
                 repeat_known_count: int = 0, in_repeat_list: bool = False):
        self.id = id
        self.dutch = dutch
        self.translation_en = translation_en
        self.translation_ru = translation_ru
        self.translation_uk = translation_uk
        self.level = level
        self.is_user_added = is_user_added
        self.is_learned = is_learned
        self.known_count = known_count
        self.wrong_count = wrong_count
        self.repeat_known_count = repeat_known_count
        self.in_repeat_list = in_repeat_list

    @property
    def is_weak(self) -> bool:
        """At least one wrong answer and not yet learned."""
        return self.wrong_count > 0 and not self.is_learned

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'dutch': self.dutch,
            'translation_en': self.translation_en,
            'translation_ru': self.translation_ru,
            'translation_uk': self.translation_uk,
            'level': self.level,
            'is_user_added': self.is_user_added,
            'is_learned': self.is_learned,
            'known_count': self.known_count,
            'wrong_count': self.wrong_count,
            'repeat_known_count': self.repeat_known_count,
            'in_repeat_list': self.in_repeat_list
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Word':
        return cls(
            id=data['id'],
            dutch=data['dutch'],
            translation_en=data.get('translation_en') or '',
            translation_ru=data.get('translation_ru') or '',
            translation_uk=data.get('translation_uk') or '',
            level=data.get('level'),
            is_user_added=bool(data.get('is_user_added', False)),
            is_learned=bool(data.get('is_learned', False)),
            known_count=int(data.get('known_count') or 0),
            wrong_count=int(data.get('wrong_count') or 0),
            repeat_known_count=int(data.get('repeat_known_count') or 0),
            in_repeat_list=bool(data.get('in_repeat_list', False))
        )

    @staticmethod
    def validate_new(fields: dict) -> dict:
        """Validate fields for a new word and fill defaults.

        Returns a dict with every column except ``id``. Progress always
        starts from zero, except ``in_repeat_list`` which a user may set
        when adding a word straight to the repetition list.
        """
        dutch = _require_text(fields, 'dutch')
        translations = {
            name: _optional_text(fields, name)
            for name in ('translation_en', 'translation_ru', 'translation_uk')
        }
        if not any(translations.values()):
            raise ValidationError("At least one translation is required", field='translation_en')

        is_user_added = bool(fields.get('is_user_added', True))
        level = fields.get('level')
        if level is None or level == '':
            if not is_user_added:
                raise ValidationError("level is required for base vocabulary", field='level')
            level = CUSTOM_LEVEL
        if level not in LEVELS and level != CUSTOM_LEVEL:
            raise ValidationError(f"Unknown level: {level}", field='level')

        return {
            'dutch': dutch,
            **translations,
            'level': level,
            'is_user_added': is_user_added,
            'is_learned': False,
            'known_count': 0,
            'wrong_count': 0,
            'repeat_known_count': 0,
            'in_repeat_list': bool(fields.get('in_repeat_list', False))
        }

    @classmethod
    def validate_edit(cls, fields: dict) -> dict:
        """Validate a content edit. Progress fields are rejected."""
        for name in fields:
            if name in cls.PROGRESS_FIELDS:
                raise ValidationError(f"{name} can only change through a study action", field=name)
            if name not in cls.CONTENT_FIELDS:
                raise ValidationError(f"Unknown field: {name}", field=name)
        cleaned = {}
        if 'dutch' in fields:
            cleaned['dutch'] = _require_text(fields, 'dutch')
        for name in ('translation_en', 'translation_ru', 'translation_uk'):
            if name in fields:
                cleaned[name] = _optional_text(fields, name)
        if 'level' in fields:
            level = fields['level']
            if level not in LEVELS and level != CUSTOM_LEVEL:
                raise ValidationError(f"Unknown level: {level}", field='level')
            cleaned['level'] = level
        return cleaned

    def __eq__(self, other) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Word(id={self.id!r}, dutch={self.dutch!r}, level={self.level!r})"


class ContextSentence:
    """An example sentence with its English translation."""

    def __init__(self, id: int, dutch: str, english: str, level: str = None):
        self.id = id
        self.dutch = dutch
        self.english = english
        self.level = level

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'dutch': self.dutch,
            'english': self.english,
            'level': self.level
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ContextSentence':
        return cls(data.get('id'), data['dutch'], data['english'], data.get('level'))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ContextSentence):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"ContextSentence(id={self.id!r}, dutch={self.dutch!r})"


class GrammarRule:
    """A grammar explanation tagged with a CEFR level."""

    def __init__(self, id: int, title: str, explanation: str, difficulty: str,
                 title_en: str = '', explanation_en: str = '',
                 title_uk: str = '', explanation_uk: str = ''):
        self.id = id
        self.title = title
        self.explanation = explanation
        self.difficulty = difficulty
        self.title_en = title_en
        self.explanation_en = explanation_en
        self.title_uk = title_uk
        self.explanation_uk = explanation_uk

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'explanation': self.explanation,
            'difficulty': self.difficulty,
            'title_en': self.title_en,
            'explanation_en': self.explanation_en,
            'title_uk': self.title_uk,
            'explanation_uk': self.explanation_uk
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GrammarRule':
        return cls(
            id=data.get('id'),
            title=data['title'],
            explanation=data['explanation'],
            difficulty=data['difficulty'],
            title_en=data.get('title_en') or '',
            explanation_en=data.get('explanation_en') or '',
            title_uk=data.get('title_uk') or '',
            explanation_uk=data.get('explanation_uk') or ''
        )

    @staticmethod
    def validate_new(fields: dict) -> dict:
        title = _require_text(fields, 'title')
        explanation = _require_text(fields, 'explanation')
        difficulty = fields.get('difficulty')
        if difficulty not in LEVELS:
            raise ValidationError(f"Unknown difficulty: {difficulty}", field='difficulty')
        return {
            'title': title,
            'explanation': explanation,
            'difficulty': difficulty,
            'title_en': _optional_text(fields, 'title_en'),
            'explanation_en': _optional_text(fields, 'explanation_en'),
            'title_uk': _optional_text(fields, 'title_uk'),
            'explanation_uk': _optional_text(fields, 'explanation_uk')
        }


class Verb:
    """An irregular verb with its principal parts."""

    def __init__(self, id: int, infinitive: str, past_singular: str, past_participle: str,
                 translation: str, example: str, is_learned: bool = False):
        self.id = id
        self.infinitive = infinitive
        self.past_singular = past_singular
        self.past_participle = past_participle
        self.translation = translation
        self.example = example
        self.is_learned = is_learned

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'infinitive': self.infinitive,
            'past_singular': self.past_singular,
            'past_participle': self.past_participle,
            'translation': self.translation,
            'example': self.example,
            'is_learned': self.is_learned
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Verb':
        return cls(
            id=data.get('id'),
            infinitive=data['infinitive'],
            past_singular=data['past_singular'],
            past_participle=data['past_participle'],
            translation=data['translation'],
            example=data.get('example') or '',
            is_learned=bool(data.get('is_learned', False))
        )
