"""FastAPI server for woord application."""

import asyncio
import logging
import os

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from typing import Optional

logger = logging.getLogger(__name__)

from core.cache import MemoryCache
from core.config import LEVELS, TRANSLATION_LANGUAGES
from core.interfaces import Storage, StorageError, TranslationProvider
from core.models import Word, GrammarRule, ValidationError
from core.queue import filter_words
from core.review import (
    InvalidTransition, Transition, RecordAnswer, MarkLearned, UndoLearned, SetRepeatList
)
from core.search import normalize_query
from core.seed_data import SEED_WORDS, GRAMMAR_RULES, IRREGULAR_VERBS, CONTEXT_SENTENCES

from server.file_storage import FileStorage
from server.postgres_storage import PostgresStorage
from server.translation_provider import MyMemoryProvider


# Pydantic models for API
class WordCreateRequest(BaseModel):
    dutch: str
    translation_en: str = ''
    translation_ru: str = ''
    translation_uk: str = ''
    level: Optional[str] = None
    is_user_added: bool = True
    in_repeat_list: bool = False


class WordEditRequest(BaseModel):
    """Content edits only; progress changes go through the study actions."""
    model_config = ConfigDict(extra='forbid')

    dutch: Optional[str] = None
    translation_en: Optional[str] = None
    translation_ru: Optional[str] = None
    translation_uk: Optional[str] = None
    level: Optional[str] = None


class AnswerRequest(BaseModel):
    mode: str
    answer: str
    sub_mode: Optional[str] = None


class RepeatListRequest(BaseModel):
    in_list: bool = True


class RuleCreateRequest(BaseModel):
    title: str
    explanation: str
    difficulty: str
    title_en: str = ''
    explanation_en: str = ''
    title_uk: str = ''
    explanation_uk: str = ''


class VerbUpdateRequest(BaseModel):
    is_learned: bool


class WordResponse(BaseModel):
    id: int
    dutch: str
    translation_en: str
    translation_ru: str
    translation_uk: str
    level: Optional[str]
    is_user_added: bool
    is_learned: bool
    known_count: int
    wrong_count: int
    repeat_known_count: int
    in_repeat_list: bool


class QueueResponse(BaseModel):
    mode: str
    level: Optional[str]
    sub_mode: Optional[str]
    total: int
    words: list[WordResponse]


class TranslateResponse(BaseModel):
    en: str
    ru: str
    uk: str


class ContextSentenceResponse(BaseModel):
    id: int
    dutch: str
    english: str
    level: Optional[str]


# Global state (in production, use proper DI)
storage: Storage = None
translator: TranslationProvider = None


def create_storage() -> Storage:
    """Pick the store from WOORD_STORAGE (postgres by default, or file)."""
    storage_type = os.environ.get('WOORD_STORAGE', 'postgres')
    if storage_type == 'file':
        logger.info("Using file storage")
        return FileStorage()
    logger.info("Using PostgreSQL storage")
    return PostgresStorage()


app = FastAPI(title="Woord API", description="Dutch vocabulary practice API")


@app.on_event("startup")
async def startup():
    """Initialize storage and translation provider, then seed empty tables."""
    global storage, translator

    if storage is None:
        storage = create_storage()
    if translator is None:
        translator = MyMemoryProvider(MemoryCache())

    try:
        storage.seed(SEED_WORDS, GRAMMAR_RULES, IRREGULAR_VERBS, CONTEXT_SENTENCES)
    except StorageError as e:
        logger.error(f"Seeding failed, continuing without seed data: {e}")


# Error handlers

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = first.get('loc') or ()
    field = str(loc[-1]) if loc else None
    return JSONResponse(
        status_code=400,
        content={'message': first.get('msg', 'Invalid request'), 'field': field}
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={'message': exc.message, 'field': exc.field})


@app.exception_handler(InvalidTransition)
async def invalid_transition_handler(request: Request, exc: InvalidTransition):
    return JSONResponse(status_code=400, content={'message': str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={'message': 'Storage unavailable, try again later'})


@app.get("/api/health")
async def health():
    return {"status": "ok"}


# Words

@app.get("/api/words", response_model=list[WordResponse])
async def list_words():
    """List all words with their progress."""
    return [w.to_dict() for w in storage.list_words()]


@app.get("/api/words/queue", response_model=QueueResponse)
async def get_queue(mode: str = 'new', level: Optional[str] = None, sub_mode: Optional[str] = None):
    """Get the ordered study queue for a mode."""
    try:
        words = filter_words(storage.list_words(), mode, level, sub_mode)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "mode": mode,
        "level": level,
        "sub_mode": sub_mode,
        "total": len(words),
        "words": [w.to_dict() for w in words]
    }


@app.post("/api/words", response_model=WordResponse, status_code=201)
async def create_word(request: WordCreateRequest):
    """Add a word. User-added words without a level get the Custom level."""
    fields = Word.validate_new(request.model_dump())
    word = storage.create_word(fields)
    logger.info(f"Created word {word.id}: {word.dutch}")
    return word.to_dict()


@app.patch("/api/words/{word_id}", response_model=WordResponse)
async def edit_word(word_id: int, request: WordEditRequest):
    """Edit a word's text, translations or level."""
    fields = Word.validate_edit(request.model_dump(exclude_unset=True))
    word = storage.update_word(word_id, fields)
    if word is None:
        raise HTTPException(status_code=404, detail="Word not found")
    return word.to_dict()


@app.delete("/api/words/{word_id}", status_code=204)
async def delete_word(word_id: int):
    if not storage.delete_word(word_id):
        raise HTTPException(status_code=404, detail="Word not found")
    return Response(status_code=204)


def run_transition(word_id: int, transition: Transition) -> dict:
    """Persist a study action and return the updated word."""
    word = storage.transition_word(word_id, transition)
    if word is None:
        raise HTTPException(status_code=404, detail="Word not found")
    logger.info(f"Word {word_id} after {transition!r}: "
                f"learned={word.is_learned} wrong={word.wrong_count} streak={word.repeat_known_count}")
    return word.to_dict()


@app.post("/api/words/{word_id}/answer", response_model=WordResponse)
async def answer_word(word_id: int, request: AnswerRequest):
    """Record a know / dont-know answer in the given study mode."""
    transition = RecordAnswer(request.mode, request.answer, request.sub_mode)
    return run_transition(word_id, transition)


@app.post("/api/words/{word_id}/learn", response_model=WordResponse)
async def learn_word(word_id: int):
    return run_transition(word_id, MarkLearned())


@app.post("/api/words/{word_id}/undo-learned", response_model=WordResponse)
async def undo_learned(word_id: int):
    """Send a learned word back to study. Mistake history is kept."""
    return run_transition(word_id, UndoLearned())


@app.post("/api/words/{word_id}/repeat-list", response_model=WordResponse)
async def set_repeat_list(word_id: int, request: RepeatListRequest):
    return run_transition(word_id, SetRepeatList(request.in_list))


# Grammar rules

@app.get("/api/rules")
async def list_rules(difficulty: Optional[str] = None):
    """List grammar rules, optionally for one CEFR level."""
    if difficulty is not None and difficulty not in LEVELS:
        raise HTTPException(status_code=400, detail=f"Unknown difficulty: {difficulty}")
    rules = storage.list_rules()
    if difficulty:
        rules = [r for r in rules if r.difficulty == difficulty]
    return [r.to_dict() for r in rules]


@app.post("/api/rules", status_code=201)
async def create_rule(request: RuleCreateRequest):
    fields = GrammarRule.validate_new(request.model_dump())
    return storage.create_rule(fields).to_dict()


# Irregular verbs

@app.get("/api/verbs")
async def list_verbs():
    return [v.to_dict() for v in storage.list_verbs()]


@app.patch("/api/verbs/{verb_id}")
async def update_verb(verb_id: int, request: VerbUpdateRequest):
    """Mark an irregular verb as learned or not learned."""
    verb = storage.update_verb(verb_id, {'is_learned': request.is_learned})
    if verb is None:
        raise HTTPException(status_code=404, detail="Verb not found")
    return verb.to_dict()


# Translation and context search

@app.get("/api/translate", response_model=TranslateResponse)
async def translate(word: str = ''):
    """Best-effort translations to pre-fill the add-word form."""
    try:
        # Provider does blocking HTTP; keep it off the event loop
        loop = asyncio.get_event_loop()
        result = await loop.run_in_executor(None, translator.translate, word)
    except Exception as e:
        logger.warning(f"Translation failed for {word!r}: {e}")
        result = {}
    return {lang: result.get(lang) or '' for lang in TRANSLATION_LANGUAGES}


@app.get("/api/context", response_model=list[ContextSentenceResponse])
async def search_context(q: str = ''):
    """Find example sentences containing the query."""
    query = normalize_query(q)
    if not query:
        return []
    try:
        sentences = storage.search_context(query)
    except StorageError as e:
        logger.warning(f"Context search unavailable: {e}")
        return []
    return [s.to_dict() for s in sentences]


@app.get("/api/context/count")
async def context_count():
    return {"count": storage.count_context()}


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
