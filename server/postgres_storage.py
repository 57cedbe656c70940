"""PostgreSQL storage implementation."""

import logging
import os

import psycopg2
from psycopg2 import sql
from psycopg2.extras import RealDictCursor, execute_values

from core.config import SEARCH_RESULT_LIMIT, SEED_BATCH_SIZE
from core.interfaces import Storage, StorageError
from core.models import Word, GrammarRule, Verb, ContextSentence
from core.review import apply_transition
from core.search import like_patterns, MATCH_EXACT, MATCH_WORD, MATCH_PREFIX, MATCH_SUFFIX, MATCH_SUBSTRING

logger = logging.getLogger(__name__)

WORD_COLUMNS = (
    'dutch', 'translation_en', 'translation_ru', 'translation_uk', 'level',
    'is_user_added', 'is_learned', 'known_count', 'wrong_count',
    'repeat_known_count', 'in_repeat_list'
)
RULE_COLUMNS = (
    'title', 'explanation', 'difficulty',
    'title_en', 'explanation_en', 'title_uk', 'explanation_uk'
)
VERB_COLUMNS = ('infinitive', 'past_singular', 'past_participle', 'translation', 'example', 'is_learned')


class PostgresStorage(Storage):
    """PostgreSQL-based storage implementation."""

    def __init__(self, db_url: str = None):
        self.db_url = db_url or os.environ.get(
            'DATABASE_URL',
            'postgresql://localhost:5432/woord'
        )
        self._conn = None
        self._initialized = False

    @property
    def conn(self):
        """Lazy connection initialization."""
        if self._conn is None or self._conn.closed:
            try:
                self._conn = psycopg2.connect(self.db_url)
            except psycopg2.Error as e:
                logger.error(f"Cannot connect to database: {e}")
                raise StorageError("Database unavailable") from e
            if not self._initialized:
                self._init_db()
                self._initialized = True
        return self._conn

    def _init_db(self):
        """Create tables if they don't exist."""
        with self._conn.cursor() as cur:
            cur.execute("""
                CREATE TABLE IF NOT EXISTS words (
                    id SERIAL PRIMARY KEY,
                    dutch TEXT NOT NULL,
                    translation_en TEXT NOT NULL DEFAULT '',
                    translation_ru TEXT NOT NULL DEFAULT '',
                    translation_uk TEXT NOT NULL DEFAULT '',
                    level TEXT,
                    is_user_added BOOLEAN NOT NULL DEFAULT FALSE,
                    is_learned BOOLEAN NOT NULL DEFAULT FALSE,
                    known_count INTEGER NOT NULL DEFAULT 0,
                    wrong_count INTEGER NOT NULL DEFAULT 0,
                    repeat_known_count INTEGER NOT NULL DEFAULT 0,
                    in_repeat_list BOOLEAN NOT NULL DEFAULT FALSE
                )
            """)
            cur.execute("""
                CREATE TABLE IF NOT EXISTS rules (
                    id SERIAL PRIMARY KEY,
                    title TEXT NOT NULL,
                    explanation TEXT NOT NULL,
                    title_en TEXT NOT NULL DEFAULT '',
                    explanation_en TEXT NOT NULL DEFAULT '',
                    title_uk TEXT NOT NULL DEFAULT '',
                    explanation_uk TEXT NOT NULL DEFAULT '',
                    difficulty TEXT NOT NULL
                )
            """)
            cur.execute("""
                CREATE TABLE IF NOT EXISTS verbs (
                    id SERIAL PRIMARY KEY,
                    infinitive TEXT NOT NULL,
                    past_singular TEXT NOT NULL,
                    past_participle TEXT NOT NULL,
                    translation TEXT NOT NULL,
                    example TEXT NOT NULL,
                    is_learned BOOLEAN NOT NULL DEFAULT FALSE
                )
            """)
            cur.execute("""
                CREATE TABLE IF NOT EXISTS context_sentences (
                    id SERIAL PRIMARY KEY,
                    dutch TEXT NOT NULL,
                    english TEXT NOT NULL,
                    level TEXT
                )
            """)
        self._conn.commit()

    def close(self):
        """Close the database connection."""
        if self._conn and not self._conn.closed:
            self._conn.close()

    def _fail(self, action: str, e: Exception):
        logger.error(f"Error {action}: {e}")
        if self._conn and not self._conn.closed:
            self._conn.rollback()
        raise StorageError(f"Error {action}") from e

    def _fetch_all(self, query: str, params: tuple = ()) -> list[dict]:
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(query, params)
                rows = cur.fetchall()
            self.conn.commit()
            return rows
        except psycopg2.Error as e:
            self._fail("reading from database", e)

    def _insert(self, table: str, columns: tuple, fields: dict) -> dict:
        names = [c for c in columns if c in fields]
        query = sql.SQL("INSERT INTO {} ({}) VALUES ({}) RETURNING *").format(
            sql.Identifier(table),
            sql.SQL(', ').join(map(sql.Identifier, names)),
            sql.SQL(', ').join(sql.Placeholder() * len(names))
        )
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(query, [fields[c] for c in names])
                row = cur.fetchone()
            self.conn.commit()
            return row
        except psycopg2.Error as e:
            self._fail(f"inserting into {table}", e)

    def _set_columns(self, cur, table: str, columns: tuple, row_id: int, fields: dict) -> dict | None:
        names = [c for c in fields if c in columns]
        if not names:
            cur.execute(sql.SQL("SELECT * FROM {} WHERE id = %s").format(sql.Identifier(table)), (row_id,))
            return cur.fetchone()
        query = sql.SQL("UPDATE {} SET {} WHERE id = %s RETURNING *").format(
            sql.Identifier(table),
            sql.SQL(', ').join(
                sql.SQL("{} = %s").format(sql.Identifier(c)) for c in names
            )
        )
        cur.execute(query, [fields[c] for c in names] + [row_id])
        return cur.fetchone()

    def _update(self, table: str, columns: tuple, row_id: int, fields: dict) -> dict | None:
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                row = self._set_columns(cur, table, columns, row_id, fields)
            self.conn.commit()
            return row
        except psycopg2.Error as e:
            self._fail(f"updating {table}", e)

    # Words

    def list_words(self) -> list[Word]:
        return [Word.from_dict(row) for row in self._fetch_all("SELECT * FROM words ORDER BY id")]

    def get_word(self, word_id: int) -> Word | None:
        rows = self._fetch_all("SELECT * FROM words WHERE id = %s", (word_id,))
        return Word.from_dict(rows[0]) if rows else None

    def create_word(self, fields: dict) -> Word:
        return Word.from_dict(self._insert('words', WORD_COLUMNS, fields))

    def update_word(self, word_id: int, fields: dict) -> Word | None:
        row = self._update('words', WORD_COLUMNS, word_id, fields)
        return Word.from_dict(row) if row else None

    def transition_word(self, word_id: int, transition) -> Word | None:
        """Lock the row, compute the transition and write it in one transaction."""
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute("SELECT * FROM words WHERE id = %s FOR UPDATE", (word_id,))
                row = cur.fetchone()
                if row is None:
                    self.conn.rollback()
                    return None
                update = apply_transition(Word.from_dict(row), transition)
                row = self._set_columns(cur, 'words', WORD_COLUMNS, word_id, update)
            self.conn.commit()
            return Word.from_dict(row)
        except psycopg2.Error as e:
            self._fail(f"applying {transition!r} to word {word_id}", e)

    def delete_word(self, word_id: int) -> bool:
        try:
            with self.conn.cursor() as cur:
                cur.execute("DELETE FROM words WHERE id = %s", (word_id,))
                deleted = cur.rowcount > 0
            self.conn.commit()
            return deleted
        except psycopg2.Error as e:
            self._fail(f"deleting word {word_id}", e)

    # Grammar rules

    def list_rules(self) -> list[GrammarRule]:
        return [GrammarRule.from_dict(row) for row in self._fetch_all("SELECT * FROM rules ORDER BY id")]

    def create_rule(self, fields: dict) -> GrammarRule:
        return GrammarRule.from_dict(self._insert('rules', RULE_COLUMNS, fields))

    # Irregular verbs

    def list_verbs(self) -> list[Verb]:
        return [Verb.from_dict(row) for row in self._fetch_all("SELECT * FROM verbs ORDER BY id")]

    def update_verb(self, verb_id: int, fields: dict) -> Verb | None:
        row = self._update('verbs', VERB_COLUMNS, verb_id, fields)
        return Verb.from_dict(row) if row else None

    # Context sentences

    def search_context(self, query: str) -> list[ContextSentence]:
        patterns = like_patterns(query)
        if not patterns[MATCH_EXACT]:
            return []
        rows = self._fetch_all("""
            SELECT * FROM context_sentences
            WHERE lower(dutch) LIKE %s ESCAPE '\\'
               OR lower(dutch) LIKE %s ESCAPE '\\'
               OR lower(dutch) LIKE %s ESCAPE '\\'
               OR lower(dutch) = %s
               OR lower(dutch) LIKE %s ESCAPE '\\'
            ORDER BY id
            LIMIT %s
        """, (
            patterns[MATCH_WORD], patterns[MATCH_PREFIX], patterns[MATCH_SUFFIX],
            patterns[MATCH_EXACT], patterns[MATCH_SUBSTRING], SEARCH_RESULT_LIMIT
        ))
        return [ContextSentence.from_dict(row) for row in rows]

    def count_context(self) -> int:
        rows = self._fetch_all("SELECT count(*) AS count FROM context_sentences")
        return int(rows[0]['count']) if rows else 0

    def bulk_insert_context(self, sentences: list[dict]) -> None:
        if not sentences:
            return
        values = [(s['dutch'], s['english'], s.get('level')) for s in sentences]
        try:
            with self.conn.cursor() as cur:
                execute_values(
                    cur,
                    "INSERT INTO context_sentences (dutch, english, level) VALUES %s",
                    values,
                    page_size=SEED_BATCH_SIZE
                )
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail("inserting context sentences", e)

    # Seeding

    def _is_empty(self, table: str) -> bool:
        rows = self._fetch_all(
            sql.SQL("SELECT 1 FROM {} LIMIT 1").format(sql.Identifier(table)).as_string(self.conn)
        )
        return not rows

    def seed(self, words: list[dict], rules: list[dict], verbs: list[dict],
             sentences: list[dict]) -> None:
        if self._is_empty('words'):
            for fields in words:
                self._insert('words', WORD_COLUMNS, Word.validate_new(fields))
            logger.info(f"Seeded {len(words)} words")
        if self._is_empty('rules'):
            for fields in rules:
                self._insert('rules', RULE_COLUMNS, GrammarRule.validate_new(fields))
            logger.info(f"Seeded {len(rules)} grammar rules")
        if self._is_empty('verbs'):
            for fields in verbs:
                self._insert('verbs', VERB_COLUMNS, fields)
            logger.info(f"Seeded {len(verbs)} verbs")
        if self.count_context() == 0:
            self.bulk_insert_context(sentences)
            logger.info(f"Seeded {len(sentences)} context sentences")
