"""Unit tests for woord core module."""

import unittest

from core.cache import MemoryCache
from core.config import GRADUATION_STREAK, SEARCH_RESULT_LIMIT, CUSTOM_LEVEL
from core.models import Word, ContextSentence, GrammarRule, Verb, ValidationError
from core.queue import (
    StudyQueue, filter_words, build_queue, advance, reset, current, is_complete, remaining
)
from core.review import (
    InvalidTransition, RecordAnswer, MarkLearned, UndoLearned, SetRepeatList,
    apply_transition, apply_update
)
from core.search import (
    normalize_query, match_priority, search_sentences, like_patterns, escape_like,
    CachedSearch, MATCH_EXACT, MATCH_WORD, MATCH_PREFIX, MATCH_SUFFIX, MATCH_SUBSTRING
)
from core.utils import normalize_text, sort_key, capitalize_first


# ============================================================================
# Helpers and Mock Implementations
# ============================================================================

def make_word(id: int = 1, dutch: str = 'het huis', **fields) -> Word:
    data = {
        'id': id,
        'dutch': dutch,
        'translation_en': 'house',
        'level': 'A1',
        'is_user_added': False
    }
    data.update(fields)
    return Word.from_dict(data)


def answer(word: Word, mode: str, ans: str, sub_mode: str = None) -> Word:
    """Apply one answer and return the resulting word."""
    update = apply_transition(word, RecordAnswer(mode, ans, sub_mode))
    return apply_update(word, update)


def assert_progress_consistent(test: unittest.TestCase, word: Word):
    """Counters are in range and a full streak always means graduated."""
    test.assertGreaterEqual(word.known_count, 0)
    test.assertGreaterEqual(word.wrong_count, 0)
    test.assertTrue(0 <= word.repeat_known_count <= GRADUATION_STREAK)
    if word.repeat_known_count == GRADUATION_STREAK:
        test.assertTrue(word.is_learned)
        test.assertFalse(word.in_repeat_list)


class MockSentenceSource:
    """Counts search_context calls."""

    def __init__(self, sentences: list[ContextSentence], fail: bool = False):
        self.sentences = sentences
        self.fail = fail
        self.calls = []

    def search_context(self, query: str) -> list[ContextSentence]:
        self.calls.append(query)
        if self.fail:
            raise ConnectionError("store down")
        return search_sentences(self.sentences, query)


# ============================================================================
# Test Cases
# ============================================================================

class TestUtils(unittest.TestCase):

    def test_normalize_text(self):
        self.assertEqual(normalize_text('  Het HUIS '), 'het huis')
        self.assertEqual(normalize_text(None), '')

    def test_sort_key_ignores_case(self):
        self.assertEqual(sort_key('Appel')[0], sort_key('appel')[0])

    def test_sort_key_accent_sorts_next_to_base_letter(self):
        words = sorted(['ezel', 'één', 'de kat'], key=sort_key)
        self.assertEqual(words, ['de kat', 'één', 'ezel'])

    def test_capitalize_first(self):
        self.assertEqual(capitalize_first('house'), 'House')
        self.assertEqual(capitalize_first(''), '')


class TestWordModel(unittest.TestCase):

    def test_from_dict_defaults(self):
        word = Word.from_dict({'id': 7, 'dutch': 'de kat'})
        self.assertEqual(word.known_count, 0)
        self.assertEqual(word.wrong_count, 0)
        self.assertEqual(word.repeat_known_count, 0)
        self.assertFalse(word.is_learned)
        self.assertFalse(word.in_repeat_list)
        self.assertEqual(word.translation_ru, '')

    def test_roundtrip(self):
        word = make_word(wrong_count=2, in_repeat_list=True)
        self.assertEqual(Word.from_dict(word.to_dict()), word)

    def test_is_weak(self):
        self.assertTrue(make_word(wrong_count=1).is_weak)
        self.assertFalse(make_word(wrong_count=1, is_learned=True).is_weak)
        self.assertFalse(make_word().is_weak)

    def test_validate_new_user_word_defaults_to_custom(self):
        fields = Word.validate_new({'dutch': ' fiets ', 'translation_en': 'bike'})
        self.assertEqual(fields['dutch'], 'fiets')
        self.assertEqual(fields['level'], CUSTOM_LEVEL)
        self.assertTrue(fields['is_user_added'])
        self.assertEqual(fields['wrong_count'], 0)
        self.assertFalse(fields['is_learned'])

    def test_validate_new_requires_dutch(self):
        with self.assertRaises(ValidationError) as ctx:
            Word.validate_new({'dutch': '   ', 'translation_en': 'bike'})
        self.assertEqual(ctx.exception.field, 'dutch')

    def test_validate_new_requires_a_translation(self):
        with self.assertRaises(ValidationError):
            Word.validate_new({'dutch': 'fiets'})

    def test_validate_new_base_word_needs_level(self):
        with self.assertRaises(ValidationError) as ctx:
            Word.validate_new({'dutch': 'fiets', 'translation_en': 'bike', 'is_user_added': False})
        self.assertEqual(ctx.exception.field, 'level')

    def test_validate_new_rejects_unknown_level(self):
        with self.assertRaises(ValidationError):
            Word.validate_new({'dutch': 'fiets', 'translation_en': 'bike', 'level': 'C2'})

    def test_validate_new_ignores_progress_fields(self):
        fields = Word.validate_new({
            'dutch': 'fiets', 'translation_en': 'bike',
            'is_learned': True, 'wrong_count': 9
        })
        self.assertFalse(fields['is_learned'])
        self.assertEqual(fields['wrong_count'], 0)

    def test_validate_edit_rejects_progress_fields(self):
        for name in Word.PROGRESS_FIELDS:
            with self.assertRaises(ValidationError):
                Word.validate_edit({name: 1})

    def test_validate_edit_content(self):
        fields = Word.validate_edit({'translation_en': ' Bike ', 'level': 'A2'})
        self.assertEqual(fields, {'translation_en': 'Bike', 'level': 'A2'})


class TestOtherModels(unittest.TestCase):

    def test_rule_validation(self):
        fields = GrammarRule.validate_new({'title': 'De/het', 'explanation': 'Articles', 'difficulty': 'A1'})
        self.assertEqual(fields['title_en'], '')
        with self.assertRaises(ValidationError):
            GrammarRule.validate_new({'title': 'De/het', 'explanation': 'Articles', 'difficulty': 'X'})
        with self.assertRaises(ValidationError):
            GrammarRule.validate_new({'title': '', 'explanation': 'Articles', 'difficulty': 'A1'})

    def test_verb_roundtrip(self):
        verb = Verb(3, 'gaan', 'ging', 'gegaan', 'to go', 'Ik ga.')
        restored = Verb.from_dict(verb.to_dict())
        self.assertEqual(restored.past_participle, 'gegaan')
        self.assertFalse(restored.is_learned)

    def test_sentence_roundtrip(self):
        sentence = ContextSentence(1, 'Het huis is groot.', 'The house is big.', 'A1')
        self.assertEqual(ContextSentence.from_dict(sentence.to_dict()), sentence)


class TestReviewTransitions(unittest.TestCase):
    """Tests for the review state machine."""

    def test_new_mode_know_marks_learned(self):
        self.assertEqual(apply_transition(make_word(), RecordAnswer('new', 'know')), {'is_learned': True})

    def test_my_mode_know_marks_learned(self):
        word = make_word(is_user_added=True, level=CUSTOM_LEVEL)
        self.assertEqual(apply_transition(word, RecordAnswer('my', 'know')), {'is_learned': True})

    def test_new_mode_dont_know_increments_wrong(self):
        word = make_word(wrong_count=2)
        self.assertEqual(apply_transition(word, RecordAnswer('new', 'dont-know')), {'wrong_count': 3})

    def test_review_know_increments_streak(self):
        word = make_word(wrong_count=1, repeat_known_count=2)
        update = apply_transition(word, RecordAnswer('review', 'know', 'weak'))
        self.assertEqual(update, {'repeat_known_count': 3})

    def test_review_know_graduates_at_streak(self):
        word = make_word(wrong_count=1, repeat_known_count=GRADUATION_STREAK - 1, in_repeat_list=True)
        update = apply_transition(word, RecordAnswer('review', 'know', 'list'))
        self.assertEqual(update, {
            'repeat_known_count': GRADUATION_STREAK,
            'is_learned': True,
            'in_repeat_list': False
        })

    def test_review_dont_know_resets_streak(self):
        for streak in range(GRADUATION_STREAK):
            word = make_word(wrong_count=1, repeat_known_count=streak)
            update = apply_transition(word, RecordAnswer('review', 'dont-know'))
            self.assertEqual(update, {'wrong_count': 2, 'repeat_known_count': 0})

    def test_repeated_know_never_learned_before_five(self):
        word = make_word()
        for expected in range(1, GRADUATION_STREAK + 1):
            word = answer(word, 'review', 'know', 'weak')
            self.assertEqual(word.repeat_known_count, expected)
            self.assertEqual(word.is_learned, expected == GRADUATION_STREAK)
            assert_progress_consistent(self, word)

    def test_scenario_five_knows_graduates(self):
        word = make_word(wrong_count=0, repeat_known_count=0, in_repeat_list=True)
        for _ in range(5):
            word = answer(word, 'review', 'know', 'weak')
        self.assertEqual(word.repeat_known_count, 5)
        self.assertTrue(word.is_learned)
        self.assertFalse(word.in_repeat_list)

    def test_scenario_miss_in_the_middle(self):
        word = make_word()
        for ans in ['know', 'know', 'dont-know', 'know']:
            word = answer(word, 'review', ans, 'weak')
        self.assertEqual(word.repeat_known_count, 1)
        self.assertEqual(word.wrong_count, 1)
        self.assertFalse(word.is_learned)

    def test_scenario_new_mode_misses_make_weak_word(self):
        word = make_word()
        for _ in range(3):
            word = answer(word, 'new', 'dont-know')
        self.assertEqual(word.wrong_count, 3)
        self.assertFalse(word.is_learned)
        self.assertEqual(filter_words([word], 'review', sub_mode='weak'), [word])

    def test_undo_learned_keeps_wrong_count(self):
        states = [
            make_word(is_learned=True, known_count=4, repeat_known_count=5, wrong_count=3),
            make_word(is_learned=False, known_count=0, repeat_known_count=2, wrong_count=0),
        ]
        for word in states:
            result = apply_update(word, apply_transition(word, UndoLearned()))
            self.assertFalse(result.is_learned)
            self.assertEqual(result.known_count, 0)
            self.assertEqual(result.repeat_known_count, 0)
            self.assertEqual(result.wrong_count, word.wrong_count)

    def test_mark_learned(self):
        self.assertEqual(apply_transition(make_word(), MarkLearned()), {'is_learned': True})

    def test_set_repeat_list(self):
        self.assertEqual(apply_transition(make_word(), SetRepeatList(True)), {'in_repeat_list': True})
        self.assertEqual(apply_transition(make_word(), SetRepeatList(False)), {'in_repeat_list': False})

    def test_apply_transition_is_pure(self):
        word = make_word(wrong_count=1)
        apply_transition(word, RecordAnswer('review', 'dont-know'))
        self.assertEqual(word.wrong_count, 1)

    def test_invalid_mode(self):
        with self.assertRaises(InvalidTransition):
            RecordAnswer('learned', 'know')

    def test_invalid_answer(self):
        with self.assertRaises(InvalidTransition):
            RecordAnswer('new', 'maybe')

    def test_invalid_sub_mode(self):
        with self.assertRaises(InvalidTransition):
            RecordAnswer('review', 'know', 'sometimes')

    def test_sub_mode_dropped_outside_review(self):
        self.assertIsNone(RecordAnswer('new', 'know', 'weak').sub_mode)

    def test_transition_equality(self):
        self.assertEqual(RecordAnswer('review', 'know'), RecordAnswer('review', 'know', 'weak'))
        self.assertNotEqual(MarkLearned(), UndoLearned())


class TestModeFilter(unittest.TestCase):
    """Tests for filter_words."""

    def setUp(self):
        self.words = [
            make_word(1, 'de kat', level='A1'),
            make_word(2, 'Appel', level='A1'),
            make_word(3, 'het huis', level='A2'),
            make_word(4, 'de fiets', level='A1', is_learned=True),
            make_word(5, 'zwemmen', level=CUSTOM_LEVEL, is_user_added=True),
            make_word(6, 'lopen', level=CUSTOM_LEVEL, is_user_added=True, known_count=2),
            make_word(7, 'de hond', level='A1', wrong_count=2),
            make_word(8, 'brood', level='A2', in_repeat_list=True),
            make_word(9, 'de bank', level='B1', in_repeat_list=True, is_learned=True, wrong_count=1),
        ]

    def ids(self, words):
        return [w.id for w in words]

    def test_new_mode(self):
        self.assertEqual(self.ids(filter_words(self.words, 'new', 'A1')), [2, 7, 1])

    def test_new_mode_defaults_to_a1(self):
        self.assertEqual(filter_words(self.words, 'new'), filter_words(self.words, 'new', 'A1'))

    def test_my_mode(self):
        self.assertEqual(self.ids(filter_words(self.words, 'my')), [5])

    def test_learned_mode(self):
        self.assertEqual(self.ids(filter_words(self.words, 'learned', 'A1')), [4])
        self.assertEqual(self.ids(filter_words(self.words, 'learned', 'B1')), [9])

    def test_review_weak(self):
        self.assertEqual(self.ids(filter_words(self.words, 'review', sub_mode='weak')), [7])

    def test_review_list(self):
        self.assertEqual(self.ids(filter_words(self.words, 'review', sub_mode='list')), [8])

    def test_case_insensitive_order(self):
        words = [make_word(1, 'banaan'), make_word(2, 'Appel'), make_word(3, 'citroen')]
        self.assertEqual(self.ids(filter_words(words, 'new')), [2, 1, 3])

    def test_ties_keep_input_order(self):
        words = [make_word(3, 'huis'), make_word(1, 'Huis'), make_word(2, 'huis')]
        self.assertEqual(self.ids(filter_words(words, 'new')), [3, 1, 2])

    def test_deterministic(self):
        first = filter_words(self.words, 'new', 'A1')
        second = filter_words(self.words, 'new', 'A1')
        self.assertEqual(first, second)

    def test_does_not_mutate_input(self):
        before = [w.to_dict() for w in self.words]
        filter_words(self.words, 'review', sub_mode='weak')
        self.assertEqual([w.to_dict() for w in self.words], before)

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            filter_words(self.words, 'everything')

    def test_unknown_sub_mode(self):
        with self.assertRaises(ValueError):
            filter_words(self.words, 'review', sub_mode='random')


class TestStudyQueue(unittest.TestCase):

    def setUp(self):
        self.queue = build_queue(
            [make_word(1, 'b'), make_word(2, 'a'), make_word(3, 'c')], 'new'
        )

    def test_starts_at_first_item(self):
        self.assertEqual(self.queue.cursor, 0)
        self.assertEqual(current(self.queue).id, 2)
        self.assertEqual(remaining(self.queue), 3)

    def test_advance_is_pure(self):
        moved = advance(self.queue)
        self.assertEqual(self.queue.cursor, 0)
        self.assertEqual(moved.cursor, 1)
        self.assertEqual(current(moved).id, 1)

    def test_advance_past_end_completes(self):
        queue = self.queue
        for _ in range(5):
            queue = advance(queue)
        self.assertTrue(is_complete(queue))
        self.assertIsNone(current(queue))
        self.assertEqual(queue.cursor, 3)
        self.assertEqual(remaining(queue), 0)

    def test_reset(self):
        queue = advance(advance(self.queue))
        restarted = reset(queue)
        self.assertEqual(restarted.cursor, 0)
        self.assertEqual(restarted.items, self.queue.items)
        self.assertEqual(restarted, self.queue)

    def test_empty_queue_is_complete(self):
        queue = StudyQueue([])
        self.assertTrue(is_complete(queue))
        self.assertIsNone(current(queue))


class TestSearchMatcher(unittest.TestCase):
    """Tests for context sentence matching."""

    def setUp(self):
        self.sentences = [
            ContextSentence(1, 'Het huis is groot.', 'The house is big.', 'A1'),
            ContextSentence(2, 'Ik ga naar huis', 'I am going home', 'A1'),
            ContextSentence(3, 'Thuis', 'Home'),
            ContextSentence(4, 'Huis en tuin', 'House and garden'),
            ContextSentence(5, 'De kat slaapt.', 'The cat sleeps.'),
            ContextSentence(6, 'Dat kost 5.00 euro', 'That costs 5.00 euro'),
        ]

    def test_normalize_query(self):
        self.assertEqual(normalize_query('  HUIS '), 'huis')
        self.assertEqual(normalize_query(None), '')

    def test_match_priorities(self):
        self.assertEqual(match_priority('Thuis', 'thuis'), MATCH_EXACT)
        self.assertEqual(match_priority('Het huis is groot.', 'huis'), MATCH_WORD)
        self.assertEqual(match_priority('Huis en tuin', 'huis'), MATCH_PREFIX)
        self.assertEqual(match_priority('Ik ga naar huis', 'huis'), MATCH_SUFFIX)
        self.assertEqual(match_priority('Thuis', 'huis'), MATCH_SUBSTRING)
        self.assertIsNone(match_priority('De kat slaapt.', 'huis'))

    def test_word_match_beats_substring(self):
        text = 'Het huis is groot.'
        self.assertLess(match_priority(text, 'huis'), match_priority(text, 'hui'))

    def test_word_boundary_and_substring_both_match(self):
        self.assertEqual([s.id for s in search_sentences(self.sentences, 'huis')], [1, 2, 3, 4])
        self.assertIn(1, [s.id for s in search_sentences(self.sentences, 'hui')])

    def test_results_keep_corpus_order(self):
        ids = [s.id for s in search_sentences(self.sentences, 'HUIS ')]
        self.assertEqual(ids, sorted(ids))

    def test_empty_query(self):
        self.assertEqual(search_sentences(self.sentences, ''), [])
        self.assertEqual(search_sentences(self.sentences, '   '), [])

    def test_special_characters_are_literal(self):
        self.assertEqual(search_sentences(self.sentences, '.'), [self.sentences[0], self.sentences[4], self.sentences[5]])
        self.assertEqual(search_sentences(self.sentences, '*'), [])
        self.assertEqual(search_sentences(self.sentences, 'h.is'), [])
        self.assertEqual([s.id for s in search_sentences(self.sentences, '5.00')], [6])

    def test_limit(self):
        corpus = [ContextSentence(i, f'zin {i} met huis', 'x') for i in range(50)]
        results = search_sentences(corpus, 'huis')
        self.assertEqual(len(results), SEARCH_RESULT_LIMIT)
        self.assertEqual(results[0].id, 0)

    def test_escape_like(self):
        self.assertEqual(escape_like('50%_off\\'), '50\\%\\_off\\\\')

    def test_like_patterns(self):
        patterns = like_patterns(' Huis ')
        self.assertEqual(patterns[MATCH_EXACT], 'huis')
        self.assertEqual(patterns[MATCH_WORD], '% huis %')
        self.assertEqual(patterns[MATCH_PREFIX], 'huis %')
        self.assertEqual(patterns[MATCH_SUFFIX], '% huis')
        self.assertEqual(patterns[MATCH_SUBSTRING], '%huis%')

    def test_like_patterns_escape_wildcards(self):
        self.assertEqual(like_patterns('100%')[MATCH_SUBSTRING], '%100\\%%')


class TestCachedSearch(unittest.TestCase):

    def setUp(self):
        self.source = MockSentenceSource([
            ContextSentence(1, 'Het huis is groot.', 'The house is big.'),
        ])
        self.cache = MemoryCache()
        self.search = CachedSearch(self.source, self.cache)

    def test_equal_normalized_queries_hit_cache(self):
        first = self.search.search('Huis')
        second = self.search.search('  huis ')
        self.assertEqual(first, second)
        self.assertEqual(self.source.calls, ['huis'])

    def test_empty_query_skips_source(self):
        self.assertEqual(self.search.search('  '), [])
        self.assertEqual(self.source.calls, [])

    def test_cache_can_be_cleared(self):
        self.search.search('huis')
        self.cache.clear()
        self.search.search('huis')
        self.assertEqual(len(self.source.calls), 2)

    def test_source_failure_degrades_to_empty(self):
        search = CachedSearch(MockSentenceSource([], fail=True), self.cache)
        self.assertEqual(search.search('huis'), [])
        self.assertNotIn('huis', self.cache)


class TestMemoryCache(unittest.TestCase):

    def test_get_set(self):
        cache = MemoryCache()
        self.assertIsNone(cache.get('a'))
        self.assertEqual(cache.get('a', 'x'), 'x')
        cache.set('a', [1])
        self.assertIn('a', cache)
        self.assertEqual(cache.get('a'), [1])
        self.assertEqual(len(cache), 1)

    def test_instances_are_independent(self):
        first, second = MemoryCache(), MemoryCache()
        first.set('a', 1)
        self.assertNotIn('a', second)


if __name__ == '__main__':
    unittest.main()
