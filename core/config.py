"""Configuration constants for woord application."""

LANGUAGE = 'nl'

# CEFR levels for curated vocabulary, rules and sentences
LEVELS = ['A1', 'A2', 'B1', 'B2']
CUSTOM_LEVEL = 'Custom'       # User-added words without a CEFR tag
DEFAULT_LEVEL = 'A1'

# Study modes
MODE_NEW = 'new'
MODE_MY = 'my'
MODE_LEARNED = 'learned'
MODE_REVIEW = 'review'
STUDY_MODES = [MODE_NEW, MODE_MY, MODE_LEARNED, MODE_REVIEW]
ANSWER_MODES = [MODE_NEW, MODE_MY, MODE_REVIEW]

# Review sub-modes
SUB_MODE_WEAK = 'weak'
SUB_MODE_LIST = 'list'
REVIEW_SUB_MODES = [SUB_MODE_WEAK, SUB_MODE_LIST]

# Answers
ANSWER_KNOW = 'know'
ANSWER_DONT_KNOW = 'dont-know'
ANSWERS = [ANSWER_KNOW, ANSWER_DONT_KNOW]

# Graduation criteria
GRADUATION_STREAK = 5         # Consecutive correct review answers to graduate

# Context search
SEARCH_RESULT_LIMIT = 20      # Max sentences returned per query

# Translation pre-fill
TRANSLATION_MIN_LENGTH = 2    # Shorter words are not sent to the provider
TRANSLATION_LANGUAGES = ['en', 'ru', 'uk']

# Seeding
SEED_BATCH_SIZE = 50          # Rows per insert when bulk seeding sentences
