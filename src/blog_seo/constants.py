# src/blog_seo/constants.py
"""Centralized constants for the blog SEO scorer.

This module contains the score bands and magic numbers used across the
category analyzers. For user-configurable values, see config.py and
ScoringWeights.
"""

# =============================================================================
# Scoring Constants
# =============================================================================

# Order in which categories are analyzed and reported
CATEGORIES = (
    "keyword",
    "content",
    "meta",
    "structure",
    "links",
    "images",
    "readability",
)

# Maximum raw score per category
CATEGORY_MAX_SCORES = {
    "keyword": 25,
    "content": 20,
    "meta": 15,
    "structure": 15,
    "links": 10,
    "images": 10,
    "readability": 5,
}

# Default weight of each category in the overall score (sums to 100)
DEFAULT_CATEGORY_WEIGHTS = {
    "keyword": 25,
    "content": 20,
    "meta": 15,
    "structure": 15,
    "links": 10,
    "images": 10,
    "readability": 5,
}

# Overall score needed for a post to pass
PASS_THRESHOLD = 70

# Category percentage below which a recommendation is high priority
HIGH_PRIORITY_PERCENTAGE = 50

# Sort rank for recommendation priorities
PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


# =============================================================================
# Keyword Constants
# =============================================================================

# Keyword must start at or before this title index to count as "at beginning"
KEYWORD_TITLE_POSITION_LIMIT = 30

# Keyword density band (percent) that earns full credit, inclusive
KEYWORD_DENSITY_MIN_PERCENT = 0.5
KEYWORD_DENSITY_MAX_PERCENT = 2.5


# =============================================================================
# Content Constants
# =============================================================================

# Word counts for the content length bands
CONTENT_WORDS_EXCELLENT = 1000
CONTENT_WORDS_GOOD = 600
CONTENT_WORDS_FAIR = 300

# Paragraphs with more words than this are "long"
LONG_PARAGRAPH_WORDS = 150

# Average words per sentence
SENTENCE_LENGTH_TARGET = 20
SENTENCE_LENGTH_LIMIT = 25


# =============================================================================
# Meta Constants
# =============================================================================

# (ideal_min, ideal_max, acceptable_min, acceptable_max)
TITLE_LENGTH_BANDS = (50, 60, 40, 70)
META_DESCRIPTION_LENGTH_BANDS = (150, 160, 120, 180)


# =============================================================================
# Structure, Link and Image Constants
# =============================================================================

MIN_H2_HEADINGS = 3
MIN_INTERNAL_LINKS = 3
MIN_EXTERNAL_LINKS = 2
MIN_IMAGES = 3


# =============================================================================
# Readability Constants
# =============================================================================

# Flesch Reading Ease formula components (for documentation)
FLESCH_FORMULA = "206.835 - 1.015 * (words/sentences) - 84.6 * (syllables/words)"

FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6

# Inclusive lower bound -> grade label, checked top down
GRADE_THRESHOLDS = (
    (90, "Very Easy"),
    (80, "Easy"),
    (70, "Fairly Easy"),
    (60, "Standard"),
    (50, "Fairly Difficult"),
    (30, "Difficult"),
)
LOWEST_GRADE = "Very Difficult"
NO_CONTENT_GRADE = "No content"

# Flesch scores for the readability category bands
FLESCH_EASY_SCORE = 60
FLESCH_HARD_SCORE = 30

# Transition word density bands (percent)
TRANSITION_DENSITY_GOOD_PERCENT = 0.5
TRANSITION_DENSITY_FAIR_PERCENT = 0.2

TRANSITION_WORDS = (
    "however",
    "therefore",
    "moreover",
    "furthermore",
    "additionally",
    "consequently",
    "meanwhile",
    "nevertheless",
    "finally",
    "firstly",
    "also",
    "indeed",
    "in fact",
    "for example",
    "for instance",
    "in addition",
    "in conclusion",
    "on the other hand",
    "similarly",
)

VOWELS = "aeiouy"


# =============================================================================
# Service Constants
# =============================================================================

DEFAULT_WORDS_PER_MINUTE = 200

# Words must be longer than this to become keyword suggestions
MIN_SUGGESTION_WORD_LENGTH = 3
TOP_KEYWORD_SUGGESTIONS = 10

DEFAULT_CONTENT_TYPE = "blog"

CONTENT_TYPE_GUIDELINES = {
    "blog": {
        "min_words": 600,
        "max_words": 2500,
        "recommended_sections": [
            "Introduction", "Main Content", "Conclusion", "Call to Action",
        ],
        "seo_tips": [
            "Include your focus keyword in the first paragraph",
            "Use H2 and H3 tags for section headers",
            "Add internal and external links",
            "Include relevant images with alt text",
            "End with a call to action",
        ],
    },
    "tutorial": {
        "min_words": 800,
        "max_words": 3000,
        "recommended_sections": [
            "Overview", "Prerequisites", "Step-by-step Guide", "Conclusion",
        ],
        "seo_tips": [
            "Use numbered lists for steps",
            "Include code examples if applicable",
            "Add screenshots or diagrams",
            "Link to related tutorials",
            "Include a summary at the end",
        ],
    },
    "review": {
        "min_words": 500,
        "max_words": 2000,
        "recommended_sections": [
            "Product Overview", "Features", "Pros and Cons", "Verdict",
        ],
        "seo_tips": [
            "Include product specifications",
            "Add comparison with alternatives",
            "Use schema markup for ratings",
            "Include affiliate disclaimers if applicable",
            "Add purchase links",
        ],
    },
}
