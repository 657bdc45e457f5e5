"""Flesch Reading Ease and syllable estimation."""

import re

from blog_seo.constants import (
    FLESCH_BASE,
    FLESCH_SENTENCE_WEIGHT,
    FLESCH_SYLLABLE_WEIGHT,
    GRADE_THRESHOLDS,
    LOWEST_GRADE,
    NO_CONTENT_GRADE,
    VOWELS,
)
from blog_seo.models import FleschResult
from blog_seo.text_utils import split_sentences, split_words

NON_LETTER_PATTERN = re.compile(r'[^a-z]')


def count_syllables(word: str) -> int:
    """Estimate syllables in a word from its vowel groups.

    Args:
        word: Word to analyze, punctuation allowed

    Returns:
        Estimated syllable count, 0 when the word has no letters
    """
    if not word:
        return 0

    word = NON_LETTER_PATTERN.sub('', word.lower())
    if len(word) == 0:
        return 0
    if len(word) == 1:
        return 1

    syllable_count = 0
    previous_was_vowel = False

    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not previous_was_vowel:
            syllable_count += 1
        previous_was_vowel = is_vowel

    # Silent 'e'
    if word.endswith('e') and syllable_count > 1:
        syllable_count -= 1

    # Syllabic '-le' as in "table"
    if len(word) >= 3 and word.endswith('le') and word[-3] not in VOWELS:
        syllable_count += 1

    return max(1, syllable_count)


def score_to_grade(score: float) -> str:
    """Convert a Flesch Reading Ease score to its difficulty label.

    Args:
        score: Flesch Reading Ease score

    Returns:
        Grade label such as "Standard" or "Very Difficult"
    """
    for lower_bound, grade in GRADE_THRESHOLDS:
        if score >= lower_bound:
            return grade
    return LOWEST_GRADE


def calculate_flesch_reading_ease(text: str) -> FleschResult:
    """Calculate the Flesch Reading Ease score of plain text.

    Flesch Reading Ease = 206.835 - 1.015 * (words/sentences)
                          - 84.6 * (syllables/words)

    Args:
        text: Plain text with HTML already stripped

    Returns:
        FleschResult with the score clamped to 0-100
    """
    if not text or not text.strip():
        return FleschResult(score=0, grade=NO_CONTENT_GRADE, avg_syllables_per_word=0)

    sentences = split_sentences(text)
    words = split_words(text)

    if not sentences or not words:
        return FleschResult(score=0, grade=NO_CONTENT_GRADE, avg_syllables_per_word=0)

    total_syllables = sum(count_syllables(word) for word in words)

    avg_sentence_length = len(words) / len(sentences)
    avg_syllables_per_word = total_syllables / len(words)

    score = (
        FLESCH_BASE
        - (FLESCH_SENTENCE_WEIGHT * avg_sentence_length)
        - (FLESCH_SYLLABLE_WEIGHT * avg_syllables_per_word)
    )

    return FleschResult(
        score=max(0, min(100, score)),
        grade=score_to_grade(score),
        avg_syllables_per_word=round(avg_syllables_per_word, 2),
    )
