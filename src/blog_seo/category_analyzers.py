"""Rule-based analyzers for the seven SEO categories.

Each analyzer is a pure function taking a BlogPostInput and returning a
CategoryResult. Missing fields produce a zero score and an explanatory
issue instead of an exception, so the score generator can aggregate all
seven results unconditionally.
"""

import re

from blog_seo.constants import (
    CATEGORY_MAX_SCORES,
    CONTENT_WORDS_EXCELLENT,
    CONTENT_WORDS_FAIR,
    CONTENT_WORDS_GOOD,
    FLESCH_EASY_SCORE,
    FLESCH_HARD_SCORE,
    KEYWORD_DENSITY_MAX_PERCENT,
    KEYWORD_DENSITY_MIN_PERCENT,
    KEYWORD_TITLE_POSITION_LIMIT,
    LONG_PARAGRAPH_WORDS,
    META_DESCRIPTION_LENGTH_BANDS,
    MIN_EXTERNAL_LINKS,
    MIN_H2_HEADINGS,
    MIN_IMAGES,
    MIN_INTERNAL_LINKS,
    NO_CONTENT_GRADE,
    SENTENCE_LENGTH_LIMIT,
    SENTENCE_LENGTH_TARGET,
    TITLE_LENGTH_BANDS,
    TRANSITION_DENSITY_FAIR_PERCENT,
    TRANSITION_DENSITY_GOOD_PERCENT,
    TRANSITION_WORDS,
)
from blog_seo.models import BlogPostInput, CategoryResult
from blog_seo.readability import calculate_flesch_reading_ease
from blog_seo.text_utils import (
    WHITESPACE_PATTERN,
    raw_tokens,
    split_sentences,
    split_words,
    strip_tags,
)

PARAGRAPH_BREAK_PATTERN = re.compile(r'</p>|<br\s*/?>', re.IGNORECASE)
H1_PATTERN = re.compile(r'<h1[^>]*>', re.IGNORECASE)
H2_PATTERN = re.compile(r'<h2[^>]*>', re.IGNORECASE)
H3_PATTERN = re.compile(r'<h3[^>]*>', re.IGNORECASE)
UL_PATTERN = re.compile(r'<ul[^>]*>', re.IGNORECASE)
OL_PATTERN = re.compile(r'<ol[^>]*>', re.IGNORECASE)
INTERNAL_LINK_PATTERN = re.compile(r'''<a[^>]*href=["'](?:/[^"']*|#[^"']*)["']''', re.IGNORECASE)
EXTERNAL_LINK_PATTERN = re.compile(r'''<a[^>]*href=["']https?://[^"']*["']''', re.IGNORECASE)
IMG_PATTERN = re.compile(r'<img[^>]*>', re.IGNORECASE)
ALT_TEXT_PATTERN = re.compile(r'''alt=["'][^"']+["']''', re.IGNORECASE)

TRANSITION_PATTERNS = [
    re.compile(r'\b' + re.escape(word) + r'\b', re.IGNORECASE)
    for word in TRANSITION_WORDS
]


def _result(category: str, score: int, issues: list[str], details: dict) -> CategoryResult:
    return CategoryResult(
        score=score,
        max_score=CATEGORY_MAX_SCORES[category],
        issues=issues,
        details=details,
    )


def analyze_keyword(post: BlogPostInput) -> CategoryResult:
    """Score focus keyword placement in title, meta, slug and content.

    Args:
        post: Blog post to analyze

    Returns:
        CategoryResult out of 25 with inTitle/inMeta/inUrl/density details
    """
    if not post.focus_keyword:
        return _result("keyword", 0, ["No focus keyword provided"], {})

    keyword = post.focus_keyword.lower()
    title = post.title.lower()
    content = post.content.lower()
    description = post.meta_description.lower()
    slug = post.slug.lower()

    score = 0
    issues = []

    in_title = keyword in title
    if in_title:
        if title.find(keyword) <= KEYWORD_TITLE_POSITION_LIMIT:
            score += 8
        else:
            score += 5
            issues.append("Keyword in title but not at beginning")
    else:
        issues.append("Keyword not found in title")

    in_meta = keyword in description
    if in_meta:
        score += 5
    else:
        issues.append("Keyword not found in meta description")

    keyword_in_url = WHITESPACE_PATTERN.sub('-', keyword)
    in_url = keyword_in_url in slug
    if in_url:
        score += 4
    else:
        issues.append("Keyword not found in URL")

    density_label = "0%"
    if content:
        words = raw_tokens(content)
        keyword_count = len(re.findall(re.escape(keyword), content))
        density = 100 * keyword_count / len(words)
        density_label = f"{density:.2f}%"

        if KEYWORD_DENSITY_MIN_PERCENT <= density <= KEYWORD_DENSITY_MAX_PERCENT:
            score += 8
        elif density < KEYWORD_DENSITY_MIN_PERCENT:
            issues.append(f"Keyword density too low ({density:.2f}%)")
        else:
            issues.append(
                f"Keyword density too high ({density:.2f}%) - risk of keyword stuffing"
            )
            score += 3

    return _result("keyword", score, issues, {
        "inTitle": in_title,
        "inMeta": in_meta,
        "inUrl": in_url,
        "density": density_label,
    })


def analyze_content(post: BlogPostInput) -> CategoryResult:
    """Score content length, paragraph length and sentence complexity."""
    if not post.content:
        return _result("content", 0, ["No content provided"], {
            "wordCount": 0,
            "paragraphs": 0,
            "sentences": 0,
            "avgSentenceLength": 0,
        })

    score = 0
    issues = []

    text = strip_tags(post.content)
    words = split_words(text)
    word_count = len(words)

    if word_count >= CONTENT_WORDS_EXCELLENT:
        score += 12
    elif word_count >= CONTENT_WORDS_GOOD:
        score += 9
    elif word_count >= CONTENT_WORDS_FAIR:
        score += 6
    else:
        issues.append(
            f"Content too short ({word_count} words). Aim for at least {CONTENT_WORDS_GOOD}."
        )
        score += 3

    paragraphs = [p for p in PARAGRAPH_BREAK_PATTERN.split(post.content) if p.strip()]
    long_paragraphs = [
        p for p in paragraphs
        if len(split_words(strip_tags(p))) > LONG_PARAGRAPH_WORDS
    ]

    if not long_paragraphs:
        score += 4
    else:
        issues.append(
            f"{len(long_paragraphs)} paragraphs are too long (>{LONG_PARAGRAPH_WORDS} words)"
        )
        score += 2

    sentences = split_sentences(text)
    avg_sentence_length = word_count / len(sentences) if sentences else 0

    if avg_sentence_length <= SENTENCE_LENGTH_TARGET:
        score += 4
    elif avg_sentence_length <= SENTENCE_LENGTH_LIMIT:
        score += 2
        issues.append("Some sentences are too long. Keep average under 20 words.")
    else:
        issues.append("Sentences are too long. Reduce complexity.")

    return _result("content", score, issues, {
        "wordCount": word_count,
        "paragraphs": len(paragraphs),
        "sentences": len(sentences),
        "avgSentenceLength": f"{avg_sentence_length:.1f}",
    })


def analyze_meta(post: BlogPostInput) -> CategoryResult:
    """Score title and meta description lengths against their bands."""
    score = 0
    issues = []

    title_length = len(post.title)
    ideal_min, ideal_max, ok_min, ok_max = TITLE_LENGTH_BANDS
    if title_length == 0:
        issues.append("No title provided")
    elif ideal_min <= title_length <= ideal_max:
        score += 8
    elif ok_min <= title_length <= ok_max:
        score += 5
        if title_length < ideal_min:
            issues.append("Title is a bit short")
        if title_length > ideal_max:
            issues.append("Title is a bit long")
    else:
        if title_length < ok_min:
            issues.append("Title too short (aim for 50-60 chars)")
        if title_length > ok_max:
            issues.append("Title too long - will be truncated in search")
        score += 2

    description_length = len(post.meta_description)
    ideal_min, ideal_max, ok_min, ok_max = META_DESCRIPTION_LENGTH_BANDS
    if description_length == 0:
        issues.append("No meta description provided")
    elif ideal_min <= description_length <= ideal_max:
        score += 7
    elif ok_min <= description_length <= ok_max:
        score += 4
        if description_length < ideal_min:
            issues.append("Meta description is a bit short")
        if description_length > ideal_max:
            issues.append("Meta description is a bit long")
    else:
        if description_length < ok_min:
            issues.append("Meta description too short (aim for 150-160)")
        if description_length > ok_max:
            issues.append("Meta description too long - will be truncated")
        score += 1

    return _result("meta", score, issues, {
        "titleLength": title_length,
        "descriptionLength": description_length,
    })


def analyze_structure(post: BlogPostInput) -> CategoryResult:
    """Score heading hierarchy and use of lists.

    Counts opening tag occurrences, so unclosed or malformed elements are
    still counted.
    """
    content = post.content
    if not content:
        return _result("structure", 0, ["No content to analyze"], {
            "h1": 0, "h2": 0, "h3": 0, "lists": 0,
        })

    score = 0
    issues = []

    h1_count = len(H1_PATTERN.findall(content))
    if h1_count == 1:
        score += 3
    elif h1_count == 0:
        issues.append("No H1 heading found")
    else:
        issues.append("Multiple H1 tags found. Use only one.")
        score += 1

    h2_count = len(H2_PATTERN.findall(content))
    if h2_count >= MIN_H2_HEADINGS:
        score += 6
    elif h2_count >= 1:
        score += 3
        issues.append("Add more H2 headings for better structure")
    else:
        issues.append("No H2 headings found. Add subheadings.")

    h3_count = len(H3_PATTERN.findall(content))
    if h3_count > 0:
        score += 3
    else:
        issues.append("Consider adding H3 tags for hierarchy")
        score += 1

    list_count = len(UL_PATTERN.findall(content)) + len(OL_PATTERN.findall(content))
    if list_count >= 1:
        score += 3
    else:
        issues.append("No lists found. Use bullet/numbered lists for readability")

    return _result("structure", score, issues, {
        "h1": h1_count,
        "h2": h2_count,
        "h3": h3_count,
        "lists": list_count,
    })


def analyze_links(post: BlogPostInput) -> CategoryResult:
    """Score internal (root-relative or fragment) and external links."""
    content = post.content
    if not content:
        return _result("links", 0, ["No content to analyze links"], {
            "internal": 0, "external": 0,
        })

    score = 0
    issues = []

    internal_links = len(INTERNAL_LINK_PATTERN.findall(content))
    if internal_links >= MIN_INTERNAL_LINKS:
        score += 5
    elif internal_links >= 1:
        score += 3
        issues.append("Add more internal links to related content")
    else:
        issues.append("No internal links found")

    external_links = len(EXTERNAL_LINK_PATTERN.findall(content))
    if external_links >= MIN_EXTERNAL_LINKS:
        score += 5
    elif external_links >= 1:
        score += 3
        issues.append("Add more external links to authoritative sources")
    else:
        issues.append("No external links found")

    return _result("links", score, issues, {
        "internal": internal_links,
        "external": external_links,
    })


def analyze_images(post: BlogPostInput) -> CategoryResult:
    """Score image count and alt text coverage."""
    content = post.content
    if not content:
        return _result("images", 0, ["No content to analyze images"], {
            "total": 0, "withAlt": 0,
        })

    score = 0
    issues = []

    images = IMG_PATTERN.findall(content)
    image_count = len(images)

    if image_count >= MIN_IMAGES:
        score += 4
    elif image_count >= 1:
        score += 2
        issues.append("Add more images to improve engagement")
    else:
        issues.append("No images found. Add relevant images.")

    images_with_alt = sum(1 for img in images if ALT_TEXT_PATTERN.search(img))

    if image_count > 0:
        alt_percentage = (images_with_alt / image_count) * 100
        if alt_percentage == 100:
            score += 6
        elif alt_percentage >= 50:
            score += 3
            issues.append(f"{image_count - images_with_alt} images missing alt text")
        else:
            issues.append("Most images missing alt text")
            score += 1

    return _result("images", score, issues, {
        "total": image_count,
        "withAlt": images_with_alt,
    })


def count_transition_words(text: str) -> int:
    """Count whole-word, case-insensitive transition word occurrences."""
    return sum(len(pattern.findall(text)) for pattern in TRANSITION_PATTERNS)


def analyze_readability(post: BlogPostInput) -> CategoryResult:
    """Score Flesch Reading Ease, transition words and sentence length."""
    if not post.content:
        return _result("readability", 0, ["No content to analyze readability"], {
            "transitionWords": 0,
            "transitionDensity": "0.00%",
            "fleschScore": 0,
            "fleschGrade": NO_CONTENT_GRADE,
            "avgWordsPerSentence": "0.0",
            "avgSyllablesPerWord": 0,
            "totalWords": 0,
            "totalSentences": 0,
        })

    score = 0
    issues = []

    text = strip_tags(post.content).strip()
    sentences = split_sentences(text)
    words = split_words(text)

    flesch = calculate_flesch_reading_ease(text)

    if flesch.score >= FLESCH_EASY_SCORE:
        score += 2
    elif flesch.score >= FLESCH_HARD_SCORE:
        score += 1
        issues.append(f"Content could be easier to read (Flesch score: {flesch.score:.1f})")
    else:
        issues.append(f"Content is very difficult to read (Flesch score: {flesch.score:.1f})")

    transition_count = count_transition_words(text)
    transition_density = (transition_count / len(words)) * 100 if words else 0

    if transition_density >= TRANSITION_DENSITY_GOOD_PERCENT:
        score += 2
    elif transition_density >= TRANSITION_DENSITY_FAIR_PERCENT:
        score += 1
        issues.append("Use more transition words for better flow")
    else:
        issues.append("Add transition words to improve readability")

    avg_words_per_sentence = len(words) / len(sentences) if sentences else 0
    if avg_words_per_sentence <= SENTENCE_LENGTH_TARGET:
        score += 1
    else:
        issues.append("Sentences are too long - aim for under 20 words per sentence")

    return _result("readability", score, issues, {
        "transitionWords": transition_count,
        "transitionDensity": f"{transition_density:.2f}%",
        "fleschScore": flesch.score,
        "fleschGrade": flesch.grade,
        "avgWordsPerSentence": f"{avg_words_per_sentence:.1f}",
        "avgSyllablesPerWord": flesch.avg_syllables_per_word,
        "totalWords": len(words),
        "totalSentences": len(sentences),
    })


# Analysis order matches CATEGORIES
CATEGORY_ANALYZERS = {
    "keyword": analyze_keyword,
    "content": analyze_content,
    "meta": analyze_meta,
    "structure": analyze_structure,
    "links": analyze_links,
    "images": analyze_images,
    "readability": analyze_readability,
}
