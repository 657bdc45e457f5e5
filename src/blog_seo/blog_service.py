"""Publish-time SEO service consumed by the editor's web layer."""

import logging
import math
import re
from collections import Counter
from datetime import datetime, timezone
from typing import Mapping, Optional, Union

from blog_seo.category_analyzers import analyze_readability
from blog_seo.config import Config
from blog_seo.constants import (
    CONTENT_TYPE_GUIDELINES,
    DEFAULT_CONTENT_TYPE,
    MIN_SUGGESTION_WORD_LENGTH,
    NO_CONTENT_GRADE,
    TOP_KEYWORD_SUGGESTIONS,
)
from blog_seo.models import (
    BlogPostInput,
    CategoryResult,
    ContentTypeGuidelines,
    KeywordSuggestion,
    ReadabilityReport,
)
from blog_seo.score_generator import SEOScoreGenerator
from blog_seo.text_utils import count_html_words, split_sentences, split_words, strip_tags

logger = logging.getLogger(__name__)

SLUG_DISALLOWED_PATTERN = re.compile(r'[^\w\s-]', re.ASCII)
SLUG_SEPARATOR_PATTERN = re.compile(r'[\s_-]+')
DIGITS_PATTERN = re.compile(r'\d+', re.ASCII)


class BlogSEOService:
    """Wraps the score generator with post metadata and writing helpers."""

    def __init__(
        self,
        generator: Optional[SEOScoreGenerator] = None,
        config: Optional[Config] = None,
    ):
        """Initialize the service.

        Args:
            generator: Score generator to use (default weights if None)
            config: Runtime configuration (reading speed)
        """
        self.seo_analyzer = generator or SEOScoreGenerator()
        self.config = config or Config()

    def analyze_blog_before_publish(
        self, blog_data: Union[BlogPostInput, Mapping]
    ) -> dict:
        """Score a post and attach publishing metadata.

        This is the only layer that converts unexpected failures into a
        result instead of raising.

        Args:
            blog_data: BlogPostInput or a request body with camelCase keys

        The metadata slug is the post's own slug when set, otherwise one
        generated from the title.

        Returns:
            ``{"seoScore": ..., "metadata": ...}`` on success, otherwise
            ``{"error": ..., "message": ...}``
        """
        try:
            if not isinstance(blog_data, BlogPostInput):
                blog_data = BlogPostInput.from_dict(blog_data)

            seo_score = self.seo_analyzer.analyze_blog_post(blog_data)
            results = {
                "seoScore": seo_score.to_dict(),
                "metadata": {
                    "analyzedAt": datetime.now(timezone.utc).isoformat(),
                    "wordCount": self.get_word_count(blog_data.content),
                    "readingTime": self.calculate_reading_time(blog_data.content),
                    "slug": blog_data.slug or self.generate_slug(blog_data.title),
                },
            }

            logger.info("SEO analysis completed: score %d", seo_score.overall_score)
            return results
        except Exception as e:
            logger.exception("SEO analysis failed")
            return {
                "error": "SEO analysis failed",
                "message": str(e),
            }

    def generate_slug(self, title: str) -> str:
        """Turn a title into a URL slug.

        Example:
            "Hello, World! 2024" -> "hello-world-2024"
        """
        if not title:
            return ""

        slug = title.lower().strip()
        slug = SLUG_DISALLOWED_PATTERN.sub('', slug)
        slug = SLUG_SEPARATOR_PATTERN.sub('-', slug)
        return slug.strip('-')

    def get_word_count(self, content: str) -> int:
        """Words in the post body once tags are removed."""
        return count_html_words(content)

    def calculate_reading_time(self, content: str) -> int:
        """Estimated reading time in whole minutes, rounded up."""
        if not content:
            return 0
        return math.ceil(self.get_word_count(content) / self.config.words_per_minute)

    def extract_keyword_suggestions(
        self, content: Optional[str], title: Optional[str]
    ) -> list[KeywordSuggestion]:
        """Suggest focus keywords from the most frequent words.

        Words of four or more characters that are not plain numbers are
        counted over the title and body. Ties keep first-seen order.

        Args:
            content: Post body HTML
            title: Post title

        Returns:
            Up to ten suggestions, most frequent first
        """
        if not content and not title:
            return []

        text = strip_tags(f"{title or ''} {content or ''}".lower())

        words = [
            word for word in split_words(text)
            if len(word) > MIN_SUGGESTION_WORD_LENGTH and not DIGITS_PATTERN.fullmatch(word)
        ]

        return [
            KeywordSuggestion(word=word, count=count)
            for word, count in Counter(words).most_common(TOP_KEYWORD_SUGGESTIONS)
        ]

    def get_content_type_recommendations(
        self, content_type: str = DEFAULT_CONTENT_TYPE
    ) -> ContentTypeGuidelines:
        """Length targets and tips for blog, tutorial or review posts.

        Unknown types fall back to the blog guidelines.
        """
        if content_type not in CONTENT_TYPE_GUIDELINES:
            content_type = DEFAULT_CONTENT_TYPE
        guidelines = CONTENT_TYPE_GUIDELINES[content_type]

        return ContentTypeGuidelines(
            content_type=content_type,
            min_words=guidelines["min_words"],
            max_words=guidelines["max_words"],
            recommended_sections=list(guidelines["recommended_sections"]),
            seo_tips=list(guidelines["seo_tips"]),
        )

    def calculate_flesch_reading_ease(self, content: str) -> ReadabilityReport:
        """Flesch Reading Ease of post HTML, with word and sentence counts."""
        if not content:
            return ReadabilityReport(score=0, grade=NO_CONTENT_GRADE)

        text = strip_tags(content).strip()
        sentences = split_sentences(text)
        words = split_words(text)

        flesch = self.seo_analyzer.calculate_flesch_reading_ease(text)

        return ReadabilityReport(
            score=flesch.score,
            grade=flesch.grade,
            avg_syllables_per_word=flesch.avg_syllables_per_word,
            word_count=len(words),
            sentence_count=len(sentences),
            avg_words_per_sentence=(
                round(len(words) / len(sentences), 1) if sentences else 0
            ),
        )

    def get_readability_analysis(self, content: str) -> CategoryResult:
        """Readability category result for a body without other fields."""
        return analyze_readability(BlogPostInput(content=content or ""))
