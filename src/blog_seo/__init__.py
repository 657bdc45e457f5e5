"""Rule-based SEO scoring for blog posts."""

__version__ = "0.1.0"

from blog_seo.score_generator import SEOScoreGenerator
from blog_seo.blog_service import BlogSEOService
from blog_seo.readability import (
    calculate_flesch_reading_ease,
    count_syllables,
    score_to_grade,
)
from blog_seo.category_analyzers import (
    CATEGORY_ANALYZERS,
    analyze_content,
    analyze_images,
    analyze_keyword,
    analyze_links,
    analyze_meta,
    analyze_readability,
    analyze_structure,
)
from blog_seo.document import load_blog_post, parse_blog_post_html
from blog_seo.models import (
    AnalysisResult,
    BlogPostInput,
    CategoryResult,
    ContentTypeGuidelines,
    FleschResult,
    KeywordSuggestion,
    ReadabilityReport,
    Recommendation,
)
from blog_seo.config import Config, ScoringWeights, default_weights

__all__ = [
    # Core
    "SEOScoreGenerator",
    "BlogSEOService",
    # Readability
    "calculate_flesch_reading_ease",
    "count_syllables",
    "score_to_grade",
    # Analyzers
    "CATEGORY_ANALYZERS",
    "analyze_content",
    "analyze_images",
    "analyze_keyword",
    "analyze_links",
    "analyze_meta",
    "analyze_readability",
    "analyze_structure",
    # Documents
    "load_blog_post",
    "parse_blog_post_html",
    # Models
    "AnalysisResult",
    "BlogPostInput",
    "CategoryResult",
    "ContentTypeGuidelines",
    "FleschResult",
    "KeywordSuggestion",
    "ReadabilityReport",
    "Recommendation",
    # Config
    "Config",
    "ScoringWeights",
    "default_weights",
]
