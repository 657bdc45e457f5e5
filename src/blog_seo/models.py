"""Data models for blog SEO analysis.

Every model exposes ``to_dict()`` returning the camelCase JSON shape that
stored analysis snapshots and the editor UI read.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class BlogPostInput:
    """Fields of a blog post submitted for analysis."""

    title: str = ""
    content: str = ""  # HTML from the editor
    meta_description: str = ""
    focus_keyword: str = ""
    slug: str = ""

    # camelCase request keys -> attribute names
    FIELD_ALIASES = {
        "title": "title",
        "content": "content",
        "metaDescription": "meta_description",
        "meta_description": "meta_description",
        "focusKeyword": "focus_keyword",
        "focus_keyword": "focus_keyword",
        "slug": "slug",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BlogPostInput":
        """Build a post from a request body, ignoring unknown keys.

        ``None`` values are treated as empty strings.
        """
        values = {}
        for key, value in data.items():
            attr = cls.FIELD_ALIASES.get(key)
            if attr is not None:
                values[attr] = "" if value is None else value
        return cls(**values)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "content": self.content,
            "metaDescription": self.meta_description,
            "focusKeyword": self.focus_keyword,
            "slug": self.slug,
        }


@dataclass
class CategoryResult:
    """Score, issues and facts for one SEO category."""

    score: int
    max_score: int
    issues: list[str] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def percentage(self) -> float:
        """Score as a percentage of the category maximum."""
        return (self.score / self.max_score) * 100 if self.max_score else 0.0

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "issues": list(self.issues),
            "details": dict(self.details),
        }


@dataclass
class Recommendation:
    """Issues of one category grouped under a priority."""

    category: str
    priority: str  # high/medium/low
    issues: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "priority": self.priority,
            "issues": list(self.issues),
        }


@dataclass
class AnalysisResult:
    """Complete SEO analysis of a blog post."""

    overall_score: int  # 0-100
    passed: bool
    category_scores: dict[str, CategoryResult] = field(default_factory=dict)
    recommendations: list[Recommendation] = field(default_factory=list)
    details: dict[str, dict] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "overallScore": self.overall_score,
            "passed": self.passed,
            "categoryScores": {
                name: result.to_dict()
                for name, result in self.category_scores.items()
            },
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "details": {name: dict(facts) for name, facts in self.details.items()},
        }


@dataclass
class FleschResult:
    """Flesch Reading Ease score for a block of text."""

    score: float  # Clamped to 0-100, higher is easier
    grade: str  # e.g. "Standard", "Very Difficult", "No content"
    avg_syllables_per_word: float = 0.0

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "grade": self.grade,
            "avgSyllablesPerWord": self.avg_syllables_per_word,
        }


@dataclass
class ReadabilityReport(FleschResult):
    """Flesch result together with the counts it was computed from."""

    word_count: int = 0
    sentence_count: int = 0
    avg_words_per_sentence: float = 0.0

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "avgWordsPerSentence": self.avg_words_per_sentence,
        })
        return data


@dataclass
class KeywordSuggestion:
    """A frequent word that could serve as a focus keyword."""

    word: str
    count: int

    def to_dict(self) -> dict:
        return {"word": self.word, "count": self.count}


@dataclass
class ContentTypeGuidelines:
    """Length targets and tips for a kind of post."""

    content_type: str
    min_words: int
    max_words: int
    recommended_sections: list[str] = field(default_factory=list)
    seo_tips: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "contentType": self.content_type,
            "minWords": self.min_words,
            "maxWords": self.max_words,
            "recommendedSections": list(self.recommended_sections),
            "seoTips": list(self.seo_tips),
        }
