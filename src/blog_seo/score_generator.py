"""SEO score generator that combines the category analyzers."""

import logging
import math
from typing import Mapping, Optional, Union

from blog_seo.category_analyzers import CATEGORY_ANALYZERS
from blog_seo.config import ScoringWeights, default_weights
from blog_seo.constants import (
    HIGH_PRIORITY_PERCENTAGE,
    PASS_THRESHOLD,
    PRIORITY_ORDER,
)
from blog_seo.models import (
    AnalysisResult,
    BlogPostInput,
    CategoryResult,
    FleschResult,
    Recommendation,
)
from blog_seo.readability import calculate_flesch_reading_ease, count_syllables

logger = logging.getLogger(__name__)


class SEOScoreGenerator:
    """Scores a blog post across seven weighted SEO categories."""

    def __init__(self, weights: Optional[ScoringWeights] = None):
        """Initialize the generator.

        Args:
            weights: Category weights for the overall score (defaults sum to 100)
        """
        self.weights = weights or default_weights

    def analyze_blog_post(
        self, blog_data: Union[BlogPostInput, Mapping]
    ) -> AnalysisResult:
        """Run every category analyzer and combine the results.

        Args:
            blog_data: BlogPostInput or a request body with camelCase keys

        Returns:
            AnalysisResult with overall score, per-category results and
            prioritized recommendations
        """
        if not isinstance(blog_data, BlogPostInput):
            blog_data = BlogPostInput.from_dict(blog_data)

        scores = {
            category: analyzer(blog_data)
            for category, analyzer in CATEGORY_ANALYZERS.items()
        }

        total_score = self.calculate_total_score(scores)
        recommendations = self.generate_recommendations(scores)

        logger.debug(
            "Scored post %r: %d/100 (%s)",
            blog_data.title[:60],
            total_score,
            ", ".join(f"{name}={result.score}/{result.max_score}" for name, result in scores.items()),
        )

        return AnalysisResult(
            overall_score=total_score,
            passed=total_score >= PASS_THRESHOLD,
            category_scores=scores,
            recommendations=recommendations,
            details=self.get_detailed_analysis(scores),
        )

    def calculate_total_score(self, scores: Mapping[str, CategoryResult]) -> int:
        """Combine category results into a weighted overall score.

        Args:
            scores: Category name to CategoryResult

        Weights are scaled to their sum, so custom weights that do not add
        up to 100 still give a 0-100 score. All-zero weights score 0.

        Returns:
            Weighted total rounded half up
        """
        weight_total = self.weights.total
        if weight_total <= 0:
            return 0

        total = 0.0
        for category, result in scores.items():
            weight = self.weights.weight_for(category)
            total += (result.score / result.max_score) * weight
        if weight_total != 100:
            total = total * 100 / weight_total
        return int(math.floor(total + 0.5))

    def generate_recommendations(
        self, scores: Mapping[str, CategoryResult]
    ) -> list[Recommendation]:
        """Group issues by category, most urgent first.

        Categories scoring under 50% are high priority, the rest medium.
        Categories without issues are left out.

        Args:
            scores: Category name to CategoryResult

        Returns:
            Recommendations ordered high, medium, low
        """
        recommendations = [
            Recommendation(
                category=category.capitalize(),
                priority="high" if result.percentage < HIGH_PRIORITY_PERCENTAGE else "medium",
                issues=list(result.issues),
            )
            for category, result in scores.items()
            if result.issues
        ]

        return sorted(recommendations, key=lambda rec: PRIORITY_ORDER[rec.priority])

    def get_detailed_analysis(self, scores: Mapping[str, CategoryResult]) -> dict[str, dict]:
        """Collect the details record of every category."""
        return {category: result.details for category, result in scores.items()}

    def calculate_flesch_reading_ease(self, text: str) -> FleschResult:
        """Flesch Reading Ease of plain text."""
        return calculate_flesch_reading_ease(text)

    def count_syllables(self, word: str) -> int:
        """Estimated syllables in a word."""
        return count_syllables(word)
