# tests/test_category_analyzers.py
"""Tests for the seven SEO category analyzers."""

import pytest
from blog_seo.category_analyzers import (
    CATEGORY_ANALYZERS,
    analyze_content,
    analyze_images,
    analyze_keyword,
    analyze_links,
    analyze_meta,
    analyze_readability,
    analyze_structure,
    count_transition_words,
)
from blog_seo.constants import CATEGORIES, CATEGORY_MAX_SCORES
from blog_seo.models import BlogPostInput


def words(token: str, count: int) -> list[str]:
    return [token] * count


class TestKeywordAnalyzer:
    """Test suite for analyze_keyword."""

    def test_no_focus_keyword(self):
        result = analyze_keyword(BlogPostInput(title="Anything"))
        assert result.score == 0
        assert result.max_score == 25
        assert result.issues == ["No focus keyword provided"]

    def test_keyword_at_title_beginning(self):
        post = BlogPostInput(title="Python Testing basics", focus_keyword="python testing")
        result = analyze_keyword(post)
        assert result.details["inTitle"] is True
        assert "Keyword in title but not at beginning" not in result.issues
        assert "Keyword not found in title" not in result.issues

    def test_keyword_late_in_title(self):
        post = BlogPostInput(
            title="A very long introduction to the world of python testing",
            focus_keyword="python testing",
        )
        result = analyze_keyword(post)
        assert result.score == 5
        assert "Keyword in title but not at beginning" in result.issues

    def test_keyword_missing_everywhere_without_content(self):
        result = analyze_keyword(BlogPostInput(focus_keyword="seo"))
        assert result.score == 0
        assert result.issues == [
            "Keyword not found in title",
            "Keyword not found in meta description",
            "Keyword not found in URL",
        ]
        assert result.details["density"] == "0%"

    def test_meta_and_slug(self):
        post = BlogPostInput(
            meta_description="All about Python Testing today",
            focus_keyword="python testing",
            slug="guide-to-python-testing",
        )
        result = analyze_keyword(post)
        assert result.score == 9
        assert result.details["inMeta"] is True
        assert result.details["inUrl"] is True

    @pytest.mark.parametrize("occurrences,total", [(1, 200), (5, 200)])
    def test_density_band_edges_get_full_credit(self, occurrences, total):
        """0.5% and 2.5% are both inside the full-credit band."""
        content = " ".join(words("seo", occurrences) + words("word", total - occurrences))
        result = analyze_keyword(BlogPostInput(content=content, focus_keyword="seo"))
        assert result.score == 8
        assert not any("density" in issue for issue in result.issues)

    def test_density_above_band_is_stuffing(self):
        content = " ".join(words("seo", 26) + words("word", 974))
        result = analyze_keyword(BlogPostInput(content=content, focus_keyword="seo"))
        assert result.score == 3
        assert "Keyword density too high (2.60%) - risk of keyword stuffing" in result.issues
        assert result.details["density"] == "2.60%"

    def test_density_below_band(self):
        content = " ".join(words("seo", 1) + words("word", 999))
        result = analyze_keyword(BlogPostInput(content=content, focus_keyword="seo"))
        assert result.score == 0
        assert "Keyword density too low (0.10%)" in result.issues

    def test_case_insensitive(self):
        content = " ".join(words("SEO", 2) + words("word", 98))
        post = BlogPostInput(title="SEO basics", content=content, focus_keyword="Seo")
        result = analyze_keyword(post)
        assert result.details["inTitle"] is True
        assert result.details["density"] == "2.00%"

    def test_regex_characters_in_keyword(self):
        """Keywords are matched literally."""
        post = BlogPostInput(content="learn c++ today", focus_keyword="c++")
        result = analyze_keyword(post)
        assert any("too high" in issue for issue in result.issues)


class TestContentAnalyzer:
    """Test suite for analyze_content."""

    def test_no_content(self):
        result = analyze_content(BlogPostInput())
        assert result.score == 0
        assert result.issues == ["No content provided"]
        assert result.details["wordCount"] == 0

    def test_short_content(self):
        result = analyze_content(BlogPostInput(content="<p>One two three.</p>"))
        assert result.score == 11
        assert result.issues == ["Content too short (3 words). Aim for at least 600."]
        assert result.details == {
            "wordCount": 3,
            "paragraphs": 1,
            "sentences": 1,
            "avgSentenceLength": "3.0",
        }

    @pytest.mark.parametrize("count,points", [(1000, 12), (600, 9), (300, 6)])
    def test_length_bands(self, count, points):
        sentences = " ".join(["Short words here now."] * (count // 4))
        result = analyze_content(BlogPostInput(content=sentences))
        assert result.details["wordCount"] == count
        # One unbroken block, so it is also a long paragraph (+2)
        assert result.score == points + 2 + 4

    def test_long_paragraph(self):
        content = "<p>" + " ".join(words("word", 151)) + ".</p>"
        result = analyze_content(BlogPostInput(content=content))
        assert result.score == 5
        assert "1 paragraphs are too long (>150 words)" in result.issues
        assert "Sentences are too long. Reduce complexity." in result.issues

    def test_paragraphs_split_on_br(self):
        result = analyze_content(BlogPostInput(content="One.<br>Two.<BR/>Three.<br />"))
        assert result.details["paragraphs"] == 3

    def test_moderately_long_sentences(self):
        content = " ".join(words("word", 22)) + "."
        result = analyze_content(BlogPostInput(content=content))
        assert "Some sentences are too long. Keep average under 20 words." in result.issues
        assert result.details["avgSentenceLength"] == "22.0"


class TestMetaAnalyzer:
    """Test suite for analyze_meta."""

    def test_ideal_lengths(self):
        result = analyze_meta(BlogPostInput(title="t" * 55, meta_description="d" * 155))
        assert result.score == 15
        assert result.issues == []
        assert result.details == {"titleLength": 55, "descriptionLength": 155}

    def test_missing_fields(self):
        result = analyze_meta(BlogPostInput())
        assert result.score == 0
        assert result.issues == ["No title provided", "No meta description provided"]

    @pytest.mark.parametrize("length,points,issue", [
        (45, 5, "Title is a bit short"),
        (65, 5, "Title is a bit long"),
        (30, 2, "Title too short (aim for 50-60 chars)"),
        (80, 2, "Title too long - will be truncated in search"),
    ])
    def test_title_bands(self, length, points, issue):
        result = analyze_meta(BlogPostInput(title="t" * length, meta_description="d" * 155))
        assert result.score == points + 7
        assert result.issues == [issue]

    @pytest.mark.parametrize("length,points,issue", [
        (130, 4, "Meta description is a bit short"),
        (170, 4, "Meta description is a bit long"),
        (100, 1, "Meta description too short (aim for 150-160)"),
        (200, 1, "Meta description too long - will be truncated"),
    ])
    def test_description_bands(self, length, points, issue):
        result = analyze_meta(BlogPostInput(title="t" * 55, meta_description="d" * length))
        assert result.score == 8 + points
        assert result.issues == [issue]


class TestStructureAnalyzer:
    """Test suite for analyze_structure."""

    def test_full_structure(self):
        content = (
            "<h1>A</h1><h2>B</h2><h2>C</h2><h2>D</h2>"
            "<h3>E</h3><ul><li>x</li></ul>"
        )
        result = analyze_structure(BlogPostInput(content=content))
        assert result.score == 15
        assert result.issues == []
        assert result.details == {"h1": 1, "h2": 3, "h3": 1, "lists": 1}

    def test_no_content(self):
        result = analyze_structure(BlogPostInput())
        assert result.score == 0
        assert result.issues == ["No content to analyze"]

    def test_plain_text(self):
        result = analyze_structure(BlogPostInput(content="Just text, no tags."))
        assert result.score == 1
        assert "No H1 heading found" in result.issues
        assert "No H2 headings found. Add subheadings." in result.issues
        assert "Consider adding H3 tags for hierarchy" in result.issues

    def test_case_insensitive_with_attributes(self):
        content = "<H1 class='title'>A</H1><h2 id='x'>B</h2><OL><li>1</li></OL>"
        result = analyze_structure(BlogPostInput(content=content))
        assert result.details == {"h1": 1, "h2": 1, "h3": 0, "lists": 1}
        assert "Add more H2 headings for better structure" in result.issues

    def test_multiple_h1(self):
        result = analyze_structure(BlogPostInput(content="<h1>A</h1><h1>B</h1>"))
        assert "Multiple H1 tags found. Use only one." in result.issues
        assert result.details["h1"] == 2

    def test_unterminated_tag(self):
        """Opening tags are counted even when malformed."""
        content = "<h1>Title</h1><h2 broken heading<p>text</p><h3"
        result = analyze_structure(BlogPostInput(content=content))
        assert result.details["h2"] == 1
        assert result.details["h3"] == 0


class TestLinksAnalyzer:
    """Test suite for analyze_links."""

    def test_enough_links(self):
        content = (
            '<a href="/a">a</a><a href="/b">b</a><a href="#c">c</a>'
            '<a href="https://example.com">x</a><a class="ext" href=\'http://example.org\'>y</a>'
        )
        result = analyze_links(BlogPostInput(content=content))
        assert result.score == 10
        assert result.details == {"internal": 3, "external": 2}

    def test_single_links(self):
        content = "<a href='/a'>a</a> <a href='https://example.com'>x</a>"
        result = analyze_links(BlogPostInput(content=content))
        assert result.score == 6
        assert result.issues == [
            "Add more internal links to related content",
            "Add more external links to authoritative sources",
        ]

    def test_relative_links_are_not_internal(self):
        result = analyze_links(BlogPostInput(content='<a href="page.html">p</a>'))
        assert result.score == 0
        assert result.issues == ["No internal links found", "No external links found"]

    def test_no_content(self):
        result = analyze_links(BlogPostInput())
        assert result.issues == ["No content to analyze links"]


class TestImagesAnalyzer:
    """Test suite for analyze_images."""

    def test_images_with_alt(self):
        content = '<img src="a.png" alt="A"><img src="b.png" alt="B"><IMG SRC="c.png" ALT=\'C\'>'
        result = analyze_images(BlogPostInput(content=content))
        assert result.score == 10
        assert result.details == {"total": 3, "withAlt": 3}

    def test_partial_alt(self):
        content = '<img src="a.png" alt="A"><img src="b.png">'
        result = analyze_images(BlogPostInput(content=content))
        assert result.score == 5
        assert result.issues == [
            "Add more images to improve engagement",
            "1 images missing alt text",
        ]

    def test_empty_alt_counts_as_missing(self):
        content = '<img src="a.png" alt=""><img src="b.png" alt=""><img src="c.png">'
        result = analyze_images(BlogPostInput(content=content))
        assert result.score == 5
        assert "Most images missing alt text" in result.issues

    def test_no_images(self):
        result = analyze_images(BlogPostInput(content="<p>text</p>"))
        assert result.score == 0
        assert result.issues == ["No images found. Add relevant images."]


class TestReadabilityAnalyzer:
    """Test suite for analyze_readability."""

    def test_no_content(self):
        result = analyze_readability(BlogPostInput())
        assert result.score == 0
        assert result.issues == ["No content to analyze readability"]
        assert result.details["fleschGrade"] == "No content"

    def test_easy_text_with_transitions(self):
        content = "<p>However, the cat sat. Also, the dog ran. Indeed, it was fun.</p>"
        result = analyze_readability(BlogPostInput(content=content))
        assert result.score == 5
        assert result.issues == []
        assert result.details["transitionWords"] == 3
        assert result.details["totalSentences"] == 3

    def test_hard_text_without_transitions(self):
        content = "<p>" + " ".join(["internationalization"] * 30) + ".</p>"
        result = analyze_readability(BlogPostInput(content=content))
        assert result.score == 0
        assert result.issues == [
            "Content is very difficult to read (Flesch score: 0.0)",
            "Add transition words to improve readability",
            "Sentences are too long - aim for under 20 words per sentence",
        ]

    def test_count_transition_words(self):
        text = "However, in fact this is also true. Finally done. Alsoish."
        assert count_transition_words(text) == 4
        assert count_transition_words("Furthermore") == 1
        assert count_transition_words("On the other hand, FOR EXAMPLE") == 2


class TestAnalyzersNeverRaise:
    """Every analyzer degrades instead of raising."""

    @pytest.mark.parametrize("content", [
        "",
        "plain text",
        "<h2",
        "<a href=\"/unclosed",
        "<img src='x' alt='",
        "<<<>>>",
        "</p></p><br><br/>",
    ])
    @pytest.mark.parametrize("category", CATEGORIES)
    def test_malformed_markup(self, category, content):
        post = BlogPostInput(title="<h1", content=content, focus_keyword="(", slug="[")
        result = CATEGORY_ANALYZERS[category](post)
        assert 0 <= result.score <= result.max_score
        assert result.max_score == CATEGORY_MAX_SCORES[category]
