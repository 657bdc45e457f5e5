"""
Pytest fixtures shared by the blog SEO tests.
"""

import pytest

from blog_seo.models import BlogPostInput


# 57 words, 9 short sentences, two transition words, one keyword occurrence
PARAGRAPH = (
    "<p>However, python testing keeps the code safe. We write small tests for "
    "each part of the app. Also, the team runs them every day. A good test is "
    "short and clear. It checks one thing at a time. Bad tests are slow and "
    "hard to read. Keep them fast. Fix them when they break. Then trust them.</p>"
)

LINKS = (
    '<p>Read more about <a href="/blog/unit-tests">unit tests</a>, '
    '<a href="/blog/mocks">mocks</a> and <a href="#setup">setup</a>. '
    'See the <a href="https://docs.pytest.org">pytest docs</a> and the '
    '<a href="https://docs.python.org/3/library/unittest.html">unittest docs</a>.</p>'
)

IMAGES = (
    '<p><img src="/img/run.png" alt="Test run">'
    '<img src="/img/report.png" alt="Coverage report">'
    '<img src="/img/ci.png" alt="CI pipeline"></p>'
)


def build_perfect_content() -> str:
    """Body that satisfies every category rule."""
    parts = ["<h1>Python Testing Guide</h1>"]
    for i in range(20):
        if i % 5 == 0:
            parts.append(f"<h2>Section {i // 5 + 1}</h2>")
        parts.append(PARAGRAPH)
    parts.append("<h3>Small steps</h3>")
    parts.append("<ul><li>Write tests first.</li><li>Run them often.</li></ul>")
    parts.append(LINKS)
    parts.append(IMAGES)
    return "\n".join(parts)


@pytest.fixture
def perfect_post() -> BlogPostInput:
    """A post that should score (close to) full marks."""
    return BlogPostInput(
        # 51 characters, keyword at position 0
        title="Python Testing Guide: Practical Tips for Developers",
        content=build_perfect_content(),
        # 155 characters
        meta_description=("Learn python testing step by step. " * 5)[:155],
        focus_keyword="python testing",
        slug="python-testing-guide",
    )


@pytest.fixture
def empty_post() -> BlogPostInput:
    """A post with every field empty."""
    return BlogPostInput()


@pytest.fixture
def sample_html_page() -> str:
    """Exported post page with head metadata."""
    return """
<!DOCTYPE html>
<html>
<head>
    <title>Python Testing Guide: Practical Tips for Developers</title>
    <meta name="description" content="Learn python testing step by step with pytest.">
    <meta name="keywords" content="python testing, pytest, unit tests">
    <link rel="canonical" href="https://example.com/blog/python-testing-guide/">
</head>
<body>
    <h1>Python Testing Guide</h1>
    <p>However, python testing keeps the code safe.</p>
</body>
</html>
"""
