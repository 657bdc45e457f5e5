"""Load blog posts from exported or previewed HTML pages."""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from blog_seo.models import BlogPostInput

logger = logging.getLogger(__name__)


def parse_blog_post_html(html: str) -> BlogPostInput:
    """Extract post fields from an HTML page.

    Title comes from ``<title>`` (falling back to the first ``<h1>``), the
    meta description and focus keyword from the ``description`` and
    ``keywords`` meta tags, and the slug from the last path segment of the
    canonical link. The body markup becomes the content; an HTML fragment
    without ``<body>`` is used as-is.

    Args:
        html: Full page or fragment markup

    Returns:
        BlogPostInput with every field found, others left empty
    """
    soup = BeautifulSoup(html, "html.parser")

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""
    if not title:
        h1 = soup.find("h1")
        title = h1.get_text(strip=True) if h1 else ""

    description_tag = soup.find("meta", attrs={"name": "description"})
    meta_description = (description_tag.get("content") or "").strip() if description_tag else ""

    focus_keyword = ""
    keywords_tag = soup.find("meta", attrs={"name": "keywords"})
    if keywords_tag and keywords_tag.get("content"):
        focus_keyword = keywords_tag.get("content").split(",")[0].strip()

    slug = ""
    canonical = soup.find("link", attrs={"rel": "canonical"})
    if canonical and canonical.get("href"):
        slug = _slug_from_url(canonical.get("href"))

    body = soup.find("body")
    if body is not None:
        content = body.decode_contents().strip()
    elif soup.find("head") is not None:
        content = ""
    else:
        content = html.strip()

    return BlogPostInput(
        title=title,
        content=content,
        meta_description=meta_description,
        focus_keyword=focus_keyword,
        slug=slug,
    )


def load_blog_post(path: str, encoding: Optional[str] = "utf-8") -> BlogPostInput:
    """Read an HTML file and parse it into a BlogPostInput.

    Raises:
        OSError: If the file cannot be read
    """
    file_path = Path(path)
    html = file_path.read_text(encoding=encoding)
    logger.debug("Loaded %d characters from %s", len(html), file_path)
    return parse_blog_post_html(html)


def _slug_from_url(url: str) -> str:
    path = urlparse(url).path.rstrip("/")
    return path.rsplit("/", 1)[-1] if path else ""
