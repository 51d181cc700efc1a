"""
Render the HTML and feed fragments that carry site metadata into built pages.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin

from jinja2 import Template

from .export import write_file
from .models import SiteMetadata

logger = logging.getLogger(__name__)

FEED_PATH = "feed/feed.xml"

HEAD_TEMPLATE = """<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{% if page_title %}{{ page_title }} | {% endif %}{{ site.title }}</title>
<meta name="description" content="{{ site.description }}">
<meta name="author" content="{{ site.author.name }}">
<link rel="canonical" href="{{ site.url }}">
<link rel="alternate" type="application/atom+xml" href="{{ feed_url }}" title="{{ site.title }}">
<meta property="og:site_name" content="{{ site.title }}">
<meta property="og:title" content="{{ page_title or site.title }}">
<meta property="og:description" content="{{ site.description }}">
<meta property="og:url" content="{{ site.url }}">
"""

SOCIAL_TEMPLATE = """<ul class="social-links">
{% for platform, link in links %}  <li><a href="{{ link }}" rel="me" class="social-{{ platform }}">{{ platform }}</a></li>
{% endfor %}</ul>
"""

FEED_AUTHOR_TEMPLATE = """<author>
  <name>{{ author.name }}</name>
  <email>{{ author.email }}</email>
  <uri>{{ author.url }}</uri>
</author>
"""


def feed_url(metadata: SiteMetadata) -> str:
    # urljoin drops the last segment of a base without a trailing slash
    base = metadata.url if metadata.url.endswith("/") else metadata.url + "/"
    return urljoin(base, FEED_PATH)


def render_head(metadata: SiteMetadata, page_title: Optional[str] = None) -> str:
    return Template(HEAD_TEMPLATE, autoescape=True).render(
        site=metadata,
        page_title=page_title,
        feed_url=feed_url(metadata),
    )


def render_social_links(metadata: SiteMetadata) -> str:
    return Template(SOCIAL_TEMPLATE, autoescape=True).render(links=metadata.social_links())


def render_feed_author(metadata: SiteMetadata) -> str:
    return Template(FEED_AUTHOR_TEMPLATE, autoescape=True).render(author=metadata.author)


def render_site(metadata: SiteMetadata, output_dir: str | Path) -> list[Path]:
    """
    Write every metadata fragment into ``output_dir``.

    Produces ``head.html``, ``social.html``, ``feed_author.xml`` and a
    ``metadata.json`` copy of the record for tools that read data files.
    Returns the written paths.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    fragments = {
        "head.html": render_head(metadata),
        "social.html": render_social_links(metadata),
        "feed_author.xml": render_feed_author(metadata),
    }

    written = []
    for name, content in fragments.items():
        path = output_dir / name
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Wrote {path}")
        written.append(path)

    written.append(write_file(metadata, output_dir / "metadata.json"))
    return written
