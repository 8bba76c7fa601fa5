"""Fetch a webpage and convert it to a reader mode article."""
from __future__ import annotations

import logging
import os

import lxml.html
import requests
from bs4 import BeautifulSoup
from lxml import etree
from readability import Document

from .schemas import FailureKind, ReaderArticle, ReaderFailure, ReaderResult

logger = logging.getLogger(__name__)

USER_AGENT = os.getenv("READER_USER_AGENT", "ReaderModeFor/1.0")
REQUEST_TIMEOUT = float(os.getenv("READER_REQUEST_TIMEOUT", "10") or 10)


class ReaderModeError(Exception):
    """Raised by a conversion stage; carries the stage that failed."""

    def __init__(self, kind: FailureKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def fetch_document_source(url: str) -> tuple[str, str]:
    """Fetch ``url`` once and return the final URL and the decoded body.

    Redirects are followed so relative links later resolve against the page
    that was actually served. Without a charset in ``Content-Type`` requests
    assumes ISO-8859-1, so the encoding is detected from the body instead.
    """

    try:
        response = requests.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=REQUEST_TIMEOUT,
            allow_redirects=True,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ReaderModeError(FailureKind.NETWORK, f"Failed to fetch {url!r}: {exc}") from exc

    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = response.apparent_encoding or "utf-8"

    return str(response.url or url), response.text


def parse_document(html: str, base_url: str) -> lxml.html.HtmlElement:
    """Build an lxml document for ``html`` anchored at ``base_url``."""

    # Re-encode so pages starting with an XML encoding declaration still parse.
    parser = lxml.html.HTMLParser(encoding="utf-8")
    try:
        return lxml.html.document_fromstring(html.encode("utf-8"), parser=parser, base_url=base_url)
    except (etree.LxmlError, ValueError) as exc:
        raise ReaderModeError(FailureKind.PARSE, f"Could not parse {base_url!r}: {exc}") from exc


def _visible_text(fragment: str) -> str:
    return BeautifulSoup(fragment, "html.parser").get_text(" ", strip=True)


def _fallback_title(content: str, url: str) -> str:
    heading = BeautifulSoup(content, "html.parser").find(["h1", "h2"])
    if heading is not None:
        text = heading.get_text(" ", strip=True)
        if text:
            return text
    return url


def extract_article(document: lxml.html.HtmlElement, url: str) -> ReaderArticle:
    """Run readability over ``document`` and return its title and content."""

    try:
        readable = Document(document, url=url)
        title = readable.short_title().strip()
        content = readable.summary(html_partial=True)
    except Exception as exc:
        raise ReaderModeError(FailureKind.EXTRACTION, f"Readability failed for {url!r}: {exc}") from exc

    if not _visible_text(content):
        raise ReaderModeError(FailureKind.EXTRACTION, f"No readable content found at {url!r}")

    return ReaderArticle(url=url, title=title or _fallback_title(content, url), content=content)


def reader_mode_for(url: str) -> ReaderResult:
    """Convert ``url`` to reader mode.

    Never raises: every failure is logged and returned as a ``ReaderFailure``
    tagged with the stage that failed.
    """

    try:
        final_url, html = fetch_document_source(url)
        document = parse_document(html, final_url)
        article = extract_article(document, final_url)
    except ReaderModeError as exc:
        logger.warning("Error converting page to reader mode (%s): %s", exc.kind.value, exc)
        return ReaderFailure(url=url, kind=exc.kind, detail=str(exc))

    logger.info("Converted %s to reader mode (%d characters)", url, len(article.content))
    return ReaderArticle(url=url, title=article.title, content=article.content)
