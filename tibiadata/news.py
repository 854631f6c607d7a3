"""Parsing of a single news article or news ticker page."""

from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from .core import (
    APIDetails,
    Information,
    make_information,
    news_category,
    parse_date,
    remove_html_tags,
)


@dataclass
class News:
    id: int
    date: str = ""
    title: str = ""
    category: str = ""
    type: str = ""
    url: str = ""
    content: str = ""
    content_html: str = ""


@dataclass
class NewsResponse:
    news: News
    information: Information


_MARTEL_RE = re.compile(
    r'<img src="https://static\.tibia\.com/images/global/letters/letter_martel_(.)\.gif" '
    r"([^/>]+..)"
)


def replace_martel_letters(html: str) -> str:
    """Replace the decorative initial-letter images of articles with plain letters."""
    return _MARTEL_RE.sub(r"\1", html)


def _inner_html(tag: Tag | None) -> str:
    return tag.decode_contents() if tag is not None else ""


def _apply_headline(news: News, headline: Tag) -> None:
    image = headline.find("img")
    news.category = news_category(image.get("src", "") if image is not None else "")
    date_html = _inner_html(headline.select_one(".NewsHeadlineDate"))
    news.date = parse_date(date_html.replace(" - ", ""))
    news.title = remove_html_tags(_inner_html(headline.select_one(".NewsHeadlineText")))
    if news.title == "News Ticker":
        news.type = "ticker"
        news.title = ""


def _apply_ticker(news: News, container: Tag) -> None:
    paragraphs = container.find_all("p")
    text = "".join(paragraph.get_text() for paragraph in paragraphs)
    if text == "":
        news.content = container.get_text()
        news.content_html = container.decode_contents()
    else:
        news.content = text
        news.content_html = paragraphs[0].decode_contents()


def _apply_article(news: News, container: Tag) -> None:
    content_html = replace_martel_letters(container.decode_contents())
    news.content_html = content_html
    news.content = BeautifulSoup(content_html, "html.parser").get_text()


def parse_news(
    news_id: int, url: str, html: str, details: APIDetails | None = None
) -> NewsResponse:
    """Parse a news page into its headline data and content."""
    soup = BeautifulSoup(html, "html.parser")
    news = News(id=news_id, url=url)

    for headline in soup.select(".NewsHeadline"):
        _apply_headline(news, headline)

    for container in soup.select(".NewsTableContainer"):
        if news.type == "ticker":
            _apply_ticker(news, container)
        else:
            _apply_article(news, container)

    return NewsResponse(news=news, information=make_information(details))