"""Parsing of the news archive list."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag

from .core import (
    APIDetails,
    Information,
    make_information,
    news_category,
    news_type,
    parse_date,
    parse_int,
    sanitize_text,
)


@dataclass
class NewsItem:
    id: int
    date: str
    news: str
    category: str
    type: str
    url: str
    url_api: str = ""


@dataclass
class NewsListResponse:
    news: list[NewsItem] = field(default_factory=list)
    information: Information = field(default_factory=Information)


# Paths through the row's nodes, counting whitespace text nodes as well.
_TYPE_PATH = ("child", "next", "child", "next", "next", "child")
_DATE_PATH = ("child", "next", "child")


def _node_text(node: PageElement) -> str:
    return str(node) if isinstance(node, NavigableString) else node.name


def _walk(row: Tag, path: tuple[str, ...]) -> str:
    node: PageElement | None = row
    for step in path:
        if step == "child":
            contents = getattr(node, "contents", None)
            node = contents[0] if contents else None
        else:
            node = node.next_sibling
        if node is None:
            raise ValueError("unexpected layout of a news list row")
    return _node_text(node)


def _parse_row(row: Tag, host: str) -> NewsItem:
    image = row.find("img")
    category = news_category(image.get("src", "") if image is not None else "")
    kind = news_type(sanitize_text(_walk(row, _TYPE_PATH)))
    date = parse_date(_walk(row, _DATE_PATH))

    links = row.find_all("a")
    text = "".join(link.get_text() for link in links)
    href = links[0].get("href", "") if links else ""
    news_id = parse_qs(urlparse(href).query).get("id", [""])[0]
    tibia_url = href.partition(news_id)[0] + news_id if news_id else href

    return NewsItem(
        id=parse_int(news_id),
        date=date,
        news=text,
        category=category,
        type=kind,
        url=tibia_url,
        url_api=f"https://{host}/v4/news/id/{news_id}" if host else "",
    )


def parse_newslist(
    html: str, host: str = "", details: APIDetails | None = None
) -> NewsListResponse:
    """Parse the news archive list; API links are added when a host is given.

    Raises ValueError when a row does not have the expected layout.
    """
    soup = BeautifulSoup(html, "html.parser")
    items = [_parse_row(row, host) for row in soup.select(".Odd, .Even")]
    return NewsListResponse(news=items, information=make_information(details))