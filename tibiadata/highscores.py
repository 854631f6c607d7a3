"""Parsing of the highscores page."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from bs4 import BeautifulSoup

from .core import APIDetails, Information, make_information, parse_int, unescape_html


class HighscoreCategory(str, Enum):
    """Highscore categories offered by the game website."""

    ACHIEVEMENTS = "achievements"
    AXE_FIGHTING = "axefighting"
    BOSS_POINTS = "bosspoints"
    CHARM_POINTS = "charmpoints"
    CLUB_FIGHTING = "clubfighting"
    DISTANCE_FIGHTING = "distancefighting"
    DROME_SCORE = "dromescore"
    EXPERIENCE = "experience"
    FISHING = "fishing"
    FIST_FIGHTING = "fistfighting"
    GOSHNARS_TAINT = "goshnarstaint"
    LOYALTY_POINTS = "loyaltypoints"
    MAGIC_LEVEL = "magiclevel"
    SHIELDING = "shielding"
    SWORD_FIGHTING = "swordfighting"


class HighscorePageTooBigError(ValueError):
    """Raised when the requested page is beyond the last highscore page."""

    def __init__(self, page: int, total_pages: int) -> None:
        super().__init__(
            f"the provided highscore page {page} is too big (total pages: {total_pages})"
        )
        self.page = page
        self.total_pages = total_pages


@dataclass
class Highscore:
    rank: int
    name: str
    vocation: str
    world: str
    level: int
    value: int
    title: str = ""


@dataclass
class HighscorePage:
    current_page: int
    total_pages: int
    total_records: int


@dataclass
class Highscores:
    world: str
    category: str
    vocation: str
    highscore_age: int
    highscore_list: list[Highscore] = field(default_factory=list)
    highscore_page: HighscorePage = field(default_factory=lambda: HighscorePage(0, 0, 0))


@dataclass
class HighscoresResponse:
    highscores: Highscores
    information: Information


_AGE_RE = re.compile(r'.*<div class="Text">Highscores.*Last Update: ([0-9]+) minutes ago.*')
_PAGE_RE = re.compile(r".*<b>.*Pages:\ ?(.*)</b>.*<b>.*Results:\ ?([0-9,]+)</b>.*")
_SEVEN_COLUMNS_RE = re.compile(
    r'<td>(.*)</td><td.*">(.*)</a></td><td.*>(.*)</td><td.*>(.*)</td>'
    r"<td>(.*)</td><td.*>(.*)</td><td.*>(.*)</td>"
)
_SIX_COLUMNS_RE = re.compile(
    r'<td>(.*)</td><td.*">(.*)</a></td><td.*">(.*)</td><td>(.*)</td>'
    r"<td.*>(.*)</td><td.*>(.*)</td>"
)


def _parse_row(row_html: str, loyalty: bool) -> Highscore | None:
    match = (_SEVEN_COLUMNS_RE if loyalty else _SIX_COLUMNS_RE).search(row_html)
    if match is None:
        return None
    if loyalty:
        title, vocation, world, level, value = match.group(3, 4, 5, 6, 7)
    else:
        title = ""
        vocation, world, level, value = match.group(3, 4, 5, 6)
    return Highscore(
        rank=parse_int(match[1]),
        name=unescape_html(match[2]),
        vocation=vocation,
        world=world,
        level=parse_int(level),
        value=parse_int(value),
        title=title,
    )


def parse_highscores(
    world: str,
    category: HighscoreCategory | str,
    vocation_name: str,
    current_page: int,
    html: str,
    details: APIDetails | None = None,
) -> HighscoresResponse:
    """Parse a highscores page into a response.

    Raises HighscorePageTooBigError when current_page exceeds the page count.
    """
    category = HighscoreCategory(category)
    loyalty = category is HighscoreCategory.LOYALTY_POINTS

    age_match = _AGE_RE.search(html)
    age = parse_int(age_match[1]) if age_match else 0

    total_pages = total_records = 0
    page_match = _PAGE_RE.search(html)
    if page_match:
        total_pages = page_match[1].count('class="PageLink')
        total_records = parse_int(page_match[2])

    if current_page > total_pages:
        raise HighscorePageTooBigError(current_page, total_pages)

    soup = BeautifulSoup(html, "html.parser")
    header = soup.select_one(".TableContent tr")
    rows = header.find_next_siblings() if header is not None else []
    entries = [
        entry
        for entry in (_parse_row(row.decode_contents(), loyalty) for row in rows)
        if entry is not None
    ]

    return HighscoresResponse(
        highscores=Highscores(
            world=world.title(),
            category=category.value,
            vocation=vocation_name,
            highscore_age=age,
            highscore_list=entries,
            highscore_page=HighscorePage(
                current_page=current_page,
                total_pages=total_pages,
                total_records=total_records,
            ),
        ),
        information=make_information(details),
    )