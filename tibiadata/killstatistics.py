"""Parsing of the kill statistics page."""

from __future__ import annotations

from dataclasses import dataclass, field

from bs4 import BeautifulSoup, NavigableString, Tag

from .core import APIDetails, Information, make_information, parse_int, unescape_html


@dataclass
class Entry:
    race: str
    last_day_players_killed: int
    last_day_killed: int
    last_week_players_killed: int
    last_week_killed: int


@dataclass
class Total:
    last_day_players_killed: int = 0
    last_day_killed: int = 0
    last_week_players_killed: int = 0
    last_week_killed: int = 0


@dataclass
class KillStatistics:
    world: str
    entries: list[Entry] = field(default_factory=list)
    total: Total = field(default_factory=Total)


@dataclass
class KillStatisticsResponse:
    killstatistics: KillStatistics
    information: Information


def _first_child_text(cell: Tag) -> str:
    if not cell.contents:
        return ""
    child = cell.contents[0]
    return str(child) if isinstance(child, NavigableString) else child.name


def parse_killstatistics(
    world: str, html: str, details: APIDetails | None = None
) -> KillStatisticsResponse:
    """Parse a kill statistics page into per-race entries and totals."""
    soup = BeautifulSoup(html, "html.parser")
    entries = []
    total = Total()

    for row in soup.select("#KillStatisticsTable .TableContent tr.Odd, tr.Even"):
        cells = [_first_child_text(cell) for cell in row.find_all("td")]
        race, day_players, day_killed, week_players, week_killed = cells[:5]
        entry = Entry(
            race=unescape_html(race),
            last_day_players_killed=parse_int(day_players),
            last_day_killed=parse_int(day_killed),
            last_week_players_killed=parse_int(week_players),
            last_week_killed=parse_int(week_killed),
        )
        total.last_day_players_killed += entry.last_day_players_killed
        total.last_day_killed += entry.last_day_killed
        total.last_week_players_killed += entry.last_week_players_killed
        total.last_week_killed += entry.last_week_killed
        entries.append(entry)

    return KillStatisticsResponse(
        killstatistics=KillStatistics(world=world, entries=entries, total=total),
        information=make_information(details),
    )