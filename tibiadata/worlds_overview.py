"""Parsing of the overview page listing all game worlds."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from .core import (
    APIDetails,
    Information,
    make_information,
    parse_date,
    parse_datetime,
    parse_int,
)


@dataclass
class OverviewWorld:
    name: str
    status: str
    players_online: int
    location: str
    pvp_type: str
    premium_only: bool
    transfer_type: str
    battleye_protected: bool
    battleye_date: str
    game_world_type: str
    tournament_world_type: str


@dataclass
class OverviewWorlds:
    players_online: int = 0
    record_players: int = 0
    record_date: str = ""
    regular_worlds: list[OverviewWorld] = field(default_factory=list)
    tournament_worlds: list[OverviewWorld] = field(default_factory=list)


@dataclass
class WorldsOverviewResponse:
    worlds: OverviewWorlds
    information: Information


_RECORD_RE = re.compile(r".*</b>...(.*) players \(on (.*)\)")
_WORLD_RE = re.compile(
    r'.*world=.*">(.*)</a></td>.*right;">(.*)</td><td>(.*)</td><td>(.*)</td>'
    r'<td align="center" valign="middle">(.*)</td><td>(.*)</td>'
)
_BATTLEYE_SINCE_RE = re.compile(
    r".*game world has been protected by BattlEye since (.*).&lt;/p.*"
)


def _battleye(cell: str) -> tuple[bool, str]:
    if not cell:
        return False, ""
    if "BattlEye since its release" in cell:
        return True, "release"
    match = _BATTLEYE_SINCE_RE.search(cell)
    if match is None:
        raise ValueError(f"unrecognised BattlEye status: {cell!r}")
    return True, parse_date(match[1])


def _transfer_type(info: str) -> str:
    if "blocked" in info:
        return "blocked"
    if "locked" in info:
        return "locked"
    return "regular"


def _parse_world(match: re.Match[str], category: str) -> OverviewWorld:
    name, players, location, pvp_type, battleye_cell, info = match.group(1, 2, 3, 4, 5, 6)

    if players == "-":
        status, online = "unknown", 0
    else:
        online = parse_int(players)
        status = "online" if online > 0 else "offline"

    game_world_type = "regular"
    if "experimental" in info:
        game_world_type = "experimental"

    tournament_world_type = ""
    if category == "tournament":
        game_world_type = "tournament"
        tournament_world_type = "restricted" if "restricted" in info else "regular"

    protected, battleye_date = _battleye(battleye_cell)

    return OverviewWorld(
        name=name,
        status=status,
        players_online=online,
        location=location,
        pvp_type=pvp_type,
        premium_only="premium" in info,
        transfer_type=_transfer_type(info),
        battleye_protected=protected,
        battleye_date=battleye_date,
        game_world_type=game_world_type,
        tournament_world_type=tournament_world_type,
    )


def parse_worlds_overview(
    html: str, details: APIDetails | None = None
) -> WorldsOverviewResponse:
    """Parse the worlds overview into regular and tournament world lists.

    Raises ValueError when a BattlEye status cannot be understood.
    """
    soup = BeautifulSoup(html, "html.parser")
    worlds = OverviewWorlds()
    category = ""

    for row in soup.select(".TableContentContainer .TableContent tbody tr"):
        row_html = row.decode_contents()

        record = _RECORD_RE.search(row_html)
        if record is not None:
            worlds.record_players = parse_int(record[1])
            worlds.record_date = parse_datetime(record[2])

        if ">Regular Worlds<" in row_html:
            category = "regular"
        elif ">Tournament Worlds<" in row_html:
            category = "tournament"

        match = _WORLD_RE.search(row_html)
        if match is None:
            continue

        world = _parse_world(match, category)
        worlds.players_online += world.players_online
        if category == "regular":
            worlds.regular_worlds.append(world)
        elif category == "tournament":
            worlds.tournament_worlds.append(world)

    return WorldsOverviewResponse(worlds=worlds, information=make_information(details))