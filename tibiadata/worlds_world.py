"""Parsing of the page describing a single game world."""

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
    sanitize_text,
    unescape_html,
)


@dataclass
class OnlinePlayer:
    name: str
    level: int
    vocation: str


@dataclass
class World:
    name: str
    status: str = ""
    players_online: int = 0
    record_players: int = 0
    record_date: str = ""
    creation_date: str = ""
    location: str = ""
    pvp_type: str = ""
    premium_only: bool = False
    transfer_type: str = ""
    world_quest_titles: list[str] = field(default_factory=list)
    battleye_protected: bool = False
    battleye_date: str = ""
    game_world_type: str = ""
    tournament_world_type: str = ""
    online_players: list[OnlinePlayer] = field(default_factory=list)


@dataclass
class WorldResponse:
    world: World
    information: Information


_ROW_RE = re.compile(r"<td class=.*>(.*):</td><td>(.*)</td>")
_RECORD_RE = re.compile(r"(.*) players \(on (.*)\)")
_BATTLEYE_SINCE_RE = re.compile(r"Protected by BattlEye since (.*)\.")
_PLAYER_RE = re.compile(r'<td style=.*name=.*">(.*)</a>.*">(.*)</td>.*">(.*)</td>')
_LINK_RE = re.compile(r"</?a\b[^>]*>")

_NO_TITLE = "This game world currently has no title."
_NOT_PROTECTED = "Not protected by BattlEye."


def _remove_links(text: str) -> str:
    return _LINK_RE.sub("", text)


def _status(value: str) -> str:
    if "</div>Online" in value:
        return "online"
    if "</div>Offline" in value:
        return "offline"
    return "unknown"


def _apply_battleye(world: World, value: str) -> None:
    if value == _NOT_PROTECTED:
        world.battleye_protected = False
        return
    world.battleye_protected = True
    if "BattlEye since its release" in value:
        world.battleye_date = "release"
        return
    match = _BATTLEYE_SINCE_RE.search(value)
    if match is None:
        raise ValueError(f"unrecognised BattlEye status: {value!r}")
    world.battleye_date = parse_date(match[1])


def _apply_row(world: World, label: str, value: str) -> None:
    if label == "Status":
        world.status = _status(value)
    elif label == "Players Online":
        world.players_online = parse_int(value)
    elif label == "Online Record":
        record = _RECORD_RE.search(value)
        if record is not None:
            world.record_players = parse_int(record[1])
            world.record_date = parse_datetime(record[2])
    elif label == "Creation Date":
        world.creation_date = parse_date(value)
    elif label == "Location":
        world.location = value
    elif label == "PvP Type":
        world.pvp_type = value
    elif label == "Premium Type":
        world.premium_only = True
    elif label == "Transfer Type":
        world.transfer_type = value
    elif label == "World Quest Titles":
        if value != _NO_TITLE:
            world.world_quest_titles.extend(
                _remove_links(title) for title in value.split(", ") if title
            )
    elif label == "BattlEye Status":
        _apply_battleye(world, value)
    elif label == "Game World Type":
        world.game_world_type = value.lower()
    elif label == "Tournament World Type":
        world.game_world_type = "tournament"
        world.tournament_world_type = (
            "restricted" if value == "Restricted Store" else value.lower()
        )


def _parse_player(row_html: str) -> OnlinePlayer | None:
    match = _PLAYER_RE.search(row_html)
    if match is None:
        return None
    return OnlinePlayer(
        name=sanitize_text(match[1]),
        level=parse_int(match[2]),
        vocation=sanitize_text(match[3]),
    )


def parse_world(
    world: str, html: str, details: APIDetails | None = None
) -> WorldResponse:
    """Parse a world page into its information and list of online players.

    Raises ValueError when the BattlEye status cannot be understood.
    """
    soup = BeautifulSoup(html, "html.parser")
    result = World(name=world)

    for row in soup.select(".Table1 .InnerTableContainer table tr"):
        match = _ROW_RE.search(row.decode_contents())
        if match is not None:
            _apply_row(result, match[1], unescape_html(match[2]))

    header = soup.select_one(".Table2 .InnerTableContainer table tr")
    rows = header.find_next_siblings() if header is not None else []
    result.online_players = [
        player
        for player in (_parse_player(row.decode_contents()) for row in rows)
        if player is not None
    ]

    return WorldResponse(world=result, information=make_information(details))