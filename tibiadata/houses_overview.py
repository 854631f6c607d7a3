"""Parsing of the house and guildhall lists of a town."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from .core import (
    APIDetails,
    Information,
    convert_k_values,
    make_information,
    parse_int,
    query_escape,
    remove_linebreaks,
    sanitize_text,
    unescape_html,
)

HOUSE_TYPES = ("houses", "guildhalls")


@dataclass
class HousesAuction:
    current_bid: int = 0
    time_left: str = ""
    finished: bool = False


@dataclass
class HousesHouse:
    name: str = ""
    house_id: int = 0
    size: int = 0
    rent: int = 0
    rented: bool = False
    auctioned: bool = False
    auction: HousesAuction = field(default_factory=HousesAuction)


@dataclass
class HousesHouses:
    world: str
    town: str
    house_list: list[HousesHouse] = field(default_factory=list)
    guildhall_list: list[HousesHouse] = field(default_factory=list)


@dataclass
class HousesOverviewResponse:
    houses: HousesHouses
    information: Information


_ROW_RE = re.compile(
    r"<td.*><nobr>(.*)</nobr></td><td.*><nobr>([0-9]+).sqm</nobr></td>"
    r"<td.*><nobr>([0-9]+)(k+).gold</nobr></td><td.*><nobr>(.*)</nobr></td>"
    r'.*houseid" value="([0-9]+)"/><div.*'
)
_AUCTIONED_RE = re.compile(r"auctioned.\(([0-9]+).gold;.(finished|(.*).left)\)")


def houses_url(house_type: str, world: str, town: str) -> str:
    """URL of the house list of the given type for a world and town."""
    return (
        "https://www.tibia.com/community/?subtopic=houses"
        f"&world={query_escape(world)}&town={query_escape(town)}"
        f"&type={query_escape(house_type)}"
    )


def _parse_row(row_html: str) -> HousesHouse | None:
    match = _ROW_RE.search(sanitize_text(remove_linebreaks(row_html)))
    if match is None:
        return None
    house = HousesHouse(
        name=unescape_html(match[1]),
        house_id=parse_int(match[6]),
        size=parse_int(match[2]),
        rent=convert_k_values(match[3] + match[4]),
    )
    state = match[5]
    if "rented" in state:
        house.rented = True
    elif "auctioned (no bid yet)" in state:
        house.auctioned = True
    elif "auctioned" in state:
        house.auctioned = True
        auction = _AUCTIONED_RE.search(state)
        if auction is None:
            raise ValueError(f"unrecognised auction state: {state!r}")
        finished = auction[2] == "finished"
        house.auction = HousesAuction(
            current_bid=parse_int(auction[1]),
            time_left="" if finished else (auction[3] or ""),
            finished=finished,
        )
    return house


def parse_house_list(html: str) -> list[HousesHouse]:
    """Parse one house list page.

    Raises ValueError when an auction state cannot be understood.
    """
    soup = BeautifulSoup(html, "html.parser")
    rows = soup.select(".TableContentContainer .TableContent tr")
    return [
        house
        for house in (_parse_row(row.decode_contents()) for row in rows)
        if house is not None
    ]


def houses_overview(
    world: str,
    town: str,
    fetch: Callable[[str], str],
    details: APIDetails | None = None,
) -> HousesOverviewResponse:
    """Fetch and parse both the house and the guildhall list of a town.

    ``fetch`` takes a URL and returns the page's HTML; its errors propagate.
    """
    lists = {kind: parse_house_list(fetch(houses_url(kind, world, town))) for kind in HOUSE_TYPES}
    return HousesOverviewResponse(
        houses=HousesHouses(
            world=world,
            town=town,
            house_list=lists["houses"],
            guildhall_list=lists["guildhalls"],
        ),
        information=make_information(details),
    )