"""Parsing of a single house or guildhall page."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from .core import (
    APIDetails,
    Information,
    convert_k_values,
    make_information,
    parse_datetime,
    parse_int,
    remove_html_tags,
    sanitize_text,
    unescape_html,
)


@dataclass
class HouseRental:
    owner: str = ""
    owner_sex: str = ""
    paid_until: str = ""
    moving_date: str = ""
    transfer_receiver: str = ""
    transfer_price: int = 0
    transfer_accept: bool = False


@dataclass
class HouseAuction:
    current_bid: int = 0
    current_bidder: str = ""
    auction_ongoing: bool = False
    auction_end: str = ""


@dataclass
class HouseStatus:
    is_auctioned: bool = False
    is_rented: bool = False
    is_moving: bool = False
    is_transfering: bool = False
    auction: HouseAuction = field(default_factory=HouseAuction)
    rental: HouseRental = field(default_factory=HouseRental)
    original: str = ""


@dataclass
class House:
    houseid: int = 0
    world: str = ""
    town: str = ""
    name: str = ""
    type: str = ""
    beds: int = 0
    size: int = 0
    rent: int = 0
    img: str = ""
    status: HouseStatus = field(default_factory=HouseStatus)


@dataclass
class HouseResponse:
    house: House
    information: Information


_HOUSE_DATA_RE = re.compile(
    r'<td.*src="(.*)" width.*<b>(.*)</b>.*This (house|guildhall) can.*to ([0-9]+) beds?.'
    r".*<b>([0-9]+) square.*<b>([0-9]+)([k]+).gold</b>.*on <b>([A-Za-z]+)</b>.(.*)</td>"
)
_PASSING_RE = re.compile(r"and (wants to|will) pass the (house|guildhall) to (.*) for ([0-9]+) gold")
_MOVE_OUT_RE = re.compile(r"(He|She) will move out on (.*?) \(")
_PAID_UNTIL_RE = re.compile(
    r"The (house|guildhall) has been rented by (.*). (He|She) has paid.*until (.*?)\."
)
_AUCTIONED_RE = re.compile(
    r"The (house|guildhall) is currently.*The auction (will end|has ended) at (.*)\. "
    r"The.*is ([0-9]+) gold.*submitted by (.*)\."
)
_OWNER_SEX = {"She": "female", "He": "male"}


def _require(pattern: re.Pattern[str], text: str, what: str) -> re.Match[str]:
    match = pattern.search(text)
    if match is None:
        raise ValueError(f"unrecognised house {what} in status: {text!r}")
    return match


def _parse_status(original: str) -> HouseStatus:
    status = HouseStatus(original=original)

    if "has been rented by" in original:
        rental = status.rental
        transferring = (
            " pass the house to " in original or " pass the guildhall to " in original
        )
        if transferring:
            status.is_transfering = True
            passing = _require(_PASSING_RE, original, "transfer")
            rental.transfer_accept = passing[1] == "will"
            rental.transfer_receiver = passing[3]
            rental.transfer_price = parse_int(passing[4])
        if transferring or " will move out on " in original:
            status.is_moving = True
            moving = _require(_MOVE_OUT_RE, original, "moving date")
            rental.moving_date = parse_datetime(moving[2])
        status.is_rented = True
        paid = _require(_PAID_UNTIL_RE, original, "rental")
        rental.owner = paid[2]
        rental.paid_until = parse_datetime(paid[4])
        rental.owner_sex = _OWNER_SEX.get(paid[3], "")
    elif "is currently being auctioned" in original:
        status.is_auctioned = True
        if "No bid has been submitted so far." not in original:
            auction = _require(_AUCTIONED_RE, original, "auction")
            status.auction = HouseAuction(
                current_bid=parse_int(auction[4]),
                current_bidder=sanitize_text(auction[5]),
                auction_ongoing=auction[2] == "will end",
                auction_end=parse_datetime(auction[3]),
            )
    return status


def parse_house(
    house_id: int,
    html: str,
    town: str = "",
    house_type: str = "",
    details: APIDetails | None = None,
) -> HouseResponse:
    """Parse a house page; town and type come from the caller's house catalogue.

    Raises ValueError when the status text cannot be understood.
    """
    soup = BeautifulSoup(html, "html.parser")
    row = soup.select_one(".BoxContent table tr")
    row_html = row.decode_contents() if row is not None else ""

    house = House()
    match = _HOUSE_DATA_RE.search(row_html)
    if match:
        original = sanitize_text(unescape_html(remove_html_tags(match[9]))).strip()
        house = House(
            houseid=house_id,
            world=match[8],
            town=town,
            name=unescape_html(match[2]),
            type=house_type,
            beds=parse_int(match[4]),
            size=parse_int(match[5]),
            rent=convert_k_values(match[6] + match[7]),
            img=match[1],
            status=_parse_status(original),
        )

    return HouseResponse(house=house, information=make_information(details))