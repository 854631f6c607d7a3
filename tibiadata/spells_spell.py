"""Parsing of a single spell page from the spell library."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from .core import APIDetails, Information, make_information, parse_int, unescape_html


@dataclass
class SpellInformation:
    formula: str = ""
    vocation: list[str] = field(default_factory=list)
    group_attack: bool = False
    group_healing: bool = False
    group_support: bool = False
    type_instant: bool = False
    type_rune: bool = False
    damage_type: str = ""
    cooldown_alone: int = 0
    cooldown_group: int = 0
    soul_points: int = 0
    amount: int = 0
    level: int = 0
    mana: int = 0
    price: int = 0
    city: list[str] = field(default_factory=list)
    premium_only: bool = False


@dataclass
class RuneInformation:
    vocation: list[str] = field(default_factory=list)
    group_attack: bool = False
    group_healing: bool = False
    group_support: bool = False
    damage_type: str = ""
    level: int = 0
    magic_level: int = 0


@dataclass
class SpellData:
    name: str = ""
    spell_id: str = ""
    image_url: str = ""
    description: str = ""
    has_spell_information: bool = False
    spell_information: SpellInformation = field(default_factory=SpellInformation)
    has_rune_information: bool = False
    rune_information: RuneInformation = field(default_factory=RuneInformation)


@dataclass
class SpellInformationResponse:
    spell: SpellData
    information: Information


_ROW_RE = re.compile(r"<td.*>(.*):</td><td.*>(.*)</td>")
_NAME_AND_IMAGE_RE = re.compile(r'<td><img src="(.*)" width=.*<h2>(.*)</h2>.*')
_COOLDOWN_RE = re.compile(r"([0-9]+)s \(.*:.([0-9]+)s\)")
_DESCRIPTION_RE = re.compile(r"(.*)\.(Spell|Rune) InformationName:.*")

_SECTIONS = {"Spell Information": "spell", "Rune Information": "rune"}
_GROUPS = {"Attack": "group_attack", "Healing": "group_healing", "Support": "group_support"}


def _apply_header(data: SpellData, header_html: str) -> None:
    match = _NAME_AND_IMAGE_RE.search(header_html)
    if match is None:
        return
    data.name = unescape_html(match[2].replace("\\u0026", "&"))
    data.image_url = match[1]
    image = data.image_url
    data.spell_id = image[image.index("library/") + 8 : image.index(".png")]


def _apply_row(data: SpellData, section: str, row_html: str) -> None:
    match = _ROW_RE.search(row_html)
    if match is None:
        return
    label = match[1]
    value = unescape_html(match[2])
    spell = data.spell_information
    rune = data.rune_information
    target: SpellInformation | RuneInformation | None = {
        "spell": spell,
        "rune": rune,
    }.get(section)

    if label == "Formula":
        spell.formula = value.replace('"', "'")
    elif label == "Vocation":
        if target is not None:
            target.vocation = value.split(", ")
    elif label == "Group":
        if target is not None and value in _GROUPS:
            setattr(target, _GROUPS[value], True)
    elif label == "Type":
        if value == "Instant":
            spell.type_instant = True
        elif value == "Rune":
            spell.type_rune = True
    elif label in ("Damage Type", "Magic Type"):
        if target is not None:
            target.damage_type = value.lower()
    elif label == "Cooldown":
        cooldown = _COOLDOWN_RE.search(row_html)
        if cooldown is not None:
            spell.cooldown_alone = parse_int(cooldown[1])
            spell.cooldown_group = parse_int(cooldown[2])
    elif label == "Soul Points":
        spell.soul_points = parse_int(value)
    elif label == "Amount":
        spell.amount = parse_int(value)
    elif label == "Exp Lvl":
        if target is not None:
            target.level = parse_int(value)
    elif label == "Mana":
        spell.mana = parse_int(value)
    elif label == "Price":
        spell.price = 0 if value == "free" else parse_int(value)
    elif label == "City":
        spell.city = value.split(", ")
    elif label == "Premium":
        spell.premium_only = value == "yes"
    elif label == "Mag Lvl":
        rune.magic_level = parse_int(value)


def _caption(container: Tag) -> str:
    return "".join(
        tag.get_text() for tag in container.select(".CaptionInnerContainer div.Text")
    )


def parse_spell(
    spell: str, html: str, details: APIDetails | None = None
) -> SpellInformationResponse:
    """Parse a spell page into its spell and rune information.

    Raises ValueError when the spell image URL does not have the expected form.
    """
    soup = BeautifulSoup(html, "html.parser")
    data = SpellData()
    section = ""

    boxes = soup.select(".BoxContent")
    for box in boxes:
        header = box.select_one("table tr")
        _apply_header(data, header.decode_contents() if header is not None else "")

        for container in box.select(".TableContainer"):
            section = _SECTIONS.get(_caption(container), section)
            if section == "spell":
                data.has_spell_information = True
            elif section == "rune":
                data.has_rune_information = True
            rows = container.select("table.Table2 .TableContentContainer tbody tr")
            for row in rows:
                _apply_row(data, section, row.decode_contents())

    description = _DESCRIPTION_RE.search("".join(box.get_text() for box in boxes))
    if description is not None:
        data.description = description[1] + "."

    return SpellInformationResponse(spell=data, information=make_information(details))