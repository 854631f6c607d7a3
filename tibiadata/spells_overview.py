"""Parsing of the spell library overview."""

from __future__ import annotations

from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from .core import APIDetails, Information, make_information, parse_int


@dataclass
class Spell:
    name: str = ""
    spell_id: str = ""
    formula: str = ""
    level: int = 0
    mana: int = 0
    price: int = 0
    group_attack: bool = False
    group_healing: bool = False
    group_support: bool = False
    type_instant: bool = False
    type_rune: bool = False
    premium_only: bool = False


@dataclass
class Spells:
    spells_filter: str
    spell_list: list[Spell] = field(default_factory=list)


@dataclass
class SpellsOverviewResponse:
    spells: Spells
    information: Information


def _apply_name_cell(spell: Spell, text: str, html: str) -> None:
    paren = text.index(" (")
    spell.name = text[:paren]
    spell.spell_id = html[html.index("amp;spell=") + 10 : html.index("&amp;vocation")]
    spell.formula = text[paren + 2 : text.index(")")]


def _parse_row(row: Tag) -> Spell:
    spell = Spell()
    for index, cell in enumerate(row.find_all("td")):
        text = cell.get_text()
        if index == 0:
            _apply_name_cell(spell, text, cell.decode_contents())
        elif index == 1:
            spell.group_attack = text == "Attack"
            spell.group_healing = text == "Healing"
            spell.group_support = text == "Support"
        elif index == 2:
            spell.type_instant = text == "Instant"
            spell.type_rune = text == "Rune"
        elif index == 3:
            if text != "-":
                spell.level = parse_int(text)
        elif index == 4:
            spell.mana = -1 if text == "var." else parse_int(text)
        elif index == 5:
            spell.price = 0 if text == "free" else parse_int(text)
        elif index == 6:
            spell.premium_only = text == "yes"
    return spell


def parse_spells_overview(
    vocation_name: str, html: str, details: APIDetails | None = None
) -> SpellsOverviewResponse:
    """Parse the spell list; an empty vocation filter is reported as 'all'.

    Raises ValueError when a spell's name cell is malformed.
    """
    soup = BeautifulSoup(html, "html.parser")
    rows = soup.select(".Table3 table.TableContent tr")[1:]
    spells = [_parse_row(row) for row in rows]
    return SpellsOverviewResponse(
        spells=Spells(spells_filter=vocation_name or "all", spell_list=spells),
        information=make_information(details),
    )