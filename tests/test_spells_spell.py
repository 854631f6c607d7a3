import pytest

from tibiadata.core import APIDetails
from tibiadata.spells_spell import SpellData, parse_spell

CITIES_13 = [
    "Ab'Dendriel", "Ankrahmun", "Carlin", "Darashia", "Edron", "Farmine", "Issavi",
    "Kazordoon", "Liberty Bay", "Port Hope", "Thais", "Venore", "Yalahar",
]
CITIES_12 = [city for city in CITIES_13 if city != "Issavi"]
ALL_VOCATIONS = "Druid, Knight, Paladin, Sorcerer"


def _rows(rows):
    return "".join(
        f'<tr><td class="LabelV">{label}:</td><td>{value}</td></tr>' for label, value in rows
    )


def _section(caption, rows):
    return (
        '<div class="TableContainer"><div class="CaptionContainer">'
        f'<div class="CaptionInnerContainer"><div class="Text">{caption}</div></div></div>'
        '<table class="Table2"><tbody><tr><td><div class="TableContentContainer">'
        f"<table><tbody>{_rows(rows)}</tbody></table></div></td></tr></tbody></table></div>"
    )


def _page(spell_id, name, spell_rows, rune_rows=None, description="", image=None):
    image = image or f"https://static.tibia.com/images/library/{spell_id}.png"
    sections = _section("Spell Information", spell_rows)
    if rune_rows is not None:
        sections += _section("Rune Information", rune_rows)
    return (
        '<html><body><div class="BoxContent">'
        f'<table><tr><td><img src="{image}" width="64" height="64"/></td>'
        f"<td><h2>{name}</h2></td></tr></table>\n{description}{sections}</div></body></html>"
    )


def test_find_person():
    html = _page("findperson", "Find Person", [
        ("Formula", "exiva &quot;name&quot;"),
        ("Vocation", ALL_VOCATIONS),
        ("Group", "Support"),
        ("Type", "Instant"),
        ("Cooldown", "2s (Group: 2s)"),
        ("Exp Lvl", "8"),
        ("Mana", "20"),
        ("Price", "80"),
        ("City", ", ".join(CITIES_12)),
        ("Premium", "no"),
    ])
    spell = parse_spell("Find Person", html).spell

    assert spell.description == ""
    assert spell.name == "Find Person"
    assert spell.spell_id == "findperson"
    assert spell.image_url == "https://static.tibia.com/images/library/findperson.png"
    assert spell.has_spell_information is True
    info = spell.spell_information
    assert info.formula == "exiva 'name'"
    assert info.vocation == ["Druid", "Knight", "Paladin", "Sorcerer"]
    assert info.group_attack is False
    assert info.group_healing is False
    assert info.group_support is True
    assert info.type_instant is True
    assert info.type_rune is False
    assert info.cooldown_alone == 2
    assert info.cooldown_group == 2
    assert info.level == 8
    assert info.mana == 20
    assert info.price == 80
    assert len(info.city) == 12
    assert info.city[0] == "Ab'Dendriel"
    assert info.city[11] == "Yalahar"
    assert info.premium_only is False
    assert spell.has_rune_information is False


def test_heavy_magic_missile_rune():
    html = _page(
        "heavymagicmissilerune",
        "Heavy Magic Missile Rune",
        [
            ("Formula", "adori vis"),
            ("Vocation", "Druid, Sorcerer"),
            ("Group", "Support"),
            ("Type", "Rune"),
            ("Cooldown", "2s (Group: 2s)"),
            ("Soul Points", "2"),
            ("Amount", "10"),
            ("Exp Lvl", "25"),
            ("Mana", "350"),
            ("Price", "1500"),
            ("City", ", ".join(CITIES_13)),
            ("Premium", "no"),
        ],
        [
            ("Vocation", ALL_VOCATIONS),
            ("Group", "Attack"),
            ("Magic Type", "Energy"),
            ("Exp Lvl", "25"),
            ("Mag Lvl", "3"),
        ],
    )
    spell = parse_spell("Heavy Magic Missile Rune", html).spell

    assert spell.description == ""
    assert spell.name == "Heavy Magic Missile Rune"
    assert spell.spell_id == "heavymagicmissilerune"
    assert spell.has_spell_information is True
    info = spell.spell_information
    assert info.formula == "adori vis"
    assert info.vocation == ["Druid", "Sorcerer"]
    assert (info.group_attack, info.group_healing, info.group_support) == (False, False, True)
    assert info.type_instant is False
    assert info.type_rune is True
    assert info.cooldown_alone == 2
    assert info.cooldown_group == 2
    assert info.soul_points == 2
    assert info.amount == 10
    assert info.level == 25
    assert info.mana == 350
    assert info.price == 1500
    assert len(info.city) == 13
    assert info.city[0] == "Ab'Dendriel"
    assert info.city[11] == "Venore"
    assert info.premium_only is False
    assert spell.has_rune_information is True
    rune = spell.rune_information
    assert rune.vocation == ["Druid", "Knight", "Paladin", "Sorcerer"]
    assert (rune.group_attack, rune.group_healing, rune.group_support) == (True, False, False)
    assert rune.damage_type == "energy"
    assert rune.level == 25
    assert rune.magic_level == 3


def test_annihilation():
    html = _page("annihilation", "Annihilation", [
        ("Formula", "exori gran ico"),
        ("Vocation", "Knight"),
        ("Group", "Attack"),
        ("Type", "Instant"),
        ("Damage Type", "var."),
        ("Cooldown", "30s (Group: 4s)"),
        ("City", "Ankrahmun, Carlin, Edron, Kazordoon, Liberty Bay, Port Hope, Thais"),
        ("Premium", "yes"),
    ])
    spell = parse_spell("Annihilation", html).spell

    assert spell.description == ""
    assert spell.name == "Annihilation"
    assert spell.spell_id == "annihilation"
    assert spell.has_spell_information is True
    info = spell.spell_information
    assert info.formula == "exori gran ico"
    assert info.vocation == ["Knight"]
    assert (info.group_attack, info.group_healing, info.group_support) == (True, False, False)
    assert info.type_instant is True
    assert info.type_rune is False
    assert info.damage_type == "var."
    assert info.cooldown_alone == 30
    assert info.cooldown_group == 4
    assert info.soul_points == 0
    assert info.amount == 0
    assert len(info.city) == 7
    assert info.premium_only is True
    assert spell.has_rune_information is False


def test_bruise_bane():
    html = _page("bruisebane", "Bruise Bane", [
        ("Formula", "exura infir ico"),
        ("Vocation", "Knight"),
        ("Group", "Healing"),
        ("Type", "Instant"),
        ("Cooldown", "1s (Group: 1s)"),
        ("Exp Lvl", "1"),
        ("Mana", "10"),
        ("Price", "free"),
        ("City", "Dawnport"),
        ("Premium", "no"),
    ])
    spell = parse_spell("Bruise Bane", html).spell

    assert spell.description == ""
    assert spell.name == "Bruise Bane"
    assert spell.spell_id == "bruisebane"
    assert spell.has_spell_information is True
    info = spell.spell_information
    assert info.formula == "exura infir ico"
    assert len(info.vocation) == 1
    assert (info.group_attack, info.group_healing, info.group_support) == (False, True, False)
    assert info.type_instant is True
    assert info.type_rune is False
    assert info.cooldown_alone == 1
    assert info.cooldown_group == 1
    assert info.level == 1
    assert info.mana == 10
    assert info.price == 0
    assert info.city == ["Dawnport"]
    assert info.premium_only is False
    assert spell.has_rune_information is False


def test_cure_poison_rune():
    html = _page(
        "curepoisonrune",
        "Cure Poison Rune",
        [
            ("Formula", "adana pox"),
            ("Vocation", "Druid"),
            ("Group", "Support"),
            ("Type", "Rune"),
            ("Premium", "no"),
        ],
        [("Vocation", ALL_VOCATIONS), ("Group", "Healing")],
    )
    spell = parse_spell("Cure Poison Rune", html).spell

    assert spell.description == ""
    assert spell.name == "Cure Poison Rune"
    assert spell.spell_id == "curepoisonrune"
    assert spell.has_spell_information is True
    info = spell.spell_information
    assert info.formula == "adana pox"
    assert len(info.vocation) == 1
    assert (info.group_attack, info.group_healing, info.group_support) == (False, False, True)
    assert info.type_instant is False
    assert info.type_rune is True
    assert info.premium_only is False
    assert spell.has_rune_information is True
    rune = spell.rune_information
    assert (rune.group_attack, rune.group_healing, rune.group_support) == (False, True, False)


def test_convince_creature_rune():
    html = _page(
        "convincecreaturerune",
        "Convince Creature Rune",
        [("Formula", "adeta sio"), ("Group", "Support"), ("Type", "Rune")],
        [("Group", "Support")],
    )
    spell = parse_spell("Convince Creature Rune", html).spell

    assert spell.description == ""
    assert spell.name == "Convince Creature Rune"
    assert spell.spell_id == "convincecreaturerune"
    assert spell.has_spell_information is True
    assert spell.spell_information.formula == "adeta sio"
    assert spell.has_rune_information is True
    rune = spell.rune_information
    assert (rune.group_attack, rune.group_healing, rune.group_support) == (False, False, True)


def test_description_is_read_before_spell_information():
    html = _page(
        "findperson",
        "Find Person",
        [("Name", "Find Person"), ("Formula", "exiva &quot;name&quot;")],
        description="<p>Tells you the direction of a person.</p>",
    )
    spell = parse_spell("Find Person", html).spell

    assert spell.description == "Tells you the direction of a person."
    assert spell.spell_information.formula == "exiva 'name'"


def test_page_without_content_yields_empty_spell():
    response = parse_spell("Nothing", "<html><body><p>empty</p></body></html>")

    assert response.spell == SpellData()
    assert response.information.status.http_code == 200


def test_api_details_are_passed_to_information():
    details = APIDetails(version=4, release="1.2.3", commit="abc")
    html = _page("annihilation", "Annihilation", [("Formula", "exori gran ico")])
    response = parse_spell("Annihilation", html, details)

    assert response.information.api_details == details
    assert response.spell.spell_information.formula == "exori gran ico"


def test_malformed_image_url_raises():
    html = _page(
        "broken", "Broken", [("Formula", "exori")],
        image="https://static.tibia.com/images/other/broken.gif",
    )
    with pytest.raises(ValueError):
        parse_spell("Broken", html)