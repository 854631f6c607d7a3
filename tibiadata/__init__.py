"""Parsers that turn Tibia community website pages into structured data."""

__version__ = "4.0.0"

__all__ = [
    "core",
    "highscores",
    "killstatistics",
    "houses_house",
    "houses_overview",
    "news",
    "newslist",
    "spells_overview",
    "spells_spell",
    "worlds_overview",
    "worlds_world",
]