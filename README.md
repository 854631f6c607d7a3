# tibiadata

Parsers that turn HTML pages from the Tibia community website into plain
Python dataclasses: highscores, kill statistics, houses, news, spells and
worlds.

The package does no network I/O of its own. You fetch a page however you
like and hand its HTML to the matching parser. Each parser returns a
response object that holds the parsed data and an `Information` block with
the API details, a UTC timestamp and a status (HTTP code 200).

## Installation

```
pip install tibiadata
```

To run the tests, install the `test` extra and run pytest:

```
pip install "tibiadata[test]"
pytest
```

## Settings

`tibiadata.core.Settings` is a frozen dataclass with the build and runtime
settings (`release`, `builder`, `commit`, `edition`, `host`, `proxy_domain`,
`debug`, `default_vocation`). `Settings.from_env()` reads `os.environ`, or
the mapping you pass it, and understands these variables:

- `TIBIADATA_EDITION` – the edition name (empty falls back to `open-source`)
- `TIBIADATA_HOST` – the host name of the service
- `TIBIADATA_PROXY` and `TIBIADATA_PROXY_PROTOCOL` – set `proxy_domain` to
  `<protocol>://<proxy>/` (protocol defaults to `https`)
- `DEBUG_MODE` – `true`/`1` and similar turn `debug` on

```python
import os
from tibiadata.core import Settings

settings = Settings.from_env(os.environ)
print(settings.user_agent())
# TibiaData-API/v4 (release/unknown; build/manual; commit/-; edition/open-source)
details = settings.api_details()
```

`api_details()` returns an `APIDetails` value that every parser accepts as
its optional `details` argument; without it a default `APIDetails()` is used.

## Parsing pages

```python
from tibiadata.killstatistics import parse_killstatistics
from tibiadata.worlds_world import parse_world

response = parse_killstatistics("Antica", html, details)
for entry in response.killstatistics.entries:
    print(entry.race, entry.last_day_killed)
print(response.killstatistics.total.last_week_killed)

world = parse_world("Premia", other_html, details).world
print(world.status, world.players_online, world.battleye_date)
```

The available parsers are:

| Module | Function |
| --- | --- |
| `tibiadata.highscores` | `parse_highscores(world, category, vocation_name, current_page, html, details=None)` |
| `tibiadata.killstatistics` | `parse_killstatistics(world, html, details=None)` |
| `tibiadata.houses_house` | `parse_house(house_id, html, town="", house_type="", details=None)` |
| `tibiadata.houses_overview` | `houses_overview(world, town, fetch, details=None)` and `parse_house_list(html)` |
| `tibiadata.news` | `parse_news(news_id, url, html, details=None)` |
| `tibiadata.newslist` | `parse_newslist(html, host="", details=None)` |
| `tibiadata.spells_overview` | `parse_spells_overview(vocation_name, html, details=None)` |
| `tibiadata.spells_spell` | `parse_spell(spell, html, details=None)` |
| `tibiadata.worlds_overview` | `parse_worlds_overview(html, details=None)` |
| `tibiadata.worlds_world` | `parse_world(world, html, details=None)` |

Notes on individual parsers:

- `parse_highscores` takes a `HighscoreCategory` member or its string value
  (for example `"experience"` or `"loyaltypoints"`). It raises
  `HighscorePageTooBigError` (a `ValueError`) when `current_page` is past the
  last page.
- `parse_house` does not know which town a house is in or whether it is a
  house or a guildhall; pass `town` and `house_type` yourself.
- `houses_overview` takes a `fetch` callable. It is called with a URL built
  by `houses_url(house_type, world, town)`, once for `"houses"` and once for
  `"guildhalls"`, and must return that page's HTML. Errors raised by `fetch`
  propagate unchanged.
- `parse_newslist` fills in `url_api` (`https://<host>/v4/news/id/<id>`) only
  when a `host` is given.
- `parse_spells_overview` reports an empty vocation filter as `"all"`; a mana
  cost of `var.` becomes `-1`.
- `news.replace_martel_letters(html)` replaces the decorative initial-letter
  images of articles with plain letters.

Several parsers raise `ValueError` when a page holds text they cannot
understand, such as an unknown house status, auction state or BattlEye
status.

## Helpers

`tibiadata.core` also holds the text helpers the parsers share:
`parse_int`, `convert_k_values` (`"300k"` → `300000`, `"5kk"` → `5000000`),
`parse_datetime` (Tibia CET/CEST timestamps to RFC 3339 UTC, the current time
for an empty string), `parse_date`, `unescape_html`, `sanitize_text`,
`remove_html_tags`, `remove_linebreaks`, `news_category`, `news_type`,
`query_escape` and `make_information`.

## What this package does not do

It does not download pages, cache them or serve them over HTTP: there is no
web server, no command-line program and no HTTP client. Character, guild,
creature, fansite and boss pages have no parsers here, and there is no
catalogue of houses, creatures or spells to validate names against.
`Settings.proxy_domain` and `Settings.debug` are only recorded; nothing in
the package acts on them.