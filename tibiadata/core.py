"""Shared settings, response metadata and text helpers used by all parsers."""

from __future__ import annotations

import html as _html
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from urllib.parse import quote_plus

API_VERSION = 4
DEFAULT_VOCATION = "all"
DEFAULT_PROXY_DOMAIN = "https://www.tibia.com/"

_RFC3339 = "%Y-%m-%dT%H:%M:%SZ"
_MONTHS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}
_ZONE_OFFSETS = {"CET": 1, "CEST": 2}
_DATETIME_RE = re.compile(
    r"([A-Z][a-z]{2})\s+(\d{1,2})\s+(\d{4}),\s+(\d{1,2}):(\d{2}):(\d{2})\s+(CEST|CET)"
)
_DATE_FORMATS = (
    ("%b %d %Y", "%Y-%m-%d"),
    ("%B %d %Y", "%Y-%m-%d"),
    ("%b %d, %Y", "%Y-%m-%d"),
    ("%B %d, %Y", "%Y-%m-%d"),
    ("%d.%m.%Y", "%Y-%m-%d"),
    ("%Y-%m-%d", "%Y-%m-%d"),
    ("%m/%Y", "%Y-%m"),
    ("%b %Y", "%Y-%m"),
    ("%B %Y", "%Y-%m"),
)
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_NEWS_CATEGORIES = ("cipsoft", "community", "development", "support", "technical")
_NEWS_TYPES = {"News Ticker": "ticker", "Featured Article": "article", "News": "news"}
_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}


@dataclass(frozen=True)
class APIDetails:
    """Version and build information reported with every response."""

    version: int = API_VERSION
    release: str = "unknown"
    commit: str = "-"


@dataclass
class Status:
    """HTTP status information of a response."""

    http_code: int = 200
    error: int = 0
    message: str = ""


@dataclass
class Information:
    """Metadata block attached to every response."""

    api_details: APIDetails = field(default_factory=APIDetails)
    timestamp: str = ""
    status: Status = field(default_factory=Status)


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    value = environ.get(key)
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    return default


@dataclass(frozen=True)
class Settings:
    """Runtime settings of the service."""

    api_version: int = API_VERSION
    release: str = "unknown"
    builder: str = "manual"
    commit: str = "-"
    edition: str = "open-source"
    host: str = ""
    proxy_domain: str = DEFAULT_PROXY_DOMAIN
    debug: bool = False
    default_vocation: str = DEFAULT_VOCATION

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ
        edition = cls.edition
        if "TIBIADATA_EDITION" in env:
            edition = env["TIBIADATA_EDITION"] or "open-source"
        host = env.get("TIBIADATA_HOST", "") if "TIBIADATA_HOST" in env else ""
        proxy_domain = DEFAULT_PROXY_DOMAIN
        if "TIBIADATA_PROXY" in env:
            protocol = env.get("TIBIADATA_PROXY_PROTOCOL") or "https"
            domain = env["TIBIADATA_PROXY"] or "www.tibia.com"
            proxy_domain = f"{protocol}://{domain}/"
        return cls(
            edition=edition,
            host=host,
            proxy_domain=proxy_domain,
            debug=_env_bool(env, "DEBUG_MODE", False),
        )

    def user_agent(self) -> str:
        """The User-Agent string sent to upstream servers."""
        parts = [
            f"release/{self.release}",
            f"build/{self.builder}",
            f"commit/{self.commit}",
            f"edition/{self.edition}",
        ]
        if self.host:
            parts.append(self.host)
        return f"TibiaData-API/v{self.api_version} ({'; '.join(parts)})"

    def api_details(self) -> APIDetails:
        """Version details for the information block."""
        return APIDetails(version=self.api_version, release=self.release, commit=self.commit)


def make_information(details: APIDetails | None = None) -> Information:
    """Create a successful information block stamped with the current time."""
    return Information(
        api_details=details if details is not None else APIDetails(),
        timestamp=parse_datetime(""),
        status=Status(http_code=200),
    )


def parse_int(text: str) -> int:
    """Parse an integer, ignoring thousands separators; 0 when unparsable."""
    try:
        return int(text.strip().replace(",", ""))
    except (ValueError, AttributeError):
        return 0


def convert_k_values(text: str) -> int:
    """Convert values like '300k' or '5kk' into plain integers."""
    stripped = text.strip()
    digits = stripped.rstrip("k")
    return parse_int(digits) * 1000 ** (len(stripped) - len(digits))


def parse_datetime(text: str = "") -> str:
    """Convert a Tibia timestamp to RFC 3339 in UTC; the current time for ''.

    Returns an empty string when the text holds no recognisable timestamp.
    """
    if not text:
        return datetime.now(timezone.utc).strftime(_RFC3339)
    match = _DATETIME_RE.search(sanitize_text(text))
    if match is None or match[1] not in _MONTHS:
        return ""
    zone = timezone(timedelta(hours=_ZONE_OFFSETS[match[7]]))
    try:
        local = datetime(
            int(match[3]), _MONTHS[match[1]], int(match[2]),
            int(match[4]), int(match[5]), int(match[6]), tzinfo=zone,
        )
    except ValueError:
        return ""
    return local.astimezone(timezone.utc).strftime(_RFC3339)


def parse_date(text: str) -> str:
    """Convert a Tibia date to ISO form ('YYYY-MM-DD' or 'YYYY-MM'); '' if unknown."""
    cleaned = " ".join(sanitize_text(text).split())
    for source_format, target_format in _DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, source_format).strftime(target_format)
        except ValueError:
            continue
    return ""


def unescape_html(text: str) -> str:
    """Resolve HTML character references."""
    return _html.unescape(text)


def sanitize_text(text: str) -> str:
    """Replace non-breaking spaces with ordinary spaces."""
    return text.replace("\xa0", " ").replace("&#160;", " ").replace("&nbsp;", " ")


def remove_html_tags(text: str) -> str:
    """Strip every HTML tag from the text."""
    return _HTML_TAG_RE.sub("", text)


def remove_linebreaks(text: str) -> str:
    """Remove newline characters."""
    return text.replace("\n", "")


def news_category(image_src: str) -> str:
    """Derive the news category from the category icon's URL."""
    for category in _NEWS_CATEGORIES:
        if f"newsicon_{category}" in image_src:
            return category
    return ""


def news_type(text: str) -> str:
    """Map a headline type label to its short name."""
    return _NEWS_TYPES.get(text.strip(), "")


def query_escape(text: str) -> str:
    """Escape text for use in a URL query component."""
    return quote_plus(text)