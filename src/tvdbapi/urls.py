"""Request URL construction for the TVDB XML API.

Every builder that embeds an identifier in the URL path validates it first
and returns ``None`` when it is not a non-negative integer. Callers treat
``None`` as "do not issue a request".
"""
import logging
from typing import Optional, Union
from urllib.parse import quote_plus, urlsplit

logger = logging.getLogger(__name__)

BASE_URL = "http://thetvdb.com/api/"
BANNER_URL = "http://thetvdb.com/banners/"
XML_EXTENSION = ".xml"
SERIES_URL = "/series/"
ALL_URL = "/all/"
EPISODES_URL = "/episodes/"
WEEKLY_UPDATES_URL = "/updates/updates_week.xml"
SEARCH_URL = "GetSeries.php?seriesname="

DEFAULT_EPISODE_TYPE = "default"
DVD_EPISODE_TYPE = "dvd"

Identifier = Union[int, str]


def is_valid_number(value: Optional[Identifier]) -> bool:
    """Return True for a non-negative integer or a string of digits."""
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    text = str(value).strip()
    return text.isdigit() and text.isascii()


def _language_suffix(language: Optional[str]) -> str:
    if language and language.strip():
        return f"{language.strip()}{XML_EXTENSION}"
    return ""


def _normalize(value: Identifier) -> str:
    return str(value).strip()


def _api_root(base_url: str, api_key: str) -> str:
    return f"{base_url}{api_key}"


def mask_api_key(text: str, api_key: str, base_url: str = BASE_URL) -> str:
    """Hide the API key path segment in a URL or in a message quoting one.

    Only the first segment after the base URL's path is replaced, so ids that
    happen to equal the key stay readable.
    """
    if not api_key:
        return text
    path = urlsplit(base_url).path or "/"
    if not path.endswith("/"):
        path += "/"
    return text.replace(f"{path}{api_key}/", f"{path}***/", 1)


def series_url(base_url: str, api_key: str, series_id: Identifier,
               language: Optional[str] = None) -> Optional[str]:
    if not is_valid_number(series_id):
        return None
    return (f"{_api_root(base_url, api_key)}{SERIES_URL}{_normalize(series_id)}/"
            f"{_language_suffix(language)}")


def all_episodes_url(base_url: str, api_key: str, series_id: Identifier,
                     language: Optional[str] = None) -> Optional[str]:
    if not is_valid_number(series_id):
        return None
    return (f"{_api_root(base_url, api_key)}{SERIES_URL}{_normalize(series_id)}{ALL_URL}"
            f"{_language_suffix(language)}")


def episode_url(base_url: str, api_key: str, series_id: Identifier,
                season: Identifier, episode: Identifier,
                language: Optional[str] = None,
                episode_type: str = DEFAULT_EPISODE_TYPE) -> Optional[str]:
    """URL of one episode addressed by season and number.

    ``episode_type`` selects the numbering scheme: ``"default"`` (aired order)
    or ``"dvd"``.
    """
    if not all(is_valid_number(v) for v in (series_id, season, episode)):
        return None
    return (f"{_api_root(base_url, api_key)}{SERIES_URL}{_normalize(series_id)}"
            f"/{episode_type}/{_normalize(season)}/{_normalize(episode)}/"
            f"{_language_suffix(language)}")


def absolute_episode_url(base_url: str, api_key: str, series_id: Identifier,
                         absolute_number: Identifier,
                         language: Optional[str] = None) -> Optional[str]:
    if not (is_valid_number(series_id) and is_valid_number(absolute_number)):
        return None
    return (f"{_api_root(base_url, api_key)}{SERIES_URL}{_normalize(series_id)}"
            f"/absolute/{_normalize(absolute_number)}/{_language_suffix(language)}")


def episode_by_id_url(base_url: str, api_key: str, episode_id: Identifier,
                      language: Optional[str] = None) -> Optional[str]:
    if not is_valid_number(episode_id):
        return None
    return (f"{_api_root(base_url, api_key)}{EPISODES_URL}{_normalize(episode_id)}/"
            f"{_language_suffix(language)}")


def actors_url(base_url: str, api_key: str, series_id: Identifier) -> Optional[str]:
    if not is_valid_number(series_id):
        return None
    return f"{_api_root(base_url, api_key)}{SERIES_URL}{_normalize(series_id)}/actors.xml"


def banners_url(base_url: str, api_key: str, series_id: Identifier) -> Optional[str]:
    if not is_valid_number(series_id):
        return None
    return f"{_api_root(base_url, api_key)}{SERIES_URL}{_normalize(series_id)}/banners.xml"


def search_series_url(base_url: str, title: str, language: Optional[str] = None) -> str:
    """Search URL; the title is percent-encoded, or embedded raw if it cannot be."""
    try:
        encoded = quote_plus(title, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        logger.debug(f"Failed to encode title {title!r}, using it unescaped: {e}")
        encoded = title

    url = f"{base_url}{SEARCH_URL}{encoded}"
    if language and language.strip():
        url += f"&language={language.strip()}"
    return url


def weekly_updates_url(base_url: str, api_key: str) -> str:
    return f"{_api_root(base_url, api_key)}{WEEKLY_UPDATES_URL}"
