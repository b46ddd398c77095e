"""XML response parsing module.

Fields are read one by one with optional lookups, so unknown elements are
ignored and missing ones keep the record's default value.
"""
import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Tuple, Union

from tvdbapi.exceptions import TVDBError
from tvdbapi.models import (
    Actor,
    Banner,
    BannerUpdate,
    Banners,
    Episode,
    EpisodeUpdate,
    Series,
    SeriesUpdate,
    UpdateBatch,
)
from tvdbapi.urls import BANNER_URL

logger = logging.getLogger(__name__)

XmlBody = Union[str, bytes]

BANNER_GROUPS = {
    "series": "series",
    "season": "season",
    "poster": "poster",
    "fanart": "fanart",
}


def _parse_document(body: XmlBody, url: Optional[str] = None) -> ET.Element:
    """Parse the raw body into a root element, raising TVDBError on failure."""
    if body is None or not body.strip():
        raise TVDBError("Empty response body", url)
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise TVDBError(f"Malformed XML response: {e}", url) from e

    error = root if root.tag == "Error" else root.find("Error")
    if error is not None:
        message = (error.text or "").strip() or "Unknown error"
        raise TVDBError(f"Service returned an error: {message}", url)
    return root


def _text(element: ET.Element, *tags: str) -> str:
    """Return the stripped text of the first present tag, or an empty string."""
    for tag in tags:
        value = element.findtext(tag)
        if value is not None:
            return value.strip()
    return ""


def _int(element: ET.Element, *tags: str) -> int:
    value = _text(element, *tags)
    try:
        return int(value)
    except ValueError:
        # Some feeds send "1.0" for integer fields
        try:
            return int(float(value))
        except (ValueError, OverflowError):
            return 0


def _float(element: ET.Element, *tags: str) -> float:
    try:
        return float(_text(element, *tags))
    except ValueError:
        return 0.0


def _bool(element: ET.Element, *tags: str) -> bool:
    return _text(element, *tags).lower() == "true"


def _split(element: ET.Element, *tags: str) -> Tuple[str, ...]:
    """Split a pipe-delimited field such as ``|Drama|Comedy|``."""
    return tuple(part.strip() for part in _text(element, *tags).split("|") if part.strip())


def _image(element: ET.Element, *tags: str) -> str:
    path = _text(element, *tags)
    if not path:
        return ""
    if path.startswith(("http://", "https://")):
        return path
    return f"{BANNER_URL}{path}"


def _series(node: ET.Element) -> Series:
    return Series(
        id=_text(node, "id"),
        series_id=_text(node, "SeriesID", "seriesid"),
        language=_text(node, "Language", "language"),
        series_name=_text(node, "SeriesName"),
        overview=_text(node, "Overview"),
        first_aired=_text(node, "FirstAired"),
        imdb_id=_text(node, "IMDB_ID"),
        zap2it_id=_text(node, "zap2it_id"),
        network=_text(node, "Network"),
        actors=_split(node, "Actors"),
        genres=_split(node, "Genre"),
        content_rating=_text(node, "ContentRating"),
        rating=_text(node, "Rating"),
        rating_count=_int(node, "RatingCount"),
        runtime=_text(node, "Runtime"),
        status=_text(node, "Status"),
        airs_day_of_week=_text(node, "Airs_DayOfWeek"),
        airs_time=_text(node, "Airs_Time"),
        banner=_image(node, "banner"),
        fanart=_image(node, "fanart"),
        poster=_image(node, "poster"),
        last_updated=_text(node, "lastupdated"),
    )


def _episode(node: ET.Element) -> Episode:
    return Episode(
        id=_text(node, "id"),
        series_id=_text(node, "seriesid"),
        season_id=_text(node, "seasonid"),
        season_number=_int(node, "SeasonNumber"),
        episode_number=_int(node, "EpisodeNumber"),
        absolute_number=_int(node, "absolute_number"),
        combined_season=_int(node, "Combined_season"),
        combined_episode_number=_text(node, "Combined_episodenumber"),
        dvd_season=_text(node, "DVD_season"),
        dvd_episode_number=_text(node, "DVD_episodenumber"),
        dvd_disc_id=_text(node, "DVD_discid"),
        dvd_chapter=_text(node, "DVD_chapter"),
        episode_name=_text(node, "EpisodeName"),
        first_aired=_text(node, "FirstAired"),
        overview=_text(node, "Overview"),
        language=_text(node, "Language"),
        directors=_split(node, "Director"),
        writers=_split(node, "Writer"),
        guest_stars=_split(node, "GuestStars"),
        imdb_id=_text(node, "IMDB_ID"),
        production_code=_text(node, "ProductionCode"),
        rating=_text(node, "Rating"),
        rating_count=_int(node, "RatingCount"),
        airs_after_season=_int(node, "airsafter_season"),
        airs_before_season=_int(node, "airsbefore_season"),
        airs_before_episode=_int(node, "airsbefore_episode"),
        filename=_image(node, "filename"),
        last_updated=_text(node, "lastupdated"),
    )


def _actor(node: ET.Element) -> Actor:
    return Actor(
        id=_text(node, "id"),
        name=_text(node, "Name"),
        role=_text(node, "Role"),
        image=_image(node, "Image"),
        sort_order=_int(node, "SortOrder"),
    )


def _banner(node: ET.Element) -> Banner:
    return Banner(
        id=_text(node, "id"),
        url=_image(node, "BannerPath"),
        thumbnail_url=_image(node, "ThumbnailPath"),
        vignette_url=_image(node, "VignettePath"),
        banner_type=_text(node, "BannerType"),
        banner_type2=_text(node, "BannerType2"),
        language=_text(node, "Language"),
        season=_int(node, "Season"),
        rating=_float(node, "Rating"),
        rating_count=_int(node, "RatingCount"),
        series_name=_bool(node, "SeriesName"),
        colors=_text(node, "Colors"),
    )


def parse_series_list(body: XmlBody, url: Optional[str] = None) -> List[Series]:
    """Parse a series record or a search result into a list of series."""
    root = _parse_document(body, url)
    return [_series(node) for node in root.iter("Series")]


def parse_episodes(body: XmlBody, season: Optional[int] = None,
                   url: Optional[str] = None) -> List[Episode]:
    """Parse every episode in the document, optionally keeping one season."""
    root = _parse_document(body, url)
    episodes = [_episode(node) for node in root.iter("Episode")]
    if season is not None:
        episodes = [ep for ep in episodes if ep.season_number == season]
    return episodes


def parse_episode(body: XmlBody, url: Optional[str] = None) -> Episode:
    """Parse the first episode in the document, or an empty Episode if none."""
    root = _parse_document(body, url)
    node = next(root.iter("Episode"), None)
    if node is None:
        logger.debug(f"No episode element in response from {url}")
        return Episode()
    return _episode(node)


def parse_actors(body: XmlBody, url: Optional[str] = None) -> List[Actor]:
    """Parse actors sorted by their sort order."""
    root = _parse_document(body, url)
    actors = [_actor(node) for node in root.iter("Actor")]
    return sorted(actors, key=lambda actor: actor.sort_order)


def parse_banners(body: XmlBody, url: Optional[str] = None) -> Banners:
    """Parse banners grouped by banner type. ``series_id`` is left unset."""
    root = _parse_document(body, url)
    groups: Dict[str, List[Banner]] = {name: [] for name in BANNER_GROUPS.values()}
    groups["other"] = []

    for node in root.iter("Banner"):
        banner = _banner(node)
        group = BANNER_GROUPS.get(banner.banner_type.lower(), "other")
        groups[group].append(banner)

    return Banners(**{name: tuple(banners) for name, banners in groups.items()})


def parse_updates(body: XmlBody, url: Optional[str] = None) -> UpdateBatch:
    """Parse an update feed; an empty feed gives an empty batch."""
    root = _parse_document(body, url)

    series = tuple(
        SeriesUpdate(series_id=_text(node, "id"), time=_text(node, "time"))
        for node in root.findall("Series")
    )
    episodes = tuple(
        EpisodeUpdate(
            episode_id=_text(node, "id"),
            series_id=_text(node, "Series"),
            time=_text(node, "time"),
        )
        for node in root.findall("Episode")
    )
    banners = tuple(
        BannerUpdate(
            series_id=_text(node, "Series"),
            banner_type=_text(node, "type"),
            path=_text(node, "path"),
            format=_text(node, "format"),
            language=_text(node, "language"),
            season_num=_int(node, "SeasonNum"),
            time=_text(node, "time"),
        )
        for node in root.findall("Banner")
    )

    return UpdateBatch(
        time=root.get("time", "").strip(),
        series=series,
        episodes=episodes,
        banners=banners,
    )
