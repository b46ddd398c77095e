"""Typed records returned by the TVDB client."""
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

FIRST_AIRED_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class Series:
    id: str = ""
    series_id: str = ""
    language: str = ""
    series_name: str = ""
    overview: str = ""
    first_aired: str = ""
    imdb_id: str = ""
    zap2it_id: str = ""
    network: str = ""
    actors: Tuple[str, ...] = ()
    genres: Tuple[str, ...] = ()
    content_rating: str = ""
    rating: str = ""
    rating_count: int = 0
    runtime: str = ""
    status: str = ""
    airs_day_of_week: str = ""
    airs_time: str = ""
    banner: str = ""
    fanart: str = ""
    poster: str = ""
    last_updated: str = ""


@dataclass(frozen=True)
class Episode:
    id: str = ""
    series_id: str = ""
    season_id: str = ""
    season_number: int = 0
    episode_number: int = 0
    absolute_number: int = 0
    combined_season: int = 0
    combined_episode_number: str = ""
    dvd_season: str = ""
    dvd_episode_number: str = ""
    dvd_disc_id: str = ""
    dvd_chapter: str = ""
    episode_name: str = ""
    first_aired: str = ""
    overview: str = ""
    language: str = ""
    directors: Tuple[str, ...] = ()
    writers: Tuple[str, ...] = ()
    guest_stars: Tuple[str, ...] = ()
    imdb_id: str = ""
    production_code: str = ""
    rating: str = ""
    rating_count: int = 0
    airs_after_season: int = 0
    airs_before_season: int = 0
    airs_before_episode: int = 0
    filename: str = ""
    last_updated: str = ""

    def first_aired_date(self) -> Optional[date]:
        """Parse ``first_aired`` as ``YYYY-MM-DD``, or None if blank or malformed."""
        if not self.first_aired or not self.first_aired.strip():
            return None
        try:
            return datetime.strptime(self.first_aired.strip(), FIRST_AIRED_FORMAT).date()
        except ValueError:
            logger.debug(f"Failed to parse first aired date: {self.first_aired!r}")
            return None


@dataclass(frozen=True)
class Actor:
    id: str = ""
    name: str = ""
    role: str = ""
    image: str = ""
    sort_order: int = 0


@dataclass(frozen=True)
class Banner:
    id: str = ""
    url: str = ""
    thumbnail_url: str = ""
    vignette_url: str = ""
    banner_type: str = ""
    banner_type2: str = ""
    language: str = ""
    season: int = 0
    rating: float = 0.0
    rating_count: int = 0
    series_name: bool = False
    colors: str = ""


@dataclass(frozen=True)
class Banners:
    """Banners of one series, grouped by ``BannerType``.

    ``series_id`` is not part of the XML document; the client attaches it
    after parsing.
    """
    series_id: int = 0
    series: Tuple[Banner, ...] = ()
    season: Tuple[Banner, ...] = ()
    poster: Tuple[Banner, ...] = ()
    fanart: Tuple[Banner, ...] = ()
    other: Tuple[Banner, ...] = ()

    def all(self) -> Tuple[Banner, ...]:
        return self.series + self.season + self.poster + self.fanart + self.other

    def __len__(self) -> int:
        return len(self.all())


@dataclass(frozen=True)
class SeriesUpdate:
    series_id: str = ""
    time: str = ""


@dataclass(frozen=True)
class EpisodeUpdate:
    episode_id: str = ""
    series_id: str = ""
    time: str = ""


@dataclass(frozen=True)
class BannerUpdate:
    series_id: str = ""
    banner_type: str = ""
    path: str = ""
    format: str = ""
    language: str = ""
    season_num: int = 0
    time: str = ""


@dataclass(frozen=True)
class UpdateBatch:
    """Identifiers changed within the service's update window."""
    time: str = ""
    series: Tuple[SeriesUpdate, ...] = ()
    episodes: Tuple[EpisodeUpdate, ...] = ()
    banners: Tuple[BannerUpdate, ...] = ()

    def is_empty(self) -> bool:
        return not (self.series or self.episodes or self.banners)
