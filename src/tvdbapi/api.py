"""TVDB API client module."""
import logging
from dataclasses import replace
from typing import Callable, List, Optional, TypeVar

import requests

from tvdbapi import parser, urls
from tvdbapi.config import Settings, load_settings
from tvdbapi.exceptions import TVDBError
from tvdbapi.matching import DEFAULT_THRESHOLD, find_best_match
from tvdbapi.models import Actor, Banners, Episode, Series, UpdateBatch
from tvdbapi.transport import DEFAULT_TIMEOUT, HttpTransport
from tvdbapi.urls import Identifier

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TVDBClient:
    """Client for the TVDB XML API.

    Each method builds one URL, performs one GET through the transport and
    parses the body. Invalid identifiers short-circuit to an empty result
    without touching the network.

    Either pass a ready ``transport`` or let the client build one from
    ``session`` and ``timeout``; combining ``transport`` with either of them
    raises TVDBError. The API key never appears in logs or in TVDBError.
    """

    def __init__(self,
                 api_key: str,
                 transport: Optional[HttpTransport] = None,
                 base_url: str = urls.BASE_URL,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None,
                 language: Optional[str] = None):
        if not api_key or not api_key.strip():
            raise TVDBError("API key must not be blank")
        if transport is not None and (session is not None or timeout is not None):
            raise TVDBError("Pass either a transport or session/timeout, not both")
        self.api_key = api_key.strip()
        self.base_url = base_url
        self.language = language
        if transport is None:
            transport = HttpTransport(
                session=session,
                timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
            )
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "TVDBClient":
        """Create a client from settings, loading them from the environment if omitted."""
        settings = settings or load_settings()
        kwargs.setdefault("language", settings.language)
        if "transport" not in kwargs:
            kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.api_key, base_url=settings.base_url, **kwargs)

    def _lang(self, language: Optional[str]) -> Optional[str]:
        return language if language is not None else self.language

    def _redact(self, text: str) -> str:
        return urls.mask_api_key(text, self.api_key, self.base_url)

    def _request(self, url: str, parse: Callable[..., T], **kwargs) -> T:
        """GET ``url`` and parse the body; errors only ever carry the masked URL."""
        safe_url = self._redact(url)
        logger.debug(f"URL: {safe_url}")
        body = self.transport.get(url, redact=self._redact)
        return parse(body, url=safe_url, **kwargs)

    def get_series(self, series_id: Identifier, language: Optional[str] = None) -> Optional[Series]:
        url = urls.series_url(self.base_url, self.api_key, series_id, self._lang(language))
        if url is None:
            return None
        series_list = self._request(url, parser.parse_series_list)
        return series_list[0] if series_list else None

    def get_all_episodes(self, series_id: Identifier, language: Optional[str] = None) -> List[Episode]:
        """Get all the episodes for a series. This can be a lot of records."""
        url = urls.all_episodes_url(self.base_url, self.api_key, series_id, self._lang(language))
        if url is None:
            return []
        return self._request(url, parser.parse_episodes)

    def get_season_episodes(self, series_id: Identifier, season: Identifier,
                            language: Optional[str] = None) -> List[Episode]:
        """Get the episodes of one season; the full list is fetched and filtered."""
        url = urls.all_episodes_url(self.base_url, self.api_key, series_id, self._lang(language))
        if url is None or not urls.is_valid_number(season):
            return []
        return self._request(url, parser.parse_episodes, season=int(season))

    def get_episode(self, series_id: Identifier, season: Identifier, episode: Identifier,
                    language: Optional[str] = None) -> Episode:
        return self._get_tv_episode(series_id, season, episode, language, urls.DEFAULT_EPISODE_TYPE)

    def get_dvd_episode(self, series_id: Identifier, season: Identifier, episode: Identifier,
                        language: Optional[str] = None) -> Episode:
        return self._get_tv_episode(series_id, season, episode, language, urls.DVD_EPISODE_TYPE)

    def _get_tv_episode(self, series_id: Identifier, season: Identifier, episode: Identifier,
                        language: Optional[str], episode_type: str) -> Episode:
        url = urls.episode_url(self.base_url, self.api_key, series_id, season, episode,
                               self._lang(language), episode_type)
        if url is None:
            logger.debug(f"Invalid episode reference {series_id}/{season}/{episode}")
            return Episode()
        return self._request(url, parser.parse_episode)

    def get_absolute_episode(self, series_id: Identifier, absolute_number: Identifier,
                             language: Optional[str] = None) -> Episode:
        url = urls.absolute_episode_url(self.base_url, self.api_key, series_id,
                                        absolute_number, self._lang(language))
        if url is None:
            return Episode()
        return self._request(url, parser.parse_episode)

    def get_episode_by_id(self, episode_id: Identifier, language: Optional[str] = None) -> Episode:
        url = urls.episode_by_id_url(self.base_url, self.api_key, episode_id, self._lang(language))
        if url is None:
            return Episode()
        return self._request(url, parser.parse_episode)

    def get_season_year(self, series_id: Identifier, season: Identifier,
                        language: Optional[str] = None) -> Optional[str]:
        """Year the season started, taken from the first aired date of its first episode."""
        episode = self.get_episode(series_id, season, 1, self._lang(language))
        aired = episode.first_aired_date()
        return str(aired.year) if aired else None

    def get_actors(self, series_id: Identifier) -> List[Actor]:
        url = urls.actors_url(self.base_url, self.api_key, series_id)
        if url is None:
            return []
        return self._request(url, parser.parse_actors)

    def get_banners(self, series_id: Identifier) -> Banners:
        url = urls.banners_url(self.base_url, self.api_key, series_id)
        if url is None:
            return Banners()
        banners = self._request(url, parser.parse_banners)
        return replace(banners, series_id=int(str(series_id).strip()))

    def search_series(self, title: str, language: Optional[str] = None) -> List[Series]:
        if not title or not title.strip():
            return []
        url = urls.search_series_url(self.base_url, title, self._lang(language))
        return self._request(url, parser.parse_series_list)

    def find_series(self, title: str, language: Optional[str] = None,
                    threshold: int = DEFAULT_THRESHOLD) -> Optional[Series]:
        """Search by title and return the closest matching series, if any is close enough."""
        results = self.search_series(title, self._lang(language))
        if not results:
            return None
        return find_best_match(title, results, threshold)

    def get_weekly_updates(self) -> UpdateBatch:
        url = urls.weekly_updates_url(self.base_url, self.api_key)
        return self._request(url, parser.parse_updates)

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
