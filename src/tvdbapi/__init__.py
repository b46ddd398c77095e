"""Client for the TVDB XML API."""
from tvdbapi.api import TVDBClient
from tvdbapi.config import Settings, load_settings
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
from tvdbapi.transport import HttpTransport

__version__ = "0.1.0"

__all__ = [
    "Actor",
    "Banner",
    "BannerUpdate",
    "Banners",
    "Episode",
    "EpisodeUpdate",
    "HttpTransport",
    "Series",
    "SeriesUpdate",
    "Settings",
    "TVDBClient",
    "TVDBError",
    "UpdateBatch",
    "load_settings",
]
