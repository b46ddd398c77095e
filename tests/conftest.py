"""Shared fixtures for the tvdbapi test suite."""
from unittest.mock import MagicMock

import pytest

from tvdbapi.api import TVDBClient
from tvdbapi.transport import HttpTransport

API_KEY = "ABCDEF0123456789"

SERIES_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <id>80348</id>
    <Actors>|Zachary Levi|Yvonne Strahovski|Adam Baldwin|</Actors>
    <Airs_DayOfWeek>Monday</Airs_DayOfWeek>
    <Airs_Time>8:00 PM</Airs_Time>
    <ContentRating>TV-PG</ContentRating>
    <FirstAired>2007-09-24</FirstAired>
    <Genre>|Action|Adventure|Comedy|</Genre>
    <IMDB_ID>tt0934814</IMDB_ID>
    <Language>en</Language>
    <Network>NBC</Network>
    <Overview>Chuck is a computer geek.</Overview>
    <Rating>9.0</Rating>
    <RatingCount>1200</RatingCount>
    <Runtime>60</Runtime>
    <SeriesID>68724</SeriesID>
    <SeriesName>Chuck</SeriesName>
    <Status>Ended</Status>
    <banner>graphical/80348-g32.jpg</banner>
    <fanart>fanart/original/80348-51.jpg</fanart>
    <lastupdated>1380212397</lastupdated>
    <poster>posters/80348-16.jpg</poster>
    <zap2it_id>SH00958196</zap2it_id>
    <SomethingNew>ignored</SomethingNew>
  </Series>
</Data>
"""

EPISODE_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Episode>
    <id>332179</id>
    <Combined_episodenumber>1</Combined_episodenumber>
    <Combined_season>1</Combined_season>
    <DVD_chapter></DVD_chapter>
    <DVD_discid></DVD_discid>
    <DVD_episodenumber>1.0</DVD_episodenumber>
    <DVD_season>1</DVD_season>
    <Director>|Robert Duncan McNeill|</Director>
    <EpisodeName>Chuck Versus the Intersect</EpisodeName>
    <EpisodeNumber>1</EpisodeNumber>
    <FirstAired>2007-09-24</FirstAired>
    <GuestStars>|Tony Hale|Mieko Hillman|</GuestStars>
    <IMDB_ID>tt0934814</IMDB_ID>
    <Language>en</Language>
    <Overview>Chuck receives an email.</Overview>
    <ProductionCode>276037</ProductionCode>
    <Rating>8.1</Rating>
    <RatingCount>95</RatingCount>
    <SeasonNumber>1</SeasonNumber>
    <Writer>|Josh Schwartz|Chris Fedak|</Writer>
    <absolute_number>1</absolute_number>
    <airsafter_season></airsafter_season>
    <airsbefore_episode></airsbefore_episode>
    <airsbefore_season></airsbefore_season>
    <filename>episodes/80348/332179.jpg</filename>
    <lastupdated>1376934434</lastupdated>
    <seasonid>27985</seasonid>
    <seriesid>80348</seriesid>
  </Episode>
</Data>
"""

ALL_EPISODES_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series><id>80348</id><SeriesName>Chuck</SeriesName></Series>
  <Episode><id>1</id><SeasonNumber>0</SeasonNumber><EpisodeNumber>1</EpisodeNumber></Episode>
  <Episode><id>2</id><SeasonNumber>1</SeasonNumber><EpisodeNumber>1</EpisodeNumber></Episode>
  <Episode><id>3</id><SeasonNumber>1</SeasonNumber><EpisodeNumber>2</EpisodeNumber></Episode>
  <Episode><id>4</id><SeasonNumber>2</SeasonNumber><EpisodeNumber>1</EpisodeNumber></Episode>
</Data>
"""

ACTORS_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Actors>
  <Actor>
    <id>27747</id>
    <Image>actors/27747.jpg</Image>
    <Name>Adam Baldwin</Name>
    <Role>John Casey</Role>
    <SortOrder>2</SortOrder>
  </Actor>
  <Actor>
    <id>27745</id>
    <Image>actors/27745.jpg</Image>
    <Name>Zachary Levi</Name>
    <Role>Chuck Bartowski</Role>
    <SortOrder>0</SortOrder>
  </Actor>
  <Actor>
    <id>27746</id>
    <Image></Image>
    <Name>Yvonne Strahovski</Name>
    <Role>Sarah Walker</Role>
    <SortOrder>not-a-number</SortOrder>
  </Actor>
</Actors>
"""

BANNERS_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Banners>
  <Banner>
    <id>23056</id>
    <BannerPath>fanart/original/80348-2.jpg</BannerPath>
    <BannerType>fanart</BannerType>
    <BannerType2>1920x1080</BannerType2>
    <Colors>|81,81,81|15,15,15|201,226,246|</Colors>
    <Language>en</Language>
    <Rating>7.8</Rating>
    <RatingCount>10</RatingCount>
    <SeriesName>true</SeriesName>
    <ThumbnailPath>_cache/fanart/original/80348-2.jpg</ThumbnailPath>
    <VignettePath>fanart/vignette/80348-2.jpg</VignettePath>
  </Banner>
  <Banner>
    <id>28954</id>
    <BannerPath>seasons/80348-1.jpg</BannerPath>
    <BannerType>season</BannerType>
    <BannerType2>season</BannerType2>
    <Language>en</Language>
    <Season>1</Season>
  </Banner>
  <Banner>
    <id>30120</id>
    <BannerPath>posters/80348-1.jpg</BannerPath>
    <BannerType>poster</BannerType>
    <BannerType2>680x1000</BannerType2>
  </Banner>
  <Banner>
    <id>18621</id>
    <BannerPath>graphical/80348-g.jpg</BannerPath>
    <BannerType>series</BannerType>
    <BannerType2>graphical</BannerType2>
  </Banner>
</Banners>
"""

SEARCH_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <seriesid>80348</seriesid>
    <language>en</language>
    <SeriesName>Chuck</SeriesName>
    <FirstAired>2007-09-24</FirstAired>
    <id>80348</id>
  </Series>
  <Series>
    <seriesid>79349</seriesid>
    <language>en</language>
    <SeriesName>Chucky</SeriesName>
    <id>79349</id>
  </Series>
</Data>
"""

UPDATES_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data time="1380530101">
  <Series><id>70327</id><time>1380469624</time></Series>
  <Series><id>70328</id><time>1380469625</time></Series>
  <Episode><id>306213</id><Series>70327</Series><time>1380469628</time></Episode>
  <Banner>
    <SeasonNum>2</SeasonNum>
    <Series>70327</Series>
    <format>standard</format>
    <language>en</language>
    <path>seasons/70327-2.jpg</path>
    <time>1380469600</time>
    <type>season</type>
  </Banner>
</Data>
"""

EMPTY_UPDATES_XML = '<?xml version="1.0" encoding="UTF-8" ?>\n<Data time="1380530101">\n</Data>\n'


@pytest.fixture()
def transport() -> MagicMock:
    """Transport double returning a configurable body."""
    return MagicMock(spec=HttpTransport)


@pytest.fixture()
def client(transport: MagicMock) -> TVDBClient:
    return TVDBClient(API_KEY, transport=transport)
