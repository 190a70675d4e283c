"""Navigation routes, UI blocks and the state the views are built from."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Generic, List, Optional, TypeVar

from .models import (
    CursorBasedPage,
    FullAlbum,
    FullArtist,
    FullShow,
    FullTrack,
    Page,
    SavedAlbum,
    SavedShow,
    SavedTrack,
    SimplifiedAlbum,
    SimplifiedEpisode,
    SimplifiedPlaylist,
    SimplifiedShow,
    SimplifiedTrack,
)

T = TypeVar("T")

LIBRARY_OPTIONS = (
    "Made For You",
    "Recently Played",
    "Liked Songs",
    "Albums",
    "Artists",
    "Podcasts",
)


class SearchResultBlock(Enum):
    ALBUM_SEARCH = auto()
    SONG_SEARCH = auto()
    ARTIST_SEARCH = auto()
    PLAYLIST_SEARCH = auto()
    SHOW_SEARCH = auto()
    EMPTY = auto()


class ArtistBlock(Enum):
    TOP_TRACKS = auto()
    ALBUMS = auto()
    RELATED_ARTISTS = auto()
    EMPTY = auto()


class ActiveBlock(Enum):
    """A block of the interface that can be hovered or selected."""

    ANALYSIS = auto()
    PLAY_BAR = auto()
    ALBUM_TRACKS = auto()
    ALBUM_LIST = auto()
    ARTIST_BLOCK = auto()
    EMPTY = auto()
    ERROR = auto()
    HELP_MENU = auto()
    HOME = auto()
    INPUT = auto()
    LIBRARY = auto()
    MY_PLAYLISTS = auto()
    PODCASTS = auto()
    EPISODE_TABLE = auto()
    RECENTLY_PLAYED = auto()
    SEARCH_RESULT_BLOCK = auto()
    SELECT_DEVICE = auto()
    TRACK_TABLE = auto()
    MADE_FOR_YOU = auto()
    ARTISTS = auto()
    BASIC_VIEW = auto()
    DIALOG_PLAYLIST_WINDOW = auto()
    DIALOG_PLAYLIST_SEARCH = auto()


class RouteId(Enum):
    ANALYSIS = auto()
    ALBUM_TRACKS = auto()
    ALBUM_LIST = auto()
    ARTIST = auto()
    BASIC_VIEW = auto()
    ERROR = auto()
    HOME = auto()
    RECENTLY_PLAYED = auto()
    SEARCH = auto()
    SELECTED_DEVICE = auto()
    TRACK_TABLE = auto()
    MADE_FOR_YOU = auto()
    ARTISTS = auto()
    PODCASTS = auto()
    PODCAST_EPISODES = auto()
    RECOMMENDATIONS = auto()
    DIALOG = auto()


@dataclass
class Route:
    """One entry of the navigation stack."""

    id: RouteId
    active_block: ActiveBlock
    hovered_block: ActiveBlock


DEFAULT_ROUTE = Route(
    id=RouteId.HOME,
    active_block=ActiveBlock.EMPTY,
    hovered_block=ActiveBlock.LIBRARY,
)


class TrackTableContext(Enum):
    MY_PLAYLISTS = auto()
    ALBUM_SEARCH = auto()
    PLAYLIST_SEARCH = auto()
    SAVED_TRACKS = auto()
    RECOMMENDED_TRACKS = auto()
    MADE_FOR_YOU = auto()


class AlbumTableContext(Enum):
    SIMPLIFIED = auto()
    FULL = auto()


class EpisodeTableContext(Enum):
    SIMPLIFIED = auto()
    FULL = auto()


class RecommendationsContext(Enum):
    ARTIST = auto()
    SONG = auto()


@dataclass
class ScrollableResultPages(Generic[T]):
    """Pages fetched so far, with the one currently shown."""

    index: int = 0
    pages: List[T] = field(default_factory=list)

    def get_results(self, at_index: Optional[int] = None) -> Optional[T]:
        """Return the page at ``at_index`` (default: the current one), or None."""
        position = self.index if at_index is None else at_index
        if 0 <= position < len(self.pages):
            return self.pages[position]
        return None

    def add_pages(self, new_pages: T) -> None:
        """Append a page and make it the current one."""
        self.pages.append(new_pages)
        self.index = len(self.pages) - 1


@dataclass
class SpotifyResultAndSelectedIndex(Generic[T]):
    index: int = 0
    result: Optional[T] = None


@dataclass
class Library:
    selected_index: int = 0
    saved_tracks: ScrollableResultPages[Page[SavedTrack]] = field(
        default_factory=ScrollableResultPages
    )
    made_for_you_playlists: ScrollableResultPages[Page[SimplifiedPlaylist]] = field(
        default_factory=ScrollableResultPages
    )
    saved_albums: ScrollableResultPages[Page[SavedAlbum]] = field(
        default_factory=ScrollableResultPages
    )
    saved_shows: ScrollableResultPages[Page[SavedShow]] = field(
        default_factory=ScrollableResultPages
    )
    saved_artists: ScrollableResultPages[CursorBasedPage[FullArtist]] = field(
        default_factory=ScrollableResultPages
    )
    show_episodes: ScrollableResultPages[Page[SimplifiedEpisode]] = field(
        default_factory=ScrollableResultPages
    )


@dataclass
class SearchResult:
    albums: Optional[Page[SimplifiedAlbum]] = None
    artists: Optional[Page[FullArtist]] = None
    playlists: Optional[Page[SimplifiedPlaylist]] = None
    tracks: Optional[Page[FullTrack]] = None
    shows: Optional[Page[SimplifiedShow]] = None
    selected_album_index: Optional[int] = None
    selected_artists_index: Optional[int] = None
    selected_playlists_index: Optional[int] = None
    selected_tracks_index: Optional[int] = None
    selected_shows_index: Optional[int] = None
    hovered_block: SearchResultBlock = SearchResultBlock.SONG_SEARCH
    selected_block: SearchResultBlock = SearchResultBlock.EMPTY


@dataclass
class TrackTable:
    tracks: List[FullTrack] = field(default_factory=list)
    selected_index: int = 0
    context: Optional[TrackTableContext] = None


@dataclass
class SelectedShow:
    show: SimplifiedShow


@dataclass
class SelectedFullShow:
    show: FullShow


@dataclass
class SelectedAlbum:
    album: SimplifiedAlbum
    tracks: Page[SimplifiedTrack]
    selected_index: int = 0


@dataclass
class SelectedFullAlbum:
    album: FullAlbum
    selected_index: int = 0


@dataclass
class Artist:
    """An artist's page: albums, related artists and top tracks."""

    artist_name: str
    albums: Page[SimplifiedAlbum]
    related_artists: List[FullArtist]
    top_tracks: List[FullTrack]
    artist_hovered_block: ArtistBlock
    artist_selected_block: ArtistBlock
    selected_album_index: int = 0
    selected_related_artist_index: int = 0
    selected_top_track_index: int = 0