"""Application state and the user actions that change it."""

from __future__ import annotations

import re
import sys
import time
from dataclasses import replace
from typing import Any, Callable, List, Optional, Sequence, Set, TypeVar

from .actions import IoEvent, IoEventKind
from .models import (
    CurrentlyPlaybackContext,
    CursorBasedPage,
    DevicePayload,
    FullArtist,
    FullEpisode,
    FullTrack,
    Page,
    PlayHistory,
    PlaylistTrack,
    PrivateUser,
    SavedTrack,
    SimplifiedPlaylist,
    item_duration_ms,
)
from .routes import (
    DEFAULT_ROUTE,
    ActiveBlock,
    AlbumTableContext,
    Artist,
    EpisodeTableContext,
    Library,
    RecommendationsContext,
    Route,
    RouteId,
    SearchResult,
    SelectedAlbum,
    SelectedFullAlbum,
    SelectedFullShow,
    SelectedShow,
    SpotifyResultAndSelectedIndex,
    TrackTable,
)

T = TypeVar("T")

POLL_INTERVAL_MS = 5_000
PREVIOUS_TRACK_THRESHOLD_MS = 3_000
MAX_VOLUME = 100
SHARE_URL_BASE = "https://open.spotify.com"
MADE_FOR_YOU_PLAYLISTS = (
    "Discover Weekly",
    "Release Radar",
    "On Repeat",
    "Repeat Rewind",
    "Daily Drive",
)
_COUNTRY_CODE = re.compile(r"[A-Z]{2}")


def _item_at(items: Sequence[T], index: int) -> Optional[T]:
    return items[index] if 0 <= index < len(items) else None


def _song_url(item: Any) -> str:
    if isinstance(item, FullTrack):
        return f"{SHARE_URL_BASE}/track/{item.id or ''}"
    return f"{SHARE_URL_BASE}/episode/{item.id}"


def _album_url(item: Any) -> str:
    if isinstance(item, FullTrack):
        return f"{SHARE_URL_BASE}/album/{item.album.id or ''}"
    return f"{SHARE_URL_BASE}/show/{item.show.id}"


class App:
    """Everything the interface shows, plus the actions a user can take.

    ``io_tx`` receives network requests (for instance ``queue.Queue.put``);
    ``clipboard`` is anything with ``set_text``; ``clock`` returns seconds
    from a monotonic source.
    """

    def __init__(
        self,
        user_config: Any,
        io_tx: Optional[Callable[[IoEvent], Any]] = None,
        spotify_token_expiry: Optional[float] = None,
        clipboard: Any = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.user_config = user_config
        self._io_tx = io_tx
        self.spotify_token_expiry = (
            time.time() if spotify_token_expiry is None else spotify_token_expiry
        )
        self.clipboard = clipboard
        self._clock = clock
        self.instant_since_last_current_playback_poll = clock()
        self._navigation_stack: List[Route] = [replace(DEFAULT_ROUTE)]

        self.audio_analysis: Any = None
        self.home_scroll = 0
        self.artists: List[FullArtist] = []
        self.artist: Optional[Artist] = None
        self.album_table_context = AlbumTableContext.FULL
        self.saved_album_tracks_index = 0
        self.api_error = ""
        self.current_playback_context: Optional[CurrentlyPlaybackContext] = None
        self.devices: Optional[DevicePayload] = None
        # The input line as characters; the cursor position is its display width.
        self.input: List[str] = []
        self.input_idx = 0
        self.input_cursor_position = 0
        self.liked_song_ids_set: Set[str] = set()
        self.followed_artist_ids_set: Set[str] = set()
        self.saved_album_ids_set: Set[str] = set()
        self.saved_show_ids_set: Set[str] = set()
        self.large_search_limit = 20
        self.small_search_limit = 4
        self.library = Library()
        self.playlist_offset = 0
        self.made_for_you_offset = 0
        self.playlist_tracks: Optional[Page[PlaylistTrack]] = None
        self.made_for_you_tracks: Optional[Page[PlaylistTrack]] = None
        self.playlists: Optional[Page[SimplifiedPlaylist]] = None
        self.recently_played: SpotifyResultAndSelectedIndex[
            CursorBasedPage[PlayHistory]
        ] = SpotifyResultAndSelectedIndex()
        self.recommended_tracks: List[FullTrack] = []
        self.recommendations_seed = ""
        self.recommendations_context: Optional[RecommendationsContext] = None
        self.search_results = SearchResult()
        self.selected_album_simplified: Optional[SelectedAlbum] = None
        self.selected_album_full: Optional[SelectedFullAlbum] = None
        self.selected_device_index: Optional[int] = None
        self.selected_playlist_index: Optional[int] = None
        self.active_playlist_index: Optional[int] = None
        self.song_progress_ms = 0
        self.seek_ms: Optional[int] = None
        self.track_table = TrackTable()
        self.episode_table_context = EpisodeTableContext.FULL
        self.selected_show_simplified: Optional[SelectedShow] = None
        self.selected_show_full: Optional[SelectedFullShow] = None
        self.user: Optional[PrivateUser] = None
        self.album_list_index = 0
        self.made_for_you_index = 0
        self.artists_list_index = 0
        self.shows_list_index = 0
        self.episode_list_index = 0
        self.help_docs_size = 0
        self.help_menu_page = 0
        self.help_menu_max_lines = 0
        self.help_menu_offset = 0
        self.is_loading = False
        self.is_fetching_current_playback = False
        self.dialog: Optional[str] = None
        self.confirm = False

    # -- network -------------------------------------------------------

    def dispatch(self, action: IoEvent) -> None:
        """Send a request to the network worker and mark the app as loading."""
        self.is_loading = True
        if self._io_tx is None:
            return
        try:
            self._io_tx(action)
        except Exception as error:
            self.is_loading = False
            print(f"Error from dispatch {error}", file=sys.stderr)

    def _send(self, kind: IoEventKind, *args: Any) -> None:
        self.dispatch(IoEvent(kind, *args))

    def _playing_item(self) -> Any:
        context = self.current_playback_context
        return None if context is None else context.item

    def _elapsed_since_poll_ms(self) -> int:
        return int((self._clock() - self.instant_since_last_current_playback_poll) * 1000)

    def _apply_seek(self, seek_ms: int) -> None:
        item = self._playing_item()
        if item is None:
            return
        if seek_ms < item_duration_ms(item):
            self._send(IoEventKind.SEEK, seek_ms)
        else:
            self._send(IoEventKind.NEXT_TRACK)

    def _poll_current_playback(self) -> None:
        if self.is_fetching_current_playback:
            return
        if self._elapsed_since_poll_ms() >= POLL_INTERVAL_MS:
            self.is_fetching_current_playback = True
            if self.seek_ms is not None:
                self._apply_seek(self.seek_ms)
            else:
                self._send(IoEventKind.GET_CURRENT_PLAYBACK)

    def _user_country(self) -> Optional[str]:
        return self.get_user_country()

    # -- playback ------------------------------------------------------

    def update_on_tick(self) -> None:
        """Poll playback when due and advance the displayed progress."""
        self._poll_current_playback()
        context = self.current_playback_context
        if context is None or context.item is None or context.progress_ms is None:
            return
        # Progress is updated while paused too, since seeking works then.
        running = self._elapsed_since_poll_ms() if context.is_playing else 0
        elapsed = running + context.progress_ms
        self.song_progress_ms = min(elapsed, item_duration_ms(context.item))

    def _seek_origin(self) -> int:
        return self.song_progress_ms if self.seek_ms is None else self.seek_ms

    def seek_forwards(self) -> None:
        item = self._playing_item()
        if item is None:
            return
        step = self.user_config.behavior.seek_milliseconds
        self.seek_ms = min(self._seek_origin() + step, item_duration_ms(item))

    def seek_backwards(self) -> None:
        step = self.user_config.behavior.seek_milliseconds
        self.seek_ms = max(self._seek_origin() - step, 0)

    def get_recommendations_for_seed(
        self,
        seed_artists: Optional[List[str]],
        seed_tracks: Optional[List[str]],
        first_track: Optional[FullTrack],
    ) -> None:
        self._send(
            IoEventKind.GET_RECOMMENDATIONS_FOR_SEED,
            seed_artists,
            seed_tracks,
            first_track,
            self._user_country(),
        )

    def get_recommendations_for_track_id(self, track_id: str) -> None:
        self._send(
            IoEventKind.GET_RECOMMENDATIONS_FOR_TRACK_ID, track_id, self._user_country()
        )

    def increase_volume(self) -> None:
        context = self.current_playback_context
        if context is None:
            return
        current = context.device.volume_percent
        target = min(current + self.user_config.behavior.volume_increment, MAX_VOLUME)
        if target != current:
            self._send(IoEventKind.CHANGE_VOLUME, target)

    def decrease_volume(self) -> None:
        context = self.current_playback_context
        if context is None:
            return
        current = context.device.volume_percent
        target = max(current - self.user_config.behavior.volume_increment, 0)
        if target != current:
            self._send(IoEventKind.CHANGE_VOLUME, target)

    def handle_error(self, error: Any) -> None:
        """Show the error route with the error's message."""
        self.push_navigation_stack(RouteId.ERROR, ActiveBlock.ERROR)
        self.api_error = str(error)

    def toggle_playback(self) -> None:
        context = self.current_playback_context
        if context is not None and context.is_playing:
            self._send(IoEventKind.PAUSE_PLAYBACK)
        else:
            # With no context, uris or offset the player resumes.
            self._send(IoEventKind.START_PLAYBACK, None, None, None)

    def previous_track(self) -> None:
        if self.song_progress_ms >= PREVIOUS_TRACK_THRESHOLD_MS:
            self._send(IoEventKind.SEEK, 0)
        else:
            self._send(IoEventKind.PREVIOUS_TRACK)

    def shuffle(self) -> None:
        context = self.current_playback_context
        if context is not None:
            self._send(IoEventKind.SHUFFLE, context.shuffle_state)

    def repeat(self) -> None:
        context = self.current_playback_context
        if context is not None:
            self._send(IoEventKind.REPEAT, context.repeat_state)

    # -- navigation ----------------------------------------------------

    def push_navigation_stack(
        self, next_route_id: RouteId, next_active_block: ActiveBlock
    ) -> None:
        """Push a route unless it is already the current one."""
        if self._navigation_stack and self._navigation_stack[-1].id == next_route_id:
            return
        self._navigation_stack.append(
            Route(next_route_id, next_active_block, next_active_block)
        )

    def pop_navigation_stack(self) -> Optional[Route]:
        """Pop the current route; the root route is never popped."""
        if len(self._navigation_stack) == 1:
            return None
        return self._navigation_stack.pop()

    @property
    def current_route(self) -> Route:
        return self._navigation_stack[-1] if self._navigation_stack else DEFAULT_ROUTE

    @property
    def navigation_depth(self) -> int:
        return len(self._navigation_stack)

    def set_current_route_state(
        self,
        active_block: Optional[ActiveBlock] = None,
        hovered_block: Optional[ActiveBlock] = None,
    ) -> None:
        route = self._navigation_stack[-1]
        if active_block is not None:
            route.active_block = active_block
        if hovered_block is not None:
            route.hovered_block = hovered_block

    # -- clipboard -----------------------------------------------------

    def _copy(self, make_url: Callable[[Any], str]) -> None:
        if self.clipboard is None:
            return
        item = self._playing_item()
        if item is None:
            return
        try:
            self.clipboard.set_text(make_url(item))
        except Exception as error:
            self.handle_error(f"failed to set clipboard content: {error}")

    def copy_song_url(self) -> None:
        self._copy(_song_url)

    def copy_album_url(self) -> None:
        self._copy(_album_url)

    # -- library paging ------------------------------------------------

    def set_saved_tracks_to_table(self, saved_track_page: Page[SavedTrack]) -> None:
        self._send(
            IoEventKind.SET_TRACKS_TO_TABLE, [item.track for item in saved_track_page.items]
        )

    def set_saved_artists_to_table(
        self, saved_artists_page: CursorBasedPage[FullArtist]
    ) -> None:
        self._send(IoEventKind.SET_ARTISTS_TO_TABLE, list(saved_artists_page.items))

    def get_current_user_saved_artists_next(self) -> None:
        pages = self.library.saved_artists
        cached = pages.get_results(pages.index + 1)
        if cached is not None:
            self.set_saved_artists_to_table(cached)
            pages.index += 1
            return
        current = pages.get_results()
        if current is not None and current.items:
            self._send(IoEventKind.GET_FOLLOWED_ARTISTS, current.items[-1].id)

    def get_current_user_saved_artists_previous(self) -> None:
        pages = self.library.saved_artists
        if pages.index > 0:
            pages.index -= 1
        current = pages.get_results()
        if current is not None:
            self.set_saved_artists_to_table(current)

    def get_current_user_saved_tracks_next(self) -> None:
        pages = self.library.saved_tracks
        cached = pages.get_results(pages.index + 1)
        if cached is not None:
            self.set_saved_tracks_to_table(cached)
            pages.index += 1
            return
        current = pages.get_results()
        if current is not None:
            self._send(IoEventKind.GET_CURRENT_SAVED_TRACKS, current.offset + current.limit)

    def get_current_user_saved_tracks_previous(self) -> None:
        pages = self.library.saved_tracks
        if pages.index > 0:
            pages.index -= 1
        current = pages.get_results()
        if current is not None:
            self.set_saved_tracks_to_table(current)

    def _next_page_or_fetch(self, pages: Any, kind: IoEventKind, *args: Any) -> None:
        if pages.get_results(pages.index + 1) is not None:
            pages.index += 1
            return
        current = pages.get_results()
        if current is not None:
            self._send(kind, *args, current.offset + current.limit)

    @staticmethod
    def _previous_page(pages: Any) -> None:
        if pages.index > 0:
            pages.index -= 1

    def get_current_user_saved_albums_next(self) -> None:
        self._next_page_or_fetch(
            self.library.saved_albums, IoEventKind.GET_CURRENT_USER_SAVED_ALBUMS
        )

    def get_current_user_saved_albums_previous(self) -> None:
        self._previous_page(self.library.saved_albums)

    def get_current_user_saved_shows_next(self) -> None:
        self._next_page_or_fetch(
            self.library.saved_shows, IoEventKind.GET_CURRENT_USER_SAVED_SHOWS
        )

    def get_current_user_saved_shows_previous(self) -> None:
        self._previous_page(self.library.saved_shows)

    def get_episode_table_next(self, show_id: str) -> None:
        self._next_page_or_fetch(
            self.library.show_episodes, IoEventKind.GET_CURRENT_SHOW_EPISODES, show_id
        )

    def get_episode_table_previous(self) -> None:
        self._previous_page(self.library.show_episodes)

    # -- albums --------------------------------------------------------

    def _search_album_id(self) -> Optional[str]:
        albums = self.search_results.albums
        index = self.search_results.selected_album_index
        if albums is None or index is None:
            return None
        return albums.items[index].id

    def _artist_album_id(self) -> Optional[str]:
        if self.artist is None:
            return None
        album = _item_at(self.artist.albums.items, self.artist.selected_album_index)
        return None if album is None else album.id

    def current_user_saved_album_delete(self, block: ActiveBlock) -> None:
        album_id: Optional[str] = None
        if block is ActiveBlock.SEARCH_RESULT_BLOCK:
            album_id = self._search_album_id()
        elif block is ActiveBlock.ALBUM_LIST:
            albums = self.library.saved_albums.get_results()
            if albums is not None:
                saved = _item_at(albums.items, self.album_list_index)
                if saved is not None:
                    album_id = saved.album.id
        elif block is ActiveBlock.ARTIST_BLOCK:
            album_id = self._artist_album_id()
        if album_id is not None:
            self._send(IoEventKind.CURRENT_USER_SAVED_ALBUM_DELETE, album_id)

    def current_user_saved_album_add(self, block: ActiveBlock) -> None:
        album_id: Optional[str] = None
        if block is ActiveBlock.SEARCH_RESULT_BLOCK:
            album_id = self._search_album_id()
        elif block is ActiveBlock.ARTIST_BLOCK:
            album_id = self._artist_album_id()
        if album_id is not None:
            self._send(IoEventKind.CURRENT_USER_SAVED_ALBUM_ADD, album_id)

    # -- artists -------------------------------------------------------

    def _search_artist_id(self) -> Optional[str]:
        artists = self.search_results.artists
        index = self.search_results.selected_artists_index
        if artists is None or index is None:
            return None
        return artists.items[index].id

    def _related_artist_id(self) -> Optional[str]:
        if self.artist is None:
            return None
        return self.artist.related_artists[self.artist.selected_related_artist_index].id

    def user_unfollow_artists(self, block: ActiveBlock) -> None:
        artist_id: Optional[str] = None
        if block is ActiveBlock.SEARCH_RESULT_BLOCK:
            artist_id = self._search_artist_id()
        elif block is ActiveBlock.ALBUM_LIST:
            artists = self.library.saved_artists.get_results()
            if artists is not None:
                followed = _item_at(artists.items, self.artists_list_index)
                if followed is not None:
                    artist_id = followed.id
        elif block is ActiveBlock.ARTIST_BLOCK:
            artist_id = self._related_artist_id()
        if artist_id is not None:
            self._send(IoEventKind.USER_UNFOLLOW_ARTISTS, [artist_id])

    def user_follow_artists(self, block: ActiveBlock) -> None:
        artist_id: Optional[str] = None
        if block is ActiveBlock.SEARCH_RESULT_BLOCK:
            artist_id = self._search_artist_id()
        elif block is ActiveBlock.ARTIST_BLOCK:
            artist_id = self._related_artist_id()
        if artist_id is not None:
            self._send(IoEventKind.USER_FOLLOW_ARTISTS, [artist_id])

    # -- playlists -----------------------------------------------------

    def user_follow_playlist(self) -> None:
        playlists = self.search_results.playlists
        index = self.search_results.selected_playlists_index
        if playlists is None or index is None:
            return
        playlist = playlists.items[index]
        self._send(
            IoEventKind.USER_FOLLOW_PLAYLIST, playlist.owner.id, playlist.id, playlist.public
        )

    def _unfollow_playlist(
        self, playlists: Optional[Page[SimplifiedPlaylist]], index: Optional[int]
    ) -> None:
        if playlists is None or index is None or self.user is None:
            return
        self._send(
            IoEventKind.USER_UNFOLLOW_PLAYLIST, self.user.id, playlists.items[index].id
        )

    def user_unfollow_playlist(self) -> None:
        self._unfollow_playlist(self.playlists, self.selected_playlist_index)

    def user_unfollow_playlist_search_result(self) -> None:
        self._unfollow_playlist(
            self.search_results.playlists, self.search_results.selected_playlists_index
        )

    # -- shows ---------------------------------------------------------

    def _episode_table_show_id(self) -> Optional[str]:
        if self.episode_table_context is EpisodeTableContext.FULL:
            selected: Any = self.selected_show_full
        else:
            selected = self.selected_show_simplified
        return None if selected is None else selected.show.id

    def user_follow_show(self, block: ActiveBlock) -> None:
        show_id: Optional[str] = None
        if block is ActiveBlock.SEARCH_RESULT_BLOCK:
            shows = self.search_results.shows
            index = self.search_results.selected_shows_index
            if shows is not None and index is not None:
                show = _item_at(shows.items, index)
                if show is not None:
                    show_id = show.id
        elif block is ActiveBlock.EPISODE_TABLE:
            show_id = self._episode_table_show_id()
        if show_id is not None:
            self._send(IoEventKind.CURRENT_USER_SAVED_SHOW_ADD, show_id)

    def user_unfollow_show(self, block: ActiveBlock) -> None:
        show_id: Optional[str] = None
        if block is ActiveBlock.PODCASTS:
            shows = self.library.saved_shows.get_results()
            if shows is not None:
                saved = _item_at(shows.items, self.shows_list_index)
                if saved is not None:
                    show_id = saved.show.id
        elif block is ActiveBlock.SEARCH_RESULT_BLOCK:
            shows = self.search_results.shows
            index = self.search_results.selected_shows_index
            if shows is not None and index is not None:
                show_id = shows.items[index].id
        elif block is ActiveBlock.EPISODE_TABLE:
            show_id = self._episode_table_show_id()
        if show_id is not None:
            self._send(IoEventKind.CURRENT_USER_SAVED_SHOW_DELETE, show_id)

    # -- discovery -----------------------------------------------------

    def get_made_for_you(self) -> None:
        """Search for the made-for-you playlists unless they are loaded."""
        if self.library.made_for_you_playlists.pages:
            return
        country = self._user_country()
        for name in MADE_FOR_YOU_PLAYLISTS:
            self._send(IoEventKind.MADE_FOR_YOU_SEARCH_AND_ADD, name, country)

    def get_audio_analysis(self) -> None:
        item = self._playing_item()
        if item is None:
            return
        if isinstance(item, FullTrack):
            if self.current_route.id is not RouteId.ANALYSIS:
                self._send(IoEventKind.GET_AUDIO_ANALYSIS, item.uri)
                self.push_navigation_stack(RouteId.ANALYSIS, ActiveBlock.ANALYSIS)
        elif isinstance(item, FullEpisode):
            # Episodes have no analysis; show the empty view instead.
            self.push_navigation_stack(RouteId.ANALYSIS, ActiveBlock.ANALYSIS)

    def get_artist(self, artist_id: str, input_artist_name: str) -> None:
        self._send(IoEventKind.GET_ARTIST, artist_id, input_artist_name, self._user_country())

    def get_user_country(self) -> Optional[str]:
        """Return the user's two-letter country code, if known and valid."""
        if self.user is None or self.user.country is None:
            return None
        country = self.user.country
        return country if _COUNTRY_CODE.fullmatch(country) else None

    # -- help ----------------------------------------------------------

    def calculate_help_menu_offset(self) -> None:
        old_offset = self.help_menu_offset
        if self.help_menu_max_lines < self.help_docs_size:
            self.help_menu_offset = self.help_menu_page * self.help_menu_max_lines
        if self.help_menu_offset > self.help_docs_size:
            self.help_menu_offset = old_offset
            self.help_menu_page -= 1