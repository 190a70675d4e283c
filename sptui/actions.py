"""Requests the interface hands to the network worker."""

from __future__ import annotations

from enum import Enum
from typing import Any, Tuple


class IoEventKind(Enum):
    """Kinds of network requests; each takes a fixed number of arguments."""

    GET_CURRENT_PLAYBACK = "GetCurrentPlayback"
    GET_DEVICES = "GetDevices"
    GET_PLAYLISTS = "GetPlaylists"
    SEEK = "Seek"
    NEXT_TRACK = "NextTrack"
    PREVIOUS_TRACK = "PreviousTrack"
    PAUSE_PLAYBACK = "PausePlayback"
    START_PLAYBACK = "StartPlayback"
    CHANGE_VOLUME = "ChangeVolume"
    SHUFFLE = "Shuffle"
    REPEAT = "Repeat"
    GET_RECOMMENDATIONS_FOR_SEED = "GetRecommendationsForSeed"
    GET_RECOMMENDATIONS_FOR_TRACK_ID = "GetRecommendationsForTrackId"
    SET_TRACKS_TO_TABLE = "SetTracksToTable"
    SET_ARTISTS_TO_TABLE = "SetArtistsToTable"
    GET_FOLLOWED_ARTISTS = "GetFollowedArtists"
    GET_CURRENT_SAVED_TRACKS = "GetCurrentSavedTracks"
    GET_CURRENT_USER_SAVED_ALBUMS = "GetCurrentUserSavedAlbums"
    CURRENT_USER_SAVED_ALBUM_DELETE = "CurrentUserSavedAlbumDelete"
    CURRENT_USER_SAVED_ALBUM_ADD = "CurrentUserSavedAlbumAdd"
    GET_CURRENT_USER_SAVED_SHOWS = "GetCurrentUserSavedShows"
    GET_CURRENT_SHOW_EPISODES = "GetCurrentShowEpisodes"
    USER_UNFOLLOW_ARTISTS = "UserUnfollowArtists"
    USER_FOLLOW_ARTISTS = "UserFollowArtists"
    USER_FOLLOW_PLAYLIST = "UserFollowPlaylist"
    USER_UNFOLLOW_PLAYLIST = "UserUnfollowPlaylist"
    CURRENT_USER_SAVED_SHOW_ADD = "CurrentUserSavedShowAdd"
    CURRENT_USER_SAVED_SHOW_DELETE = "CurrentUserSavedShowDelete"
    MADE_FOR_YOU_SEARCH_AND_ADD = "MadeForYouSearchAndAdd"
    GET_AUDIO_ANALYSIS = "GetAudioAnalysis"
    GET_ARTIST = "GetArtist"
    CURRENT_USER_SAVED_TRACKS_CONTAINS = "CurrentUserSavedTracksContains"
    UPDATE_SEARCH_LIMITS = "UpdateSearchLimits"
    TRANSFER_PLAYBACK_TO_DEVICE = "TransferPlaybackToDevice"
    TOGGLE_SAVE_TRACK = "ToggleSaveTrack"
    ADD_ITEM_TO_QUEUE = "AddItemToQueue"
    GET_SEARCH_RESULTS = "GetSearchResults"

    @property
    def arity(self) -> int:
        """Number of arguments an event of this kind carries."""
        return _ARITY.get(self, 1)


_ARITY = {
    IoEventKind.GET_CURRENT_PLAYBACK: 0,
    IoEventKind.GET_DEVICES: 0,
    IoEventKind.GET_PLAYLISTS: 0,
    IoEventKind.NEXT_TRACK: 0,
    IoEventKind.PREVIOUS_TRACK: 0,
    IoEventKind.PAUSE_PLAYBACK: 0,
    IoEventKind.START_PLAYBACK: 3,
    IoEventKind.GET_RECOMMENDATIONS_FOR_SEED: 4,
    IoEventKind.GET_RECOMMENDATIONS_FOR_TRACK_ID: 2,
    IoEventKind.GET_CURRENT_SHOW_EPISODES: 2,
    IoEventKind.USER_FOLLOW_PLAYLIST: 3,
    IoEventKind.USER_UNFOLLOW_PLAYLIST: 2,
    IoEventKind.MADE_FOR_YOU_SEARCH_AND_ADD: 2,
    IoEventKind.GET_ARTIST: 3,
    IoEventKind.UPDATE_SEARCH_LIMITS: 2,
    IoEventKind.GET_SEARCH_RESULTS: 2,
}


class IoEvent:
    """A network request: its kind and the arguments it carries."""

    __slots__ = ("kind", "args")

    def __init__(self, kind: IoEventKind, *args: Any) -> None:
        if len(args) != kind.arity:
            raise TypeError(
                f"{kind.value} takes {kind.arity} argument(s), {len(args)} given"
            )
        self.kind = kind
        self.args: Tuple[Any, ...] = args

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IoEvent):
            return NotImplemented
        return self.kind is other.kind and self.args == other.args

    def __repr__(self) -> str:
        inner = ", ".join(repr(arg) for arg in self.args)
        return f"IoEvent.{self.kind.value}({inner})"