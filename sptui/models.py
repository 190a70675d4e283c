"""Records describing catalogue items, libraries and playback state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar, Union

T = TypeVar("T")


class RepeatState(Enum):
    """Repeat mode of the player."""

    OFF = "off"
    TRACK = "track"
    CONTEXT = "context"


@dataclass
class SimplifiedArtist:
    name: str
    id: Optional[str] = None
    uri: Optional[str] = None


@dataclass
class FullArtist:
    id: str
    name: str
    uri: str
    genres: List[str] = field(default_factory=list)
    popularity: int = 0


@dataclass
class SimplifiedAlbum:
    name: str
    artists: List[SimplifiedArtist] = field(default_factory=list)
    id: Optional[str] = None
    uri: Optional[str] = None
    release_date: Optional[str] = None


@dataclass
class Page(Generic[T]):
    """An offset-based page of results."""

    items: List[T] = field(default_factory=list)
    offset: int = 0
    limit: int = 20
    total: int = 0


@dataclass
class CursorBasedPage(Generic[T]):
    """A cursor-based page of results."""

    items: List[T] = field(default_factory=list)
    limit: int = 20
    total: int = 0
    after: Optional[str] = None


@dataclass
class SimplifiedTrack:
    name: str
    artists: List[SimplifiedArtist] = field(default_factory=list)
    duration_ms: int = 0
    uri: str = ""
    id: Optional[str] = None
    track_number: int = 0


@dataclass
class FullAlbum:
    id: str
    name: str
    uri: str
    artists: List[SimplifiedArtist] = field(default_factory=list)
    tracks: Page[SimplifiedTrack] = field(default_factory=Page)
    release_date: str = ""


@dataclass
class SavedAlbum:
    album: FullAlbum
    added_at: str = ""


@dataclass
class FullTrack:
    name: str
    album: SimplifiedAlbum
    artists: List[SimplifiedArtist] = field(default_factory=list)
    duration_ms: int = 0
    uri: str = ""
    id: Optional[str] = None
    popularity: int = 0


@dataclass
class SavedTrack:
    track: FullTrack
    added_at: str = ""


@dataclass
class PlaylistOwner:
    id: str
    display_name: Optional[str] = None


@dataclass
class SimplifiedPlaylist:
    id: str
    name: str
    owner: PlaylistOwner
    uri: str = ""
    public: Optional[bool] = None


@dataclass
class PlaylistTrack:
    track: Optional[FullTrack] = None
    added_at: Optional[str] = None


@dataclass
class SimplifiedShow:
    id: str
    name: str
    publisher: str = ""
    uri: str = ""
    description: str = ""


@dataclass
class SimplifiedEpisode:
    id: str
    name: str
    duration_ms: int = 0
    uri: str = ""
    release_date: str = ""


@dataclass
class FullShow:
    id: str
    name: str
    publisher: str = ""
    uri: str = ""
    episodes: Page[SimplifiedEpisode] = field(default_factory=Page)


@dataclass
class SavedShow:
    show: SimplifiedShow
    added_at: str = ""


@dataclass
class FullEpisode:
    id: str
    name: str
    show: SimplifiedShow
    duration_ms: int = 0
    uri: str = ""


@dataclass
class Device:
    id: str
    name: str
    volume_percent: int = 0
    is_active: bool = False
    device_type: str = ""


@dataclass
class DevicePayload:
    devices: List[Device] = field(default_factory=list)


@dataclass
class PrivateUser:
    id: str
    country: Optional[str] = None
    display_name: Optional[str] = None


@dataclass
class PlayHistory:
    track: SimplifiedTrack
    played_at: str = ""


PlayingItem = Union[FullTrack, FullEpisode]


@dataclass
class CurrentlyPlaybackContext:
    """What the player is doing right now."""

    device: Device
    is_playing: bool = False
    shuffle_state: bool = False
    repeat_state: RepeatState = RepeatState.OFF
    progress_ms: Optional[int] = None
    item: Optional[PlayingItem] = None


def item_duration_ms(item: PlayingItem) -> int:
    """Return the duration of a playing track or episode."""
    if isinstance(item, (FullTrack, FullEpisode)):
        return item.duration_ms
    raise TypeError(f"not a playable item: {type(item).__name__}")