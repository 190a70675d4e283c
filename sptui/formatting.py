"""Command-line selections and the `--format` template language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterable, List, Sequence, Tuple

from .models import (
    FullArtist,
    FullEpisode,
    FullTrack,
    RepeatState,
    SimplifiedAlbum,
    SimplifiedArtist,
    SimplifiedPlaylist,
    SimplifiedShow,
)

_UNSUPPORTED_PLACEHOLDERS = ("%a", "%b", "%t", "%p", "%h", "%u", "%d", "%v", "%f", "%s")


class SearchType(Enum):
    """Kinds of items that can be listed, searched or played."""

    PLAYLIST = auto()
    TRACK = auto()
    ARTIST = auto()
    ALBUM = auto()
    SHOW = auto()
    DEVICE = auto()
    LIKED = auto()


class FlagKind(Enum):
    LIKE = auto()
    SHUFFLE = auto()
    REPEAT = auto()


@dataclass(frozen=True)
class Flag:
    """A flag to set; for LIKE, ``value`` says like (True) or dislike (False)."""

    kind: FlagKind
    value: bool = True


class JumpDirection(Enum):
    NEXT = auto()
    PREVIOUS = auto()


class FormatKind(Enum):
    """Kinds of formattable values, keyed by their placeholder."""

    ALBUM = "%b"
    ARTIST = "%a"
    PLAYLIST = "%p"
    TRACK = "%t"
    SHOW = "%h"
    URI = "%u"
    DEVICE = "%d"
    VOLUME = "%v"
    POSITION = "%r"
    FLAGS = "%f"
    PLAYING = "%s"


def _clock(ms: int) -> str:
    minutes, rest = divmod(int(ms), 60_000)
    return f"{minutes}:{rest // 1000:02}"


@dataclass(frozen=True)
class Format:
    """A value to put in place of its placeholder.

    POSITION holds ``(current_ms, duration_ms)``; FLAGS holds
    ``(repeat_state, shuffle, liked)``; PLAYING holds a bool.
    """

    kind: FormatKind
    value: Any

    @property
    def placeholder(self) -> str:
        return self.kind.value

    def render(self, behavior: Any) -> str:
        """Render the value as text, using the icons from ``behavior``."""
        if self.kind is FormatKind.VOLUME:
            return str(self.value)
        if self.kind is FormatKind.POSITION:
            current, duration = self.value
            return f"{_clock(current)}/{_clock(duration)}"
        if self.kind is FormatKind.FLAGS:
            repeat_state, shuffle, liked = self.value
            repeat = {
                RepeatState.OFF: "",
                RepeatState.TRACK: behavior.repeat_track_icon,
                RepeatState.CONTEXT: behavior.repeat_context_icon,
            }[repeat_state]
            parts = [
                behavior.shuffle_icon if shuffle else "",
                repeat,
                behavior.liked_icon if liked else "",
            ]
            return " ".join(part for part in parts if part)
        if self.kind is FormatKind.PLAYING:
            return behavior.playing_icon if self.value else behavior.paused_icon
        return str(self.value)


def join_artists(artists: Iterable[SimplifiedArtist]) -> str:
    """Join artist names with commas."""
    return ", ".join(artist.name for artist in artists)


def format_album(album: SimplifiedAlbum) -> List[Format]:
    values = [
        Format(FormatKind.ALBUM, album.name),
        Format(FormatKind.ARTIST, join_artists(album.artists)),
    ]
    if album.uri is not None:
        values.append(Format(FormatKind.URI, album.uri))
    return values


def format_artist(artist: FullArtist) -> List[Format]:
    return [Format(FormatKind.ARTIST, artist.name), Format(FormatKind.URI, artist.uri)]


def format_playlist(playlist: SimplifiedPlaylist) -> List[Format]:
    return [
        Format(FormatKind.PLAYLIST, playlist.name),
        Format(FormatKind.URI, playlist.uri),
    ]


def format_track(track: FullTrack) -> List[Format]:
    return [
        Format(FormatKind.ALBUM, track.album.name),
        Format(FormatKind.ARTIST, join_artists(track.artists)),
        Format(FormatKind.TRACK, track.name),
        Format(FormatKind.URI, track.uri),
    ]


def format_show(show: SimplifiedShow) -> List[Format]:
    return [
        Format(FormatKind.ARTIST, show.publisher),
        Format(FormatKind.SHOW, show.name),
        Format(FormatKind.URI, show.uri),
    ]


def format_episode(episode: FullEpisode) -> List[Format]:
    return [
        Format(FormatKind.SHOW, episode.show.name),
        Format(FormatKind.ARTIST, episode.show.publisher),
        Format(FormatKind.TRACK, episode.name),
        Format(FormatKind.URI, episode.uri),
    ]


def format_output(template: str, values: Sequence[Format], behavior: Any) -> str:
    """Fill a template; placeholders with no value become ``None``."""
    for value in values:
        template = template.replace(value.placeholder, value.render(behavior))
    for placeholder in _UNSUPPORTED_PLACEHOLDERS:
        template = template.replace(placeholder, "None")
    return template.strip()


def _present(args: Any, name: str) -> bool:
    return bool(getattr(args, name, False))


def _first_present(args: Any, choices: Sequence[Tuple[str, SearchType]]) -> SearchType:
    for name, kind in choices:
        if _present(args, name):
            return kind
    names = ", ".join(name for name, _ in choices)
    raise ValueError(f"one of {names} must be given")


def play_type_from_args(args: Any) -> SearchType:
    """Pick the item type for `play` from parsed arguments."""
    return _first_present(
        args,
        (
            ("playlist", SearchType.PLAYLIST),
            ("track", SearchType.TRACK),
            ("artist", SearchType.ARTIST),
            ("album", SearchType.ALBUM),
            ("show", SearchType.SHOW),
        ),
    )


def search_type_from_args(args: Any) -> SearchType:
    """Pick the item type for `search` from parsed arguments."""
    return _first_present(
        args,
        (
            ("playlists", SearchType.PLAYLIST),
            ("tracks", SearchType.TRACK),
            ("artists", SearchType.ARTIST),
            ("albums", SearchType.ALBUM),
            ("shows", SearchType.SHOW),
        ),
    )


def list_type_from_args(args: Any) -> SearchType:
    """Pick what `list` shows from parsed arguments."""
    return _first_present(
        args,
        (
            ("playlists", SearchType.PLAYLIST),
            ("devices", SearchType.DEVICE),
            ("liked", SearchType.LIKED),
        ),
    )


def flags_from_args(args: Any) -> List[Flag]:
    """Collect the playback flags given on the command line, in order."""
    flags: List[Flag] = []
    if _present(args, "like"):
        flags.append(Flag(FlagKind.LIKE, True))
    elif _present(args, "dislike"):
        flags.append(Flag(FlagKind.LIKE, False))
    if _present(args, "shuffle"):
        flags.append(Flag(FlagKind.SHUFFLE))
    if _present(args, "repeat"):
        flags.append(Flag(FlagKind.REPEAT))
    return flags


def jump_from_args(args: Any) -> Tuple[JumpDirection, int]:
    """Return the jump direction and how many times it was given."""
    next_count = getattr(args, "next", 0) or 0
    if next_count:
        return JumpDirection.NEXT, int(next_count)
    previous_count = getattr(args, "previous", 0) or 0
    if previous_count:
        return JumpDirection.PREVIOUS, int(previous_count)
    raise ValueError("one of next, previous must be given")