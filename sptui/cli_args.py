"""Command-line interface: the `playback`, `play`, `list` and `search` commands."""

from __future__ import annotations

import argparse
from typing import Any, Callable, Optional, Sequence, Tuple

PROG = "spt"

_DEFAULT_STATUS_FORMAT = "%f %s %t - %a"

_FORMAT_HELP = (
    "Specifies the output format. There are multiple format specifiers you can use: "
    "%%a: artist, %%b: album, %%p: playlist, %%t: track, %%h: show, "
    "%%f: flags (shuffle, repeat, like), %%s: playback status, %%v: volume, "
    "%%d: current device. Example: spt pb -s -f 'playing on %%d at %%v%%'"
)

_JUMPS = ("next", "previous")
_LIKES = ("like", "dislike")
_FLAGS = ("like", "dislike", "shuffle", "repeat")
_ACTIONS = ("toggle", "status", "transfer", "volume")
_SINGLE = ("share_track", "share_album")

_PLAY_CONTEXTS = ("track", "artist", "playlist", "album", "show")
_PLAY_ACTIONS = ("uri", "name")

_LISTABLE = ("devices", "playlists", "liked")
_SEARCHABLE = ("playlists", "tracks", "albums", "artists", "shows")

_PRIVATE = ("_command", "_check", "_format_default", "_format_ifs")

FormatConditions = Tuple[Tuple[str, str], ...]


class UsageError(Exception):
    """Raised when the command-line arguments are invalid."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _present(namespace: argparse.Namespace, dest: str) -> bool:
    value = getattr(namespace, dest, None)
    return value is not None and value is not False and value != 0


def _option(dest: str) -> str:
    return "--" + dest.replace("_", "-")


def _given(namespace: argparse.Namespace, dests: Sequence[str]) -> list:
    return [dest for dest in dests if _present(namespace, dest)]


def _conflict(first: str, second: str) -> UsageError:
    return UsageError(
        f"the argument '{_option(first)}' cannot be used with '{_option(second)}'"
    )


def _at_most_one(namespace: argparse.Namespace, dests: Sequence[str]) -> None:
    given = _given(namespace, dests)
    if len(given) > 1:
        raise _conflict(given[0], given[1])


def _exactly_one(namespace: argparse.Namespace, dests: Sequence[str]) -> None:
    if not _given(namespace, dests):
        options = ", ".join(_option(dest) for dest in dests)
        raise UsageError(f"one of the arguments {options} is required")
    _at_most_one(namespace, dests)


def _exclusive(
    namespace: argparse.Namespace, first: Sequence[str], second: Sequence[str]
) -> None:
    left = _given(namespace, first)
    right = [dest for dest in _given(namespace, second) if dest not in left]
    if left and right:
        raise _conflict(left[0], right[0])


def _check_playback(namespace: argparse.Namespace) -> None:
    _at_most_one(namespace, _JUMPS)
    _at_most_one(namespace, _LIKES)
    _at_most_one(namespace, _SINGLE)
    _exclusive(namespace, _JUMPS, _FLAGS + _ACTIONS + _SINGLE)
    _exclusive(namespace, _SINGLE, _ACTIONS + _FLAGS)


def _check_play(namespace: argparse.Namespace) -> None:
    _at_most_one(namespace, _PLAY_CONTEXTS)
    _exactly_one(namespace, _PLAY_ACTIONS)
    if _present(namespace, "name") and not _given(namespace, _PLAY_CONTEXTS):
        options = ", ".join(_option(dest) for dest in _PLAY_CONTEXTS)
        raise UsageError(f"the argument '--name' requires one of {options}")
    _exclusive(namespace, ("queue",), ("album", "artist", "playlist", "show"))
    _exclusive(namespace, ("random",), ("track", "album", "artist", "show"))


def _check_list(namespace: argparse.Namespace) -> None:
    _exactly_one(namespace, _LISTABLE)


def _check_search(namespace: argparse.Namespace) -> None:
    _exactly_one(namespace, _SEARCHABLE)


def _add_device(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d", "--device", metavar="DEVICE", help="Specifies the spotify device to use"
    )


def _add_format(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-f", "--format", metavar="FORMAT", help=_FORMAT_HELP)


def _add_flag(parser: argparse.ArgumentParser, *names: str, help: str) -> None:
    parser.add_argument(*names, action="store_true", help=help)


def _configure(
    parser: argparse.ArgumentParser,
    command: str,
    check: Callable[[argparse.Namespace], None],
    format_default: Optional[str],
    format_ifs: FormatConditions,
) -> None:
    parser.set_defaults(
        _command=command,
        _check=check,
        _format_default=format_default,
        _format_ifs=format_ifs,
    )


def playback_subcommand(subparsers: Any) -> argparse.ArgumentParser:
    """Add the `playback` (alias `pb`) command."""
    parser = subparsers.add_parser(
        "playback",
        aliases=["pb"],
        help="Interacts with the playback of a device",
        description=(
            "Use `playback` to interact with the playback of the current or any other "
            "device. You can specify another device with `--device`. If no options were "
            "provided, spt will default to just displaying the current playback. After "
            "every action spt will display the updated playback. The output format is "
            "configurable with the `--format` flag. `--next` and `--previous` cannot be "
            "used with other options; `--status`, `--toggle`, `--transfer`, `--volume`, "
            "`--like`, `--repeat` and `--shuffle` can be used together; `--share-track` "
            "and `--share-album` cannot be used with other options."
        ),
    )
    _add_device(parser)
    _add_format(parser)
    _add_flag(parser, "-t", "--toggle", help="Pauses/resumes the playback of a device")
    _add_flag(
        parser, "-s", "--status", help="Prints out the current status of a device (default)"
    )
    _add_flag(parser, "--share-track", help="Returns the url to the current track")
    _add_flag(
        parser, "--share-album", help="Returns the url to the album of the current track"
    )
    parser.add_argument(
        "--transfer", metavar="DEVICE", help="Transfers the playback to new DEVICE"
    )
    _add_flag(parser, "--like", help="Likes the current song if possible")
    _add_flag(parser, "--dislike", help="Dislikes the current song if possible")
    _add_flag(parser, "--shuffle", help="Toggles shuffle mode")
    _add_flag(parser, "--repeat", help="Switches between repeat modes")
    parser.add_argument(
        "-n",
        "--next",
        action="count",
        default=0,
        help="Jumps to the next song; repeat it to jump further, e.g. `spt pb -nnn`",
    )
    parser.add_argument(
        "-p",
        "--previous",
        action="count",
        default=0,
        help=(
            "Jumps to the beginning of the current song if given once; "
            "`spt pb -pp` jumps to the previous song"
        ),
    )
    parser.add_argument(
        "--seek",
        metavar="±SECONDS",
        help=(
            "Jumps SECONDS forwards (+) or backwards (-); "
            "without a sign, jumps to that second of the track"
        ),
    )
    parser.add_argument(
        "-v",
        "--volume",
        metavar="VOLUME",
        help="Sets the volume of a device to VOLUME (1 - 100)",
    )
    _configure(
        parser,
        "playback",
        _check_playback,
        _DEFAULT_STATUS_FORMAT,
        (
            ("seek", "%f %s %t - %a %r"),
            ("volume", "%v% %f %s %t - %a"),
            ("transfer", "%f %s %t - %a on %d"),
        ),
    )
    return parser


def play_subcommand(subparsers: Any) -> argparse.ArgumentParser:
    """Add the `play` (alias `p`) command."""
    parser = subparsers.add_parser(
        "play",
        aliases=["p"],
        help="Plays a uri or another spotify item by name",
        description=(
            "If you specify a uri, the type can be inferred. If you want to play something "
            "by name, you have to specify the type: `--track`, `--album`, `--artist`, "
            "`--playlist` or `--show`. The first item which was found will be played "
            "without confirmation. To add a track to the queue, use `--queue`. To play a "
            "random song from a playlist, use `--random`."
        ),
    )
    _add_device(parser)
    _add_format(parser)
    parser.add_argument("-u", "--uri", metavar="URI", help="Plays the URI")
    parser.add_argument(
        "-n",
        "--name",
        metavar="NAME",
        help="Plays the first match with NAME from the specified category",
    )
    _add_flag(
        parser, "-q", "--queue", help="Adds track to queue instead of playing it directly"
    )
    _add_flag(
        parser,
        "-r",
        "--random",
        help="Plays a random track (only works with playlists)",
    )
    _add_flag(parser, "-b", "--album", help="Looks for an album")
    _add_flag(parser, "-a", "--artist", help="Looks for an artist")
    _add_flag(parser, "-t", "--track", help="Looks for a track")
    _add_flag(parser, "-w", "--show", help="Looks for a show")
    _add_flag(parser, "-p", "--playlist", help="Looks for a playlist")
    _configure(parser, "play", _check_play, _DEFAULT_STATUS_FORMAT, ())
    return parser


def list_subcommand(subparsers: Any) -> argparse.ArgumentParser:
    """Add the `list` (alias `l`) command."""
    parser = subparsers.add_parser(
        "list",
        aliases=["l"],
        help="Lists devices, liked songs and playlists",
        description=(
            "This will list devices, liked songs or playlists. With the `--limit` flag "
            "you are able to specify the amount of results (between 1 and 50). The format "
            "option will be applied to every item found."
        ),
    )
    _add_format(parser)
    _add_flag(parser, "-d", "--devices", help="Lists devices")
    _add_flag(parser, "-p", "--playlists", help="Lists playlists")
    _add_flag(parser, "--liked", help="Lists liked songs")
    parser.add_argument(
        "--limit", help="Specifies the maximum number of results (1 - 50)"
    )
    _configure(
        parser,
        "list",
        _check_list,
        None,
        (
            ("devices", "%v% %d"),
            ("liked", "%t - %a (%u)"),
            ("playlists", "%p (%u)"),
        ),
    )
    return parser


def search_subcommand(subparsers: Any) -> argparse.ArgumentParser:
    """Add the `search` (alias `s`) command."""
    parser = subparsers.add_parser(
        "search",
        aliases=["s"],
        help="Searches for tracks, albums and more",
        description=(
            "This will search for something on spotify and display the items. The output "
            "format can be changed with the `--format` flag and the limit with the "
            "`--limit` flag (between 1 and 50). The type can't be inferred, so you have "
            "to specify it."
        ),
    )
    _add_format(parser)
    parser.add_argument("search", metavar="SEARCH", help="Specifies the search query")
    _add_flag(parser, "-b", "--albums", help="Looks for albums")
    _add_flag(parser, "-a", "--artists", help="Looks for artists")
    _add_flag(parser, "-p", "--playlists", help="Looks for playlists")
    _add_flag(parser, "-t", "--tracks", help="Looks for tracks")
    _add_flag(parser, "-w", "--shows", help="Looks for shows")
    parser.add_argument(
        "--limit", help="Specifies the maximum number of results (1 - 50)"
    )
    _configure(
        parser,
        "search",
        _check_search,
        None,
        (
            ("tracks", "%t - %a (%u)"),
            ("playlists", "%p (%u)"),
            ("artists", "%a (%u)"),
            ("albums", "%b - %a (%u)"),
            ("shows", "%h - %a (%u)"),
        ),
    )
    return parser


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with all commands."""
    parser = _Parser(prog=PROG, description="A terminal user interface for Spotify")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    playback_subcommand(subparsers)
    play_subcommand(subparsers)
    list_subcommand(subparsers)
    search_subcommand(subparsers)
    return parser


def _resolve_format(namespace: argparse.Namespace) -> None:
    if getattr(namespace, "format", None) is not None:
        return
    for dest, template in namespace._format_ifs:
        if _present(namespace, dest):
            namespace.format = template
            return
    namespace.format = namespace._format_default


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse and validate arguments; ``command`` is None when none was given."""
    namespace = build_parser().parse_args(argv)
    if namespace.command is None:
        return namespace
    namespace.command = namespace._command
    namespace._check(namespace)
    _resolve_format(namespace)
    for private in _PRIVATE:
        delattr(namespace, private)
    return namespace