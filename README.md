# sptui

The core of a terminal Spotify client. It holds the application state that a
user interface drives, the client configuration on disk, the command-line
grammar for scripting playback, the `--format` output templates, and keyboard
input handling.

## Installation

Install the package with your usual Python package installer. It needs
Python 3.10 or later and depends on `pyyaml` and `blessed`. The `test` extra
adds `pytest`.

## What is inside

- `sptui.models`: dataclasses for catalogue and playback objects. These are
  `FullTrack`, `SimplifiedAlbum`, `FullAlbum`, `FullArtist`,
  `SimplifiedPlaylist`, `SimplifiedShow`, `FullShow`, `FullEpisode`,
  `Device`, `DevicePayload`, `PrivateUser`, `Page`, `CursorBasedPage`,
  `CurrentlyPlaybackContext` and others. The module also has the
  `RepeatState` enum and `item_duration_ms(item)`, which gives the duration
  of a playing track or episode.
- `sptui.routes`: navigation and view state. It has the `RouteId`,
  `ActiveBlock`, `SearchResultBlock` and `ArtistBlock` enums and the `Route`
  class. `ScrollableResultPages` provides `get_results` and `add_pages`. It
  also has `Library`, `SearchResult`, `TrackTable`, and the selected album,
  show and artist records.
- `sptui.actions`: `IoEvent` and `IoEventKind`. An `IoEvent` is a request for
  the network worker. Each kind takes a fixed number of arguments, and a
  wrong count raises `TypeError`.
- `sptui.app`: `App`, the state machine behind the interface. It covers:
  - seeking, volume, toggling playback, and shuffle and repeat;
  - the navigation stack (`push_navigation_stack`, `pop_navigation_stack`,
    `current_route`);
  - paging through saved tracks, albums, artists, shows and episodes;
  - following and unfollowing artists, playlists and shows, and saving albums;
  - the "Made For You" lookups and audio analysis;
  - copying share URLs to a clipboard object;
  - help-menu paging.

  Requests go out through the `io_tx` callable you pass in.
- `sptui.config`: `ClientConfig` reads and writes `client.yml` under
  `~/.config/spotify-tui`, or under another home directory you pass in.
  - `load_config` prompts for a client ID, a client secret and a redirect port
    when no file exists yet.
  - `set_device_id` stores the chosen device.
  - `validate_client_key` checks that a key has 32 hex digits.
  - All three raise `ConfigError` on failure.
- `sptui.cli_args`: argument parsing for the `playback`, `play`, `list` and
  `search` subcommands, with their aliases `pb`, `p`, `l` and `s`.
  `parse_args(argv)` checks which options conflict and fills in the default
  `--format` for the options given. It raises `UsageError` on invalid input.
- `sptui.formatting`: turns tracks, albums, artists, playlists, shows and
  episodes into `Format` values. `format_output(template, values, behavior)`
  fills in a template. The `*_from_args` helpers read a parsed namespace and
  return a `SearchType`, a list of `Flag` values, or a `JumpDirection` with a
  count.
- `sptui.key`: `Key` values. `key_from_keystroke` converts a terminal
  keystroke into a `Key`, and `function_key(n)` returns F0 to F12.
- `sptui.events`: `Events` reads keys in a background thread using `blessed`,
  or using a reader callable you supply. It queues `Event` values: input
  events, and ticks at `EventConfig.tick_rate` seconds. `next(timeout)`
  blocks until an event arrives. `close()` stops the thread, and `Events`
  also works as a context manager.

## Examples

Check a client key before you save it:

```python
from sptui.config import ConfigError, validate_client_key

try:
    validate_client_key("placeholder")
except ConfigError as err:
    print(err)  # invalid length: 11 (must be 32)
```

Parse a scripted playback command:

```python
from sptui.cli_args import parse_args

args = parse_args(["pb", "--toggle", "--volume", "40"])
print(args.command, args.format)  # playback %v% %f %s %t - %a
```

Drive the application state and collect its requests:

```python
import queue
from types import SimpleNamespace

from sptui.app import App
from sptui.routes import ActiveBlock, RouteId

behavior = SimpleNamespace(seek_milliseconds=5000, volume_increment=10)
requests = queue.Queue()
app = App(SimpleNamespace(behavior=behavior), io_tx=requests.put)

app.push_navigation_stack(RouteId.SEARCH, ActiveBlock.SEARCH_RESULT_BLOCK)
app.toggle_playback()        # queues a StartPlayback request
print(requests.get_nowait())  # IoEvent.StartPlayback(None, None, None)
```

## Output format placeholders

| Placeholder | Meaning |
|-------------|---------|
| `%a` | artist |
| `%b` | album |
| `%t` | track |
| `%p` | playlist |
| `%h` | show |
| `%u` | URI |
| `%d` | current device |
| `%v` | volume |
| `%r` | position/duration as `m:ss/m:ss` |
| `%f` | flags: shuffle, repeat, like icons |
| `%s` | playing or paused icon |

Icons come from the `behavior` object passed to `format_output`. Any of
`%a %b %t %p %h %u %d %v %f %s` that has no value becomes `None`.

## What the package does not do

- It does not talk to Spotify. No network worker carries out the `IoEvent`
  requests, and nothing handles authentication or token caching.
- It does not draw anything on screen.
- It does not install an `spt` command. The argument parser can be used, but
  nothing runs the parsed commands against a player.