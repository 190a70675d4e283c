import pytest

from sptui.cli_args import UsageError, build_parser, parse_args


def test_no_command_means_interactive():
    assert parse_args([]).command is None


@pytest.mark.parametrize(
    "argv, command",
    [
        (["playback"], "playback"),
        (["pb"], "playback"),
        (["play", "-u", "spotify:track:x"], "play"),
        (["p", "-u", "spotify:track:x"], "play"),
        (["list", "-d"], "list"),
        (["l", "-d"], "list"),
        (["search", "q", "-t"], "search"),
        (["s", "q", "-t"], "search"),
    ],
)
def test_aliases_resolve_to_command(argv, command):
    assert parse_args(argv).command == command


def test_playback_default_format():
    assert parse_args(["pb"]).format == "%f %s %t - %a"


def test_playback_format_depends_on_seek():
    namespace = parse_args(["pb", "--seek", "-10"])
    assert namespace.seek == "-10"
    assert namespace.format == "%f %s %t - %a %r"


def test_playback_format_depends_on_volume():
    namespace = parse_args(["pb", "-v", "40"])
    assert namespace.volume == "40"
    assert namespace.format == "%v% %f %s %t - %a"


def test_playback_format_depends_on_transfer():
    assert parse_args(["pb", "--transfer", "Kitchen"]).format == "%f %s %t - %a on %d"


def test_explicit_format_wins():
    assert parse_args(["pb", "-v", "40", "-f", "%v"]).format == "%v"


def test_next_counts_occurrences():
    namespace = parse_args(["pb", "-nnn"])
    assert namespace.next == 3
    assert namespace.previous == 0


def test_actions_and_flags_combine():
    namespace = parse_args(["pb", "-t", "--like", "--shuffle", "-v", "50", "-d", "Den"])
    assert (namespace.toggle, namespace.like, namespace.shuffle) == (True, True, True)
    assert namespace.device == "Den"


@pytest.mark.parametrize(
    "argv",
    [
        ["pb", "-n", "-t"],
        ["pb", "-n", "-p"],
        ["pb", "-p", "--shuffle"],
        ["pb", "--like", "--dislike"],
        ["pb", "--share-track", "--share-album"],
        ["pb", "--share-track", "--like"],
        ["pb", "--share-album", "-v", "10"],
    ],
)
def test_playback_conflicts(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_play_requires_uri_or_name():
    with pytest.raises(UsageError):
        parse_args(["play"])


def test_play_name_requires_context():
    with pytest.raises(UsageError):
        parse_args(["play", "-n", "Song"])


def test_play_by_name():
    namespace = parse_args(["play", "-n", "Song", "-t", "-q"])
    assert namespace.name == "Song"
    assert namespace.track and namespace.queue
    assert namespace.format == "%f %s %t - %a"


@pytest.mark.parametrize(
    "argv",
    [
        ["play", "-u", "x", "-n", "y", "-t"],
        ["play", "-n", "y", "-t", "-b"],
        ["play", "-n", "y", "-b", "-q"],
        ["play", "-n", "y", "-t", "-r"],
    ],
)
def test_play_conflicts(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


@pytest.mark.parametrize(
    "flag, expected",
    [("-d", "%v% %d"), ("--liked", "%t - %a (%u)"), ("-p", "%p (%u)")],
)
def test_list_formats(flag, expected):
    assert parse_args(["list", flag]).format == expected


def test_list_needs_exactly_one_kind():
    with pytest.raises(UsageError):
        parse_args(["list"])
    with pytest.raises(UsageError):
        parse_args(["list", "-d", "-p"])


def test_list_limit_is_kept_as_text():
    assert parse_args(["list", "-p", "--limit", "7"]).limit == "7"


@pytest.mark.parametrize(
    "flag, expected",
    [
        ("-t", "%t - %a (%u)"),
        ("-p", "%p (%u)"),
        ("-a", "%a (%u)"),
        ("-b", "%b - %a (%u)"),
        ("-w", "%h - %a (%u)"),
    ],
)
def test_search_formats(flag, expected):
    namespace = parse_args(["search", "query", flag])
    assert namespace.search == "query"
    assert namespace.format == expected


def test_search_requires_query_and_kind():
    with pytest.raises(UsageError):
        parse_args(["search", "-t"])
    with pytest.raises(UsageError):
        parse_args(["search", "query"])


def test_unknown_option_raises_usage_error():
    with pytest.raises(UsageError):
        build_parser().parse_args(["pb", "--bogus"])