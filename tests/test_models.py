import pytest

from sptui.models import (
    CurrentlyPlaybackContext,
    Device,
    FullEpisode,
    FullTrack,
    Page,
    CursorBasedPage,
    RepeatState,
    SimplifiedAlbum,
    SimplifiedArtist,
    SimplifiedShow,
    DevicePayload,
    item_duration_ms,
)


def _track(duration):
    album = SimplifiedAlbum(name="Album", artists=[SimplifiedArtist(name="A")])
    return FullTrack(name="Song", album=album, duration_ms=duration, uri="spotify:track:x")


def _episode(duration):
    show = SimplifiedShow(id="s", name="Show", publisher="Pub")
    return FullEpisode(id="e", name="Ep", show=show, duration_ms=duration)


def test_item_duration_of_track():
    assert item_duration_ms(_track(1234)) == 1234


def test_item_duration_of_episode():
    assert item_duration_ms(_episode(999)) == 999


def test_item_duration_rejects_other_objects():
    with pytest.raises(TypeError):
        item_duration_ms(SimplifiedShow(id="s", name="n"))


def test_page_default_items_are_independent():
    first = Page()
    second = Page()
    first.items.append(1)
    assert second.items == []
    assert first.items == [1]


def test_cursor_page_holds_items():
    page = CursorBasedPage(items=["a", "b"], after="b")
    assert page.items == ["a", "b"]
    assert page.after == "b"


def test_playback_context_defaults():
    ctx = CurrentlyPlaybackContext(device=Device(id="d", name="Desk"))
    assert ctx.item is None
    assert ctx.progress_ms is None
    assert ctx.repeat_state is RepeatState.OFF
    assert ctx.is_playing is False


def test_repeat_state_roundtrip_by_value():
    for state in RepeatState:
        assert RepeatState(state.value) is state


def test_dataclass_equality():
    assert _track(10) == _track(10)
    assert _track(10) != _track(11)


def test_device_payload_default_empty():
    assert DevicePayload().devices == []