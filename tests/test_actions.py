import pytest

from sptui.actions import IoEvent, IoEventKind


def test_event_keeps_kind_and_args():
    event = IoEvent(IoEventKind.SEEK, 1500)
    assert event.kind is IoEventKind.SEEK
    assert event.args == (1500,)


def test_event_without_args():
    event = IoEvent(IoEventKind.NEXT_TRACK)
    assert event.args == ()


def test_start_playback_takes_three_args():
    assert IoEventKind.START_PLAYBACK.arity == 3
    event = IoEvent(IoEventKind.START_PLAYBACK, None, None, None)
    assert event.args == (None, None, None)


@pytest.mark.parametrize(
    "kind, args",
    [
        (IoEventKind.SEEK, ()),
        (IoEventKind.NEXT_TRACK, (1,)),
        (IoEventKind.GET_ARTIST, ("id", "name")),
    ],
)
def test_wrong_number_of_args_is_rejected(kind, args):
    with pytest.raises(TypeError):
        IoEvent(kind, *args)


def test_equality_compares_kind_and_args():
    assert IoEvent(IoEventKind.CHANGE_VOLUME, 40) == IoEvent(IoEventKind.CHANGE_VOLUME, 40)
    assert (IoEvent(IoEventKind.CHANGE_VOLUME, 40) == IoEvent(IoEventKind.CHANGE_VOLUME, 41)) is False
    assert (IoEvent(IoEventKind.SHUFFLE, True) == IoEvent(IoEventKind.REPEAT, True)) is False


def test_repr_names_the_kind():
    assert repr(IoEvent(IoEventKind.SEEK, 0)) == "IoEvent.Seek(0)"