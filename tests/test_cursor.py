from chainify import RunState
from chainify._internal.cursor import Cursor


def test_cursor_moves_forward_only() -> None:
    cursor = Cursor(args=(1,), callbacks=("a", "b"))
    assert cursor.state is RunState.IDLE
    assert cursor.halted is True

    assert cursor.advance() == "a"
    assert cursor.state is RunState.ADVANCING
    assert cursor.advance() == "b"
    assert cursor.exhausted is True
    assert cursor.halted is False

    assert cursor.advance() is None
    assert cursor.position == len(cursor.callbacks)


def test_empty_cursor_is_exhausted() -> None:
    cursor: Cursor[str] = Cursor(args=(), callbacks=())
    assert cursor.exhausted is True
    assert cursor.advance() is None
    assert cursor.state is RunState.IDLE
