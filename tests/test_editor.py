import pytest

from slimage.editor import (
    DEFAULT_COLOR,
    DEFAULT_RADIUS,
    EditorAction,
    EditorState,
)
from slimage.image import WHITE, create_empty_image, read_image


@pytest.fixture
def state(tmp_path):
    image = create_empty_image(32, 24)
    image.file_name = str(tmp_path / "edit.slmg")
    return EditorState(image)


def test_defaults(state):
    assert state.color == DEFAULT_COLOR == 0xFF000000
    assert state.radius == DEFAULT_RADIUS == 10


@pytest.mark.parametrize(
    "up, down, step",
    [(79, 83, 0x00050000), (80, 84, 0x00000500), (81, 85, 0x00000005)],
)
def test_color_keys_step_channels(state, up, down, step):
    start = state.color
    assert state.handle_key(up) is EditorAction.COLOR
    assert state.color - start == step
    assert state.handle_key(down) is EditorAction.COLOR
    assert state.color == start


def test_color_wraps_around(state):
    state.color = 0xFFFFFFFF
    state.handle_key(81)
    assert state.color == 4


def test_color_key_prints_hex(state, capsys):
    state.handle_key(79)
    out = capsys.readouterr().out.splitlines()
    assert out == [f"Color: {state.color:X}", "79"]


def test_radius_keys(state):
    assert state.handle_key(21) is EditorAction.RADIUS
    assert state.radius == DEFAULT_RADIUS + 1
    assert state.handle_key(20) is EditorAction.RADIUS
    assert state.handle_key(20) is EditorAction.RADIUS
    assert state.radius == DEFAULT_RADIUS - 1


def test_radius_wraps_like_a_byte(state):
    state.radius = 0
    state.handle_key(20)
    assert state.radius == 255


def test_save_key_writes_image(state, tmp_path):
    state.paint(5, 5)
    action = state.handle_key(39)
    assert action is EditorAction.SAVE
    assert not action.quits
    saved = read_image(state.image.file_name)
    assert saved.data == state.image.data
    assert (saved.x_size, saved.y_size) == (32, 24)


def test_q_saves_and_quits(state):
    action = state.handle_key(24)
    assert action is EditorAction.SAVE_AND_QUIT
    assert action.quits
    assert read_image(state.image.file_name).data == state.image.data


def test_escape_quits_without_saving(state, tmp_path):
    action = state.handle_key(9)
    assert action is EditorAction.QUIT
    assert action.quits
    assert not (tmp_path / "edit.slmg").exists()


def test_unknown_key_does_nothing(state):
    color, radius = state.color, state.radius
    assert state.handle_key(38) is EditorAction.NONE
    assert (state.color, state.radius) == (color, radius)


def test_paint_circle_within_radius(state):
    state.radius = 3
    painted = state.paint(10, 10)
    img = state.image
    hits = [
        (i % img.x_size, i // img.x_size)
        for i, p in enumerate(img.data)
        if p == state.color
    ]
    assert len(hits) == painted
    assert (10, 10) in hits
    assert (13, 10) in hits
    assert (10, 7) in hits
    assert all((x - 10) ** 2 + (y - 10) ** 2 <= 9 for x, y in hits)
    assert img.data[10 * img.x_size + 14] == WHITE
    assert img.data[13 * img.x_size + 13] == WHITE


def test_paint_zero_radius_single_pixel(state):
    state.radius = 0
    assert state.paint(4, 2) == 1
    assert state.image.data[2 * 32 + 4] == state.color
    assert state.image.data.count(state.color) == 1


def test_paint_is_clipped_at_edges(state):
    state.radius = 5
    painted = state.paint(0, 0)
    img = state.image
    assert len(img.data) == img.size
    assert img.data.count(state.color) == painted
    assert img.data[0] == state.color
    # Nothing wraps onto the far end of a row.
    assert all(img.data[y * img.x_size + img.x_size - 1] == WHITE for y in range(img.y_size))


def test_paint_symmetric(state):
    state.radius = 4
    state.paint(15, 12)
    img = state.image
    for dx in range(-5, 6):
        for dy in range(-5, 6):
            a = img.data[(12 + dy) * img.x_size + 15 + dx]
            b = img.data[(12 - dy) * img.x_size + 15 - dx]
            assert a == b