import pytest

from spaceship.arcade import ArcadeCabinet, ArcadeError


def joystick_program(paddle_x):
    """Draws a paddle and a ball, then reports the joystick value as score."""
    return [
        104, paddle_x, 104, 5, 104, 3,
        104, 4, 104, 3, 104, 4,
        3, 30, 3, 31,
        104, -1, 104, 0, 4, 31,
        99,
    ]


def test_score_segment_sets_score():
    frames = []
    cabinet = ArcadeCabinet([104, -1, 104, 0, 104, 42, 99], frames.append)
    assert cabinet.play() == 42
    assert cabinet.score == 42
    assert frames == []


def test_unknown_tile_is_rejected():
    cabinet = ArcadeCabinet([104, 0, 104, 0, 104, 7, 99], lambda text: None)
    with pytest.raises(ArcadeError):
        cabinet.play()


def test_score_segment_must_be_at_row_zero():
    cabinet = ArcadeCabinet([104, -1, 104, 3, 104, 5, 99], lambda text: None)
    with pytest.raises(ArcadeError):
        cabinet.play()


def test_halt_inside_tile_is_rejected():
    cabinet = ArcadeCabinet([104, 1, 99], lambda text: None)
    with pytest.raises(ArcadeError):
        cabinet.play()


@pytest.mark.parametrize("paddle_x, expected", [(10, -1), (0, 1)])
def test_joystick_moves_paddle_towards_ball(paddle_x, expected):
    frames = []
    cabinet = ArcadeCabinet(joystick_program(paddle_x), frames.append)
    assert cabinet.play() == expected
    assert len(frames) == 2


def test_frames_end_with_score_line():
    frames = []
    ArcadeCabinet(joystick_program(10), frames.append).play()
    endings = [frame.endswith("\n   SCORE   0\n") for frame in frames]
    assert endings == [True, True]


def test_default_display_prints_frames(capsys):
    ArcadeCabinet(joystick_program(0)).play()
    assert "SCORE   0" in capsys.readouterr().out