import pytest

from spacerocks.geometry import Bounds
from spacerocks.shot import Shot


class RecordingImages:
    def __init__(self):
        self.calls = []

    def draw(self, surface, set_num, frame, x, y):
        self.calls.append((surface, set_num, frame, x, y))


def test_new_shot_is_not_in_air():
    shot = Shot(Bounds())
    assert shot.in_air is False


def test_launch_sets_state():
    shot = Shot(Bounds())
    shot.launch(100.0, 200.0, 3.0, -4.0)
    assert shot.in_air is True
    assert (shot.x, shot.y, shot.vx, shot.vy) == (100.0, 200.0, 3.0, -4.0)


def test_move_adds_velocity():
    shot = Shot(Bounds())
    shot.launch(100.0, 200.0, 3.0, -4.0)
    shot.move()
    assert shot.x == pytest.approx(100.0 + 3.0)
    assert shot.y == pytest.approx(200.0 - 4.0)
    assert shot.in_air is True


@pytest.mark.parametrize(
    "x, y, vx, vy",
    [(795.0, 300.0, 10.0, 0.0), (5.0, 300.0, -10.0, 0.0),
     (400.0, 595.0, 0.0, 10.0), (400.0, 5.0, 0.0, -10.0)],
)
def test_leaving_the_field_lands_shot(x, y, vx, vy):
    shot = Shot(Bounds(0, 0, 800, 600))
    shot.launch(x, y, vx, vy)
    shot.move()
    assert shot.in_air is False


def test_shot_on_edge_stays_in_air():
    shot = Shot(Bounds(0, 0, 800, 600))
    shot.launch(790.0, 590.0, 10.0, 10.0)
    shot.move()
    assert shot.in_air is True


def test_draw_uses_own_cell():
    images = RecordingImages()
    shot = Shot(Bounds(), set_num=1, cell_num=2)
    shot.launch(10.0, 20.0, 0.0, 0.0)
    target = object()
    shot.draw(target, images)
    assert images.calls == [(target, 1, 2, 10.0, 20.0)]