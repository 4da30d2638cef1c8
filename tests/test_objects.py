import random

import pytest

from gorobot.managers import ComponentManager, RenderManager
from gorobot.objects import ObjectMover, SimObject, World
from gorobot.render import ObjectRenderer, WorldRenderer


def make_object(angle, x=50.0, y=50.0):
    obj = SimObject(0, random.Random(0))
    obj.angle = angle
    obj.x = x
    obj.y = y
    return obj


def test_sim_object_defaults():
    obj = SimObject(4, random.Random(3))
    assert (obj.x, obj.y, obj.radius) == (1, 2, 10)
    assert obj.width == obj.radius * 2
    assert obj.height == obj.radius * 2
    assert obj.speed == 1.0
    assert obj.velocity == 0.0
    assert obj.who_am_i == 4
    assert 0 <= obj.angle < 360


def test_sim_object_angle_is_reproducible_with_seed():
    assert SimObject(0, random.Random(7)).angle == SimObject(1, random.Random(7)).angle


def test_attach_and_detach():
    renders, components = RenderManager(), ComponentManager()
    obj = SimObject(0, random.Random(1))
    obj.attach(renders, components, (100, 100))
    assert list(renders) == [obj.renderer]
    assert list(components) == [obj.mover]
    assert isinstance(obj.renderer, ObjectRenderer)
    assert obj.mover.parent is obj
    obj.detach(renders, components)
    assert len(renders) == 0
    assert len(components) == 0
    assert obj.renderer is None and obj.mover is None


def test_mover_moves_along_heading():
    obj = make_object(0)
    mover = ObjectMover(obj, (100, 100))
    mover.update(0.5)
    assert obj.velocity == 30
    assert obj.x == pytest.approx(50.0)
    assert obj.y == pytest.approx(50.0 + 30 * 0.5)
    assert mover.next_y_move == pytest.approx(obj.y)


def test_mover_zero_delta_keeps_position():
    obj = make_object(123)
    ObjectMover(obj, (100, 100)).update(0.0)
    assert (obj.x, obj.y) == pytest.approx((50.0, 50.0))
    assert obj.angle == 123


def test_mover_bounces_off_left_edge():
    obj = make_object(90, x=1.0)
    ObjectMover(obj, (100, 100)).update(1.0)
    assert obj.x == obj.radius
    assert obj.angle == -90


def test_mover_bounces_off_right_edge():
    obj = make_object(-90, x=99.0)
    ObjectMover(obj, (100, 100)).update(1.0)
    assert obj.x == 100 - obj.radius
    assert obj.angle == 90


def test_mover_bounces_off_top_edge():
    obj = make_object(0, y=95.0)
    ObjectMover(obj, (100, 100)).update(1.0)
    assert obj.y == 100 - obj.radius
    assert obj.angle == -180


def test_mover_bounces_off_bottom_edge():
    obj = make_object(180, y=2.0)
    ObjectMover(obj, (100, 100)).update(1.0)
    assert obj.y == 0
    assert obj.angle == 360


def test_mover_keeps_object_inside_bounds():
    obj = make_object(37)
    mover = ObjectMover(obj, (80, 60))
    for _ in range(500):
        mover.update(0.1)
        assert 0 <= obj.x <= 80
        assert 0 <= obj.y <= 60


def test_world_attach_detach():
    renders = RenderManager()
    world = World(40, 30)
    world.attach(renders)
    (renderer,) = list(renders)
    assert isinstance(renderer, WorldRenderer)
    assert (renderer.width, renderer.height) == (40, 30)
    world.detach(renders)
    assert len(renders) == 0