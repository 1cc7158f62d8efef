from __future__ import annotations

import math

import numpy as np
import pytest

from engine.core import quaternion as q
from engine.core.frame_clock import FrameClock
from engine.core.transform_utils import (
    ZenoFollower,
    copy_in_place,
    local_zeno_to,
    look_at,
    match,
    path_in_scene,
    snap_to_zero,
    xz_look_at,
    zeno_forward_to,
    zeno_to,
    zeno_to_transform,
)
from tests._utils.dummies import DummyComponent, DummyTransform

_Y = (0.0, 1.0, 0.0)


def test_snap_to_zero_resets_local_pose() -> None:
    t = DummyTransform(
        local_position=(1.0, 2.0, 3.0),
        local_rotation=q.from_axis_angle(_Y, 30.0),
        local_scale=(2.0, 2.0, 2.0),
    )
    snap_to_zero(t)
    assert t.local_position == (0.0, 0.0, 0.0)
    assert t.local_rotation == q.identity()
    assert t.local_scale == (1.0, 1.0, 1.0)


def test_path_in_scene() -> None:
    root = DummyTransform(name="root")
    hand = root.add_child(DummyTransform(name="arm")).add_child(DummyTransform(name="hand"))
    assert path_in_scene(hand) == "root/arm/hand"
    assert path_in_scene(root) == "root"


def test_match_copies_world_pose() -> None:
    src = DummyTransform()
    dst = DummyTransform(position=(1.0, 2.0, 3.0), rotation=q.from_axis_angle(_Y, 45.0))
    match(src, dst)
    assert src.position == (1.0, 2.0, 3.0)
    assert src.rotation == dst.rotation


class TestLookAt:
    def test_faces_target(self) -> None:
        t = DummyTransform(position=(1.0, 0.0, 0.0))
        look_at(t, (1.0, 0.0, 5.0))
        np.testing.assert_allclose(q.forward(t.rotation), (0.0, 0.0, 1.0), atol=1e-12)

    def test_same_position_is_noop(self) -> None:
        rot = q.from_axis_angle(_Y, 10.0)
        t = DummyTransform(position=(1.0, 2.0, 3.0), rotation=rot)
        look_at(t, (1.0, 2.0, 3.0))
        assert t.rotation == rot

    def test_xz_look_at_keeps_pitch_flat(self) -> None:
        t = DummyTransform(position=(0.0, 5.0, 0.0))
        xz_look_at(t, (3.0, 100.0, 0.0))
        np.testing.assert_allclose(q.forward(t.rotation), (1.0, 0.0, 0.0), atol=1e-12)

    def test_xz_look_at_transform_target(self) -> None:
        t = DummyTransform(position=(0.0, 0.0, 0.0))
        target = DummyTransform(position=(0.0, -4.0, -2.0))
        xz_look_at(t, target)
        np.testing.assert_allclose(q.forward(t.rotation), (0.0, 0.0, -1.0), atol=1e-12)


class TestZenoTo:
    def test_moves_fraction_of_distance(self) -> None:
        t = DummyTransform()
        done = zeno_to(t, (10.0, 0.0, 0.0), q.identity(), speed=1.0, dt=0.5)
        assert done is False
        assert t.position == (5.0, 0.0, 0.0)

    def test_rotation_slerps(self) -> None:
        t = DummyTransform()
        target_rot = q.from_axis_angle(_Y, 90.0)
        zeno_to(t, (0.0, 0.0, 0.0), target_rot, speed=1.0, dt=0.5)
        assert q.angle(t.rotation, target_rot) == pytest.approx(45.0)

    def test_converges_and_snaps(self) -> None:
        t = DummyTransform()
        target_pos = (10.0, -2.0, 3.0)
        target_rot = q.from_axis_angle(_Y, 90.0)
        for _ in range(100):
            if zeno_to(t, target_pos, target_rot, speed=1.0, dt=0.5):
                break
        else:
            pytest.fail("zeno_to did not converge")
        assert t.position == target_pos
        assert q.angle(t.rotation, target_rot) == 0.0

    def test_snap_distance_from_settings(self, settings_env) -> None:
        settings_env(XTB_ZENO_SNAP_DISTANCE="1.0")
        t = DummyTransform(position=(0.5, 0.0, 0.0))
        assert zeno_to(t, (0.0, 0.0, 0.0), q.identity(), speed=0.1, dt=0.1) is True
        assert t.position == (0.0, 0.0, 0.0)

    def test_transform_target(self) -> None:
        t = DummyTransform()
        target = DummyTransform(position=(0.0, 4.0, 0.0))
        zeno_to_transform(t, target, speed=2.0, dt=0.25)
        assert t.position == (0.0, 2.0, 0.0)

    def test_local_variant_leaves_world_untouched(self) -> None:
        t = DummyTransform(position=(9.0, 9.0, 9.0))
        local_zeno_to(t, (0.0, 0.0, 2.0), q.identity(), speed=1.0, dt=0.5)
        assert t.local_position == (0.0, 0.0, 1.0)
        assert t.position == (9.0, 9.0, 9.0)


class TestZenoForwardTo:
    def test_turns_partially(self) -> None:
        t = DummyTransform()
        done = zeno_forward_to(t, (1.0, 0.0, 0.0), speed=1.0, dt=0.5)
        assert done is False
        fwd = q.forward(t.rotation)
        expected = (math.sqrt(0.5), 0.0, math.sqrt(0.5))
        np.testing.assert_allclose(fwd, expected, atol=1e-9)

    def test_already_facing(self) -> None:
        t = DummyTransform()
        assert zeno_forward_to(t, (0.0, 0.0, 3.0), speed=1.0, dt=0.5) is True
        np.testing.assert_allclose(q.forward(t.rotation), (0.0, 0.0, 1.0), atol=1e-12)


def test_copy_in_place_matches_parent_and_pose() -> None:
    parent = DummyTransform(name="parent")
    src = DummyComponent(
        DummyTransform(
            name="src",
            parent=parent,
            position=(1.0, 2.0, 3.0),
            rotation=q.from_axis_angle(_Y, 20.0),
            local_scale=(2.0, 3.0, 4.0),
        )
    )

    def instantiate(c: DummyComponent) -> DummyComponent:
        return DummyComponent(DummyTransform(name=c.transform.name + "(clone)"))

    clone = copy_in_place(src, instantiate)
    assert clone is not src
    assert clone.transform.parent is parent
    assert clone.transform.position == (1.0, 2.0, 3.0)
    assert clone.transform.rotation == pytest.approx(src.transform.rotation)
    assert clone.transform.local_scale == (2.0, 3.0, 4.0)


def test_zeno_follower_finishes_in_frame_clock() -> None:
    source = DummyTransform(name="a")
    target = DummyTransform(name="b", position=(0.0, 0.0, 8.0))
    follower = ZenoFollower(source, target, speed=4.0)
    clock = FrameClock([follower])
    for _ in range(200):
        if not clock.active:
            break
        clock.tick(0.1)
    assert clock.active == ()
    assert follower.done is True
    assert source.position == (0.0, 0.0, 8.0)
