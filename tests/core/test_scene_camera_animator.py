from __future__ import annotations

import numpy as np
import pytest

from engine.core.animator import has_parameter
from engine.core.camera import perspective_off_center, set_vanishing_point
from engine.core.scene import get_or_add_component, set_layer_recursively
from tests._utils.dummies import (
    DummyAnimator,
    DummyCamera,
    DummyParameter,
    DummySceneNode,
)


class _Collider:
    pass


def test_set_layer_recursively_reaches_all_descendants() -> None:
    leaf = DummySceneNode()
    mid = DummySceneNode(children=[leaf, DummySceneNode()])
    root = DummySceneNode(children=[mid])
    set_layer_recursively(root, 5)
    assert [n.layer for n in (root, mid, leaf, mid.children[1])] == [5, 5, 5, 5]


def test_set_layer_recursively_deep_chain() -> None:
    root = DummySceneNode()
    cur = root
    for _ in range(5000):
        child = DummySceneNode()
        cur.children.append(child)
        cur = child
    set_layer_recursively(root, 3)
    assert cur.layer == 3


def test_get_or_add_component() -> None:
    node = DummySceneNode()
    first = get_or_add_component(node, _Collider)
    second = get_or_add_component(node, _Collider)
    assert isinstance(first, _Collider)
    assert first is second
    assert node.add_calls == 1


class TestCamera:
    def test_symmetric_frustum(self) -> None:
        m = perspective_off_center(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
        assert m.shape == (4, 4)
        assert m[0, 0] == pytest.approx(1.0)
        assert m[1, 1] == pytest.approx(1.0)
        assert m[0, 2] == 0.0
        assert m[2, 2] == pytest.approx(-11.0 / 9.0)
        assert m[2, 3] == pytest.approx(-20.0 / 9.0)
        assert m[3, 2] == -1.0

    def test_degenerate_frustum(self) -> None:
        with pytest.raises(ValueError):
            perspective_off_center(1.0, 1.0, -1.0, 1.0, 1.0, 10.0)

    def test_vanishing_point_zero_offset_keeps_matrix(self) -> None:
        m = perspective_off_center(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
        cam = DummyCamera(projection_matrix=m.copy())
        set_vanishing_point(cam, (0.0, 0.0))
        np.testing.assert_allclose(cam.projection_matrix, m, atol=1e-12)

    def test_vanishing_point_shifts_center(self) -> None:
        m = perspective_off_center(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
        cam = DummyCamera(projection_matrix=m.copy())
        set_vanishing_point(cam, (0.5, 0.0))
        assert cam.projection_matrix[0, 2] == pytest.approx(-0.5)
        assert cam.projection_matrix[0, 0] == pytest.approx(1.0)
        assert cam.projection_matrix[1, 2] == pytest.approx(0.0)

        scalar = DummyCamera(projection_matrix=m.copy())
        set_vanishing_point(scalar, 0.5)
        np.testing.assert_allclose(scalar.projection_matrix, cam.projection_matrix)

    def test_invalid_projection(self) -> None:
        with pytest.raises(ValueError):
            set_vanishing_point(DummyCamera(projection_matrix=np.zeros((4, 4))), (0.1, 0.1))
        with pytest.raises(ValueError):
            set_vanishing_point(DummyCamera(projection_matrix=np.eye(3)), (0.1, 0.1))


class TestHasParameter:
    @pytest.fixture()
    def animator(self) -> DummyAnimator:
        return DummyAnimator(
            parameters=[DummyParameter("Speed", 101), DummyParameter("Jump", 202)]
        )

    def test_by_name(self, animator: DummyAnimator) -> None:
        assert has_parameter(animator, "Jump")
        assert not has_parameter(animator, "jump")

    def test_by_hash(self, animator: DummyAnimator) -> None:
        assert has_parameter(animator, 101)
        assert not has_parameter(animator, 303)

    @pytest.mark.parametrize("key", [1.5, True, None])
    def test_rejects_other_key_types(self, animator: DummyAnimator, key: object) -> None:
        with pytest.raises(TypeError):
            has_parameter(animator, key)  # type: ignore[arg-type]
