"""
どこで: `engine.core.camera`
何を: オフセンター透視投影行列の生成と、カメラの消失点移動。
なぜ: 投影行列の書き換えを NumPy の 4x4 行列として純関数化し、ホストのカメラには結果だけを戻すため。

行列は `m[row, col]` の行優先（列ベクトルに左から掛ける OpenGL 流の規約）。
"""

from __future__ import annotations

import logging

import numpy as np

from common.types import VecLike

from .host import CameraLike

logger = logging.getLogger(__name__)


def perspective_off_center(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
) -> np.ndarray:
    """near 平面上の矩形 `[left, right] x [bottom, top]` を視錐台とする透視投影行列。

    Raises
    ------
    ValueError
        幅・高さ・奥行きのいずれかが 0 の場合。
    """
    if right == left or top == bottom or far == near:
        raise ValueError(
            "degenerate frustum: "
            f"left={left}, right={right}, bottom={bottom}, top={top}, near={near}, far={far}"
        )
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = 2.0 * near / (right - left)
    m[0, 2] = (right + left) / (right - left)
    m[1, 1] = 2.0 * near / (top - bottom)
    m[1, 2] = (top + bottom) / (top - bottom)
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def set_vanishing_point(cam: CameraLike, offset: VecLike | float, y: float = 0.0) -> None:
    """カメラの消失点を `offset`（near 平面上の距離）だけずらす。

    `offset` には `(x, y)` か、x のみの数値（このとき `y` 引数を使う）を渡す。
    現在の投影行列の `[0, 0]`/`[1, 1]` から視錐台の幅と高さを求め、中心をずらした
    オフセンター行列で置き換える。
    """
    if isinstance(offset, (int, float)):
        ox, oy = float(offset), float(y)
    else:
        arr = np.asarray(offset, dtype=np.float64)
        if arr.shape != (2,):
            raise ValueError(f"offset must be a 2-component vector, got shape {arr.shape}")
        ox, oy = float(arr[0]), float(arr[1])

    m = np.asarray(cam.projection_matrix, dtype=np.float64)
    if m.shape != (4, 4):
        raise ValueError(f"projection_matrix must be 4x4, got shape {m.shape}")
    if m[0, 0] == 0.0 or m[1, 1] == 0.0:
        raise ValueError("projection_matrix has a zero scale term; cannot derive frustum size")

    near = float(cam.near_clip_plane)
    w = 2.0 * near / m[0, 0]
    h = 2.0 * near / m[1, 1]

    left = -w / 2.0 - ox
    right = left + w
    bottom = -h / 2.0 - oy
    top = bottom + h

    logger.debug("set_vanishing_point: offset=(%g, %g) frustum=(%g, %g)", ox, oy, w, h)
    cam.projection_matrix = perspective_off_center(
        left, right, bottom, top, near, float(cam.far_clip_plane)
    )


__all__ = ["perspective_off_center", "set_vanishing_point"]
