"""
どこで: `engine.core` の変換ユーティリティ。
何を: ホストの変換ノード（`TransformLike`）に対する薄い操作群と、目標へ指数的に寄せる
      Zeno 追従（位置は線形補間、回転は球面補間、十分近ければスナップ）。
なぜ: フレーム時間 `dt` を明示引数にし、ホストのグローバル時刻に依存せずテスト可能にするため。
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from common import settings
from common.types import Quat, Vec3, VecLike
from util import vector

from . import quaternion
from .host import ComponentLike, TransformLike

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=ComponentLike)

_UP: Vec3 = (0.0, 1.0, 0.0)


def _vec3(v: VecLike) -> Vec3:
    return (float(v[0]), float(v[1]), float(v[2]))


def snap_to_zero(t: TransformLike) -> None:
    """ローカル位置を 0、ローカルスケールを 1、ローカル回転を単位回転にする。"""
    t.local_position = (0.0, 0.0, 0.0)
    t.local_scale = (1.0, 1.0, 1.0)
    t.local_rotation = quaternion.identity()


def look_at(t: TransformLike, target: VecLike, up: VecLike = _UP) -> None:
    """前方向（+Z）を `target` へ向ける。`target` が現在位置と一致する場合は何もしない。"""
    direction = tuple(float(a) - float(b) for a, b in zip(target, t.position))
    if vector.sqr_magnitude(direction) == 0.0:
        return
    t.rotation = quaternion.look_rotation(direction, up)


def xz_look_at(t: TransformLike, target: VecLike | TransformLike) -> None:
    """XZ 平面上で `target` を向く（自分の高さを使い、ピッチを水平に保つ）。"""
    point = target.position if hasattr(target, "position") else target  # type: ignore[union-attr]
    tx, _ty, tz = _vec3(point)  # type: ignore[arg-type]
    look_at(t, (tx, float(t.position[1]), tz))


def path_in_scene(t: TransformLike) -> str:
    """ルートからのパス（`root/child/name`）。"""
    names = [t.name]
    cur = t.parent
    while cur is not None:
        names.append(cur.name)
        cur = cur.parent
    return "/".join(reversed(names))


def match(t: TransformLike, target: TransformLike) -> None:
    """ワールド位置と回転を `target` に合わせる。"""
    t.position = _vec3(target.position)
    t.rotation = tuple(float(c) for c in target.rotation)  # type: ignore[assignment]


def _zeno_step(
    pos: VecLike,
    rot: Quat,
    target_pos: VecLike,
    target_rot: Quat,
    speed: float,
    dt: float,
) -> tuple[Vec3, Quat, bool, bool]:
    cfg = settings.get()
    step = speed * dt

    diff = tuple(float(a) - float(b) for a, b in zip(pos, target_pos))
    if vector.sqr_magnitude(diff) < cfg.ZENO_SNAP_DISTANCE * cfg.ZENO_SNAP_DISTANCE:
        new_pos = _vec3(target_pos)
        pos_match = True
    else:
        new_pos = _vec3(vector.lerp(pos, target_pos, step))
        pos_match = False

    if quaternion.angle(rot, target_rot) < cfg.ZENO_SNAP_ANGLE_DEG:
        new_rot = quaternion.normalize(target_rot)
        rot_match = True
    else:
        new_rot = quaternion.slerp(rot, target_rot, step)
        rot_match = False

    return new_pos, new_rot, pos_match, rot_match


def zeno_to(
    t: TransformLike,
    target_pos: VecLike,
    target_rot: Quat,
    speed: float,
    dt: float,
) -> bool:
    """ワールド位置/回転を目標へ `speed * dt` の割合だけ寄せる。

    位置は距離が `ZENO_SNAP_DISTANCE` 未満、回転は角度差が `ZENO_SNAP_ANGLE_DEG` 未満なら
    目標値にスナップする。

    Returns
    -------
    bool
        位置と回転の両方が目標に一致したら True。
    """
    new_pos, new_rot, pos_match, rot_match = _zeno_step(
        t.position, t.rotation, target_pos, target_rot, speed, dt
    )
    t.position = new_pos
    t.rotation = new_rot
    return pos_match and rot_match


def zeno_to_transform(t: TransformLike, target: TransformLike, speed: float, dt: float) -> bool:
    """`target` のワールド位置/回転へ寄せる（`zeno_to` の変換ノード版）。"""
    return zeno_to(t, target.position, target.rotation, speed, dt)


def local_zeno_to(
    t: TransformLike,
    target_pos: VecLike,
    target_rot: Quat,
    speed: float,
    dt: float,
) -> bool:
    """`zeno_to` のローカル座標版。"""
    new_pos, new_rot, pos_match, rot_match = _zeno_step(
        t.local_position, t.local_rotation, target_pos, target_rot, speed, dt
    )
    t.local_position = new_pos
    t.local_rotation = new_rot
    return pos_match and rot_match


def zeno_forward_to(t: TransformLike, target_forward: VecLike, speed: float, dt: float) -> bool:
    """前方向を `target_forward` へ球面補間で寄せる。閾値未満ならスナップして True。"""
    current = quaternion.forward(t.rotation)
    if vector.angle_between(current, target_forward) < settings.get().ZENO_SNAP_ANGLE_DEG:
        t.rotation = quaternion.look_rotation(target_forward)
        return True
    t.rotation = quaternion.look_rotation(vector.slerp(current, target_forward, speed * dt))
    return False


def copy_in_place(source: C, instantiate: Callable[[C], C]) -> C:
    """`instantiate`（ホストの複製関数）で複製し、親・ワールド姿勢・ローカルスケールを揃える。"""
    clone = instantiate(source)
    src = source.transform
    dst = clone.transform
    dst.parent = src.parent
    dst.position = _vec3(src.position)
    dst.rotation = tuple(float(c) for c in src.rotation)  # type: ignore[assignment]
    dst.local_scale = _vec3(src.local_scale)
    return clone


class ZenoFollower:
    """毎フレーム `zeno_to_transform` を適用する `Tickable`。一致したら完了を返す。"""

    def __init__(self, source: TransformLike, target: TransformLike, speed: float):
        self.source = source
        self.target = target
        self.speed = float(speed)
        self.done = False

    def tick(self, dt: float) -> Optional[bool]:
        if self.done:
            return True
        self.done = zeno_to_transform(self.source, self.target, self.speed, dt)
        if self.done:
            logger.debug("ZenoFollower: %s reached %s", self.source.name, self.target.name)
        return self.done

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"ZenoFollower({self.source.name!r} -> {self.target.name!r}, speed={self.speed})"


__all__ = [
    "snap_to_zero",
    "look_at",
    "xz_look_at",
    "path_in_scene",
    "match",
    "zeno_to",
    "zeno_to_transform",
    "local_zeno_to",
    "zeno_forward_to",
    "copy_in_place",
    "ZenoFollower",
]
