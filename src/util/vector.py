"""
どこで: `util.vector`
何を: 2D/3D ベクトルの小さな純関数群（軸の並べ替え、極座標⇔直交座標、成分クランプ、
      射影と線分上の最近点、補間、なす角）。
なぜ: ホスト固有のベクトル型に依存せず、tuple/list/np.ndarray を一様に受けて tuple を返すため。

規約:
- 入力は長さ 2 または 3 の数値列。内部計算は float64 の `np.ndarray`。
- 出力は `Vec2`/`Vec3`（float の tuple）。
- 角度は度（degree）。
"""

from __future__ import annotations

import logging
import math

import numpy as np

from common import settings
from common.types import Vec2, Vec3, VecLike

from .numeric import clamp, clamp_angle_degrees

logger = logging.getLogger(__name__)


def _as_array(v: VecLike, dims: tuple[int, ...] = (2, 3), name: str = "v") -> np.ndarray:
    arr = np.asarray(v, dtype=np.float64)
    if arr.ndim != 1 or arr.shape[0] not in dims:
        expected = " or ".join(str(d) for d in dims)
        raise ValueError(f"{name} must be a {expected}-component vector, got shape {arr.shape}")
    return arr


def _to_tuple(arr: np.ndarray) -> tuple[float, ...]:
    return tuple(float(x) for x in arr)


def _same_dims(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape != b.shape:
        raise ValueError(f"vector dimensions differ: {a.shape[0]} vs {b.shape[0]}")


# === 軸の並べ替え ===


def xzy(v: VecLike) -> Vec3:
    """3D は Y と Z を入れ替え、2D は `(x, 0, y)` を返す（平面座標を XZ 平面へ持ち上げる）。"""
    a = _as_array(v)
    if a.shape[0] == 3:
        return (float(a[0]), float(a[2]), float(a[1]))
    return (float(a[0]), 0.0, float(a[1]))


def xz(v: VecLike) -> Vec2:
    a = _as_array(v, (3,))
    return (float(a[0]), float(a[2]))


def x0z(v: VecLike) -> Vec3:
    """Y 成分を 0 にした 3D ベクトル。"""
    a = _as_array(v, (3,))
    return (float(a[0]), 0.0, float(a[2]))


def yx(v: VecLike) -> Vec2:
    """X と Y を入れ替えた 2D ベクトル（3D 入力の Z は捨てる）。"""
    a = _as_array(v)
    return (float(a[1]), float(a[0]))


# === 極座標 ===


def cartesian_to_polar(v: VecLike, clockwise_from_north: bool = False) -> Vec2:
    """直交座標の 2D ベクトルを `(angle_deg, magnitude)` に変換する。

    Parameters
    ----------
    v : VecLike
        2D ベクトル。
    clockwise_from_north : bool, default False
        True なら角度を北（+Y）から時計回りで返す。False なら東（+X）から反時計回り。

    Notes
    -----
    零ベクトルは `(0.0, 0.0)` を返す（`atan2(0, 0) == 0`）。
    """
    a = _as_array(v, (2,))
    x, y = float(a[0]), float(a[1])
    if clockwise_from_north:
        angle = math.degrees(math.atan2(x, y))
    else:
        angle = math.degrees(math.atan2(y, x))
    return (angle, math.hypot(x, y))


def polar_to_cartesian(p: VecLike, clockwise_from_north: bool = False) -> Vec2:
    """`(angle_deg, magnitude)` を直交座標へ戻す。`cartesian_to_polar` の逆変換。"""
    a = _as_array(p, (2,), name="p")
    rad = math.radians(float(a[0]))
    r = float(a[1])
    if clockwise_from_north:
        return (math.sin(rad) * r, math.cos(rad) * r)
    return (math.cos(rad) * r, math.sin(rad) * r)


# === クランプ ===


def vector_clamp(v: VecLike, lo: VecLike, hi: VecLike, is_angle: bool = False) -> tuple[float, ...]:
    """成分ごとに `clamp`（`is_angle` なら `clamp_angle_degrees`）を適用する。"""
    a = _as_array(v)
    mn = _as_array(lo, name="lo")
    mx = _as_array(hi, name="hi")
    _same_dims(a, mn)
    _same_dims(a, mx)
    fn = clamp_angle_degrees if is_angle else clamp
    return tuple(float(fn(float(x), float(l), float(h))) for x, l, h in zip(a, mn, mx))


# === 内積・射影 ===


def dot(a: VecLike, b: VecLike) -> float:
    va = _as_array(a, name="a")
    vb = _as_array(b, name="b")
    _same_dims(va, vb)
    return float(np.dot(va, vb))


def sqr_magnitude(v: VecLike) -> float:
    a = _as_array(v)
    return float(np.dot(a, a))


def magnitude(v: VecLike) -> float:
    return float(np.linalg.norm(_as_array(v)))


def _project(v: np.ndarray, n: np.ndarray) -> np.ndarray:
    denom = float(np.dot(n, n))
    if denom == 0.0:
        return np.zeros_like(v)
    return n * (float(np.dot(v, n)) / denom)


def project(v: VecLike, on_normal: VecLike) -> tuple[float, ...]:
    """`v` を `on_normal` 方向へ射影する。`on_normal` が零ベクトルなら零ベクトル。"""
    a = _as_array(v)
    n = _as_array(on_normal, name="on_normal")
    _same_dims(a, n)
    return _to_tuple(_project(a, n))


def closest_point_on_segment(
    point: VecLike,
    start: VecLike,
    end: VecLike,
    clamp: bool = True,
) -> tuple[float, ...]:
    """`start`/`end` を通る直線上で `point` に最も近い点を返す。

    Parameters
    ----------
    point, start, end : VecLike
        同次元（2D/3D）の点。
    clamp : bool, default True
        True なら射影点が線分外に出たとき近い端点へ寄せる。

    Notes
    -----
    `start == end`（退化した線分）では射影が定義できないため `start` を返す。
    """
    p = _as_array(point, name="point")
    s = _as_array(start, name="start")
    e = _as_array(end, name="end")
    _same_dims(p, s)
    _same_dims(p, e)

    direction = e - s
    if float(np.dot(direction, direction)) == 0.0:
        logger.debug("closest_point_on_segment: degenerate segment at %s", _to_tuple(s))
        return _to_tuple(s)

    v = s + _project(p - s, direction)
    if clamp:
        if float(np.dot(s - v, s - e)) < 0.0:
            # start より手前
            v = s
        elif float(np.dot(e - v, e - s)) < 0.0:
            # end より先
            v = e
    return _to_tuple(v)


# === 補間・角度 ===


def lerp(a: VecLike, b: VecLike, t: float) -> tuple[float, ...]:
    """線形補間。`t` は [0, 1] にクランプする。"""
    va = _as_array(a, name="a")
    vb = _as_array(b, name="b")
    _same_dims(va, vb)
    tt = clamp(float(t), 0.0, 1.0)
    return _to_tuple(va + (vb - va) * tt)


def _perpendicular(u: np.ndarray) -> np.ndarray:
    """単位ベクトル `u` に直交する単位ベクトル（2D/3D）。"""
    if u.shape[0] == 2:
        return np.array([-u[1], u[0]])
    axis = np.array([1.0, 0.0, 0.0]) if abs(u[0]) < 0.9 else np.array([0.0, 1.0, 0.0])
    k = np.cross(u, axis)
    k /= np.linalg.norm(k)
    return np.cross(k, u)


def slerp(a: VecLike, b: VecLike, t: float) -> tuple[float, ...]:
    """球面線形補間。方向は角度で、長さは線形に補間する。`t` は [0, 1] にクランプ。

    - どちらかが零ベクトルなら線形補間にフォールバック。
    - 真逆を向く場合は任意の直交軸回りに回す。
    """
    va = _as_array(a, name="a")
    vb = _as_array(b, name="b")
    _same_dims(va, vb)
    tt = clamp(float(t), 0.0, 1.0)

    la = float(np.linalg.norm(va))
    lb = float(np.linalg.norm(vb))
    eps = settings.get().ANGLE_EPS
    if la * la <= eps or lb * lb <= eps:
        return lerp(va, vb, tt)

    ua = va / la
    ub = vb / lb
    cos_t = float(np.clip(np.dot(ua, ub), -1.0, 1.0))
    theta = math.acos(cos_t)
    sin_t = math.sin(theta)

    if sin_t < 1e-6:
        if cos_t > 0.0:
            # ほぼ同方向
            direction = ua + (ub - ua) * tt
            direction /= np.linalg.norm(direction)
        else:
            phi = theta * tt
            direction = ua * math.cos(phi) + _perpendicular(ua) * math.sin(phi)
    else:
        direction = (math.sin((1.0 - tt) * theta) * ua + math.sin(tt * theta) * ub) / sin_t

    length = la + (lb - la) * tt
    return _to_tuple(direction * length)


def angle_between(a: VecLike, b: VecLike) -> float:
    """2 ベクトルのなす角（度、0–180）。どちらかが零ベクトルなら 0。"""
    va = _as_array(a, name="a")
    vb = _as_array(b, name="b")
    _same_dims(va, vb)
    denom = math.sqrt(float(np.dot(va, va)) * float(np.dot(vb, vb)))
    if denom < settings.get().ANGLE_EPS:
        return 0.0
    cos_t = clamp(float(np.dot(va, vb)) / denom, -1.0, 1.0)
    return math.degrees(math.acos(cos_t))


__all__ = [
    "xzy",
    "xz",
    "x0z",
    "yx",
    "cartesian_to_polar",
    "polar_to_cartesian",
    "vector_clamp",
    "dot",
    "sqr_magnitude",
    "magnitude",
    "project",
    "closest_point_on_segment",
    "lerp",
    "slerp",
    "angle_between",
]
