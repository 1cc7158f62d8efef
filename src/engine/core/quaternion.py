"""
どこで: `engine.core.quaternion`
何を: `(x, y, z, w)` 四元数の純関数群（積・逆・ベクトル回転・なす角・球面補間・視線回転）。
なぜ: ホストの回転型を再実装せずに、変換ユーティリティ（`engine.core.transform_utils`）が
      必要とする最小限の回転演算だけを NumPy で提供するため。

座標系はホストに合わせて Y 上・+Z 前方。角度は度。
"""

from __future__ import annotations

import math

import numpy as np

from common.types import Quat, Vec3, VecLike

# 「同一回転」とみなす内積の閾値
_DOT_EQUAL_EPS = 1e-6


def identity() -> Quat:
    return (0.0, 0.0, 0.0, 1.0)


def _as_quat(q: VecLike) -> np.ndarray:
    arr = np.asarray(q, dtype=np.float64)
    if arr.shape != (4,):
        raise ValueError(f"quaternion must have 4 components (x, y, z, w), got shape {arr.shape}")
    return arr


def _to_quat(arr: np.ndarray) -> Quat:
    return (float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))


def _to_vec3(arr: np.ndarray) -> Vec3:
    return (float(arr[0]), float(arr[1]), float(arr[2]))


def normalize(q: VecLike) -> Quat:
    a = _as_quat(q)
    n = float(np.linalg.norm(a))
    if n == 0.0:
        return identity()
    return _to_quat(a / n)


def multiply(a: VecLike, b: VecLike) -> Quat:
    """ハミルトン積 `a * b`（`b` を先に適用）。"""
    ax, ay, az, aw = _as_quat(a)
    bx, by, bz, bw = _as_quat(b)
    return (
        float(aw * bx + ax * bw + ay * bz - az * by),
        float(aw * by - ax * bz + ay * bw + az * bx),
        float(aw * bz + ax * by - ay * bx + az * bw),
        float(aw * bw - ax * bx - ay * by - az * bz),
    )


def inverse(q: VecLike) -> Quat:
    a = _as_quat(q)
    n2 = float(np.dot(a, a))
    if n2 == 0.0:
        raise ValueError("cannot invert a zero quaternion")
    return _to_quat(np.array([-a[0], -a[1], -a[2], a[3]]) / n2)


def from_axis_angle(axis: VecLike, angle_deg: float) -> Quat:
    """軸 `axis` 回りに `angle_deg` 度回す回転。零ベクトル軸は単位回転。"""
    ax = np.asarray(axis, dtype=np.float64)
    n = float(np.linalg.norm(ax))
    if n == 0.0:
        return identity()
    half = math.radians(float(angle_deg)) * 0.5
    xyz = ax / n * math.sin(half)
    return (float(xyz[0]), float(xyz[1]), float(xyz[2]), math.cos(half))


def rotate_vector(q: VecLike, v: VecLike) -> Vec3:
    """回転 `q` をベクトル `v` に適用する。"""
    a = _as_quat(q)
    vec = np.asarray(v, dtype=np.float64)
    u = a[:3]
    t = 2.0 * np.cross(u, vec)
    return _to_vec3(vec + a[3] * t + np.cross(u, t))


def forward(q: VecLike) -> Vec3:
    """回転 `q` の前方向（+Z を回したもの）。"""
    return rotate_vector(q, (0.0, 0.0, 1.0))


def angle(a: VecLike, b: VecLike) -> float:
    """2 つの回転の差の角度（度、0–180）。"""
    qa = _as_quat(a)
    qb = _as_quat(b)
    d = min(abs(float(np.dot(qa, qb))), 1.0)
    if d > 1.0 - _DOT_EQUAL_EPS:
        return 0.0
    return math.degrees(2.0 * math.acos(d))


def slerp(a: VecLike, b: VecLike, t: float) -> Quat:
    """最短経路の球面線形補間。`t` は [0, 1] にクランプする。"""
    tt = 0.0 if t < 0.0 else 1.0 if t > 1.0 else float(t)
    qa = _as_quat(a)
    qb = _as_quat(b)
    d = float(np.dot(qa, qb))
    if d < 0.0:
        qb = -qb
        d = -d
    if d > 0.9995:
        # ほぼ同一: 線形補間して正規化
        return normalize(qa + (qb - qa) * tt)
    theta = math.acos(d)
    sin_theta = math.sin(theta)
    s0 = math.sin((1.0 - tt) * theta) / sin_theta
    s1 = math.sin(tt * theta) / sin_theta
    return normalize(s0 * qa + s1 * qb)


def _from_basis(x: np.ndarray, y: np.ndarray, z: np.ndarray) -> Quat:
    # 列ベクトル (x, y, z) の回転行列から四元数へ
    m00, m01, m02 = x[0], y[0], z[0]
    m10, m11, m12 = x[1], y[1], z[1]
    m20, m21, m22 = x[2], y[2], z[2]
    trace = m00 + m11 + m22
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        q = (
            (m21 - m12) / s,
            (m02 - m20) / s,
            (m10 - m01) / s,
            0.25 * s,
        )
    elif m00 > m11 and m00 > m22:
        s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
        q = (0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
    elif m11 > m22:
        s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
        q = ((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
    else:
        s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
        q = ((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)
    return normalize(q)


def look_rotation(forward_dir: VecLike, up: VecLike = (0.0, 1.0, 0.0)) -> Quat:
    """+Z を `forward_dir` に、+Y をできるだけ `up` に向ける回転。

    - `forward_dir` が零ベクトルなら単位回転。
    - `forward_dir` と `up` が平行なら別の上方向を選ぶ。
    """
    f = np.asarray(forward_dir, dtype=np.float64)
    n = float(np.linalg.norm(f))
    if n == 0.0:
        return identity()
    z = f / n
    u = np.asarray(up, dtype=np.float64)
    x = np.cross(u, z)
    if float(np.linalg.norm(x)) < 1e-9:
        alt = np.array([0.0, 0.0, 1.0]) if abs(z[2]) < 0.9 else np.array([1.0, 0.0, 0.0])
        x = np.cross(alt, z)
    x /= np.linalg.norm(x)
    y = np.cross(z, x)
    return _from_basis(x, y, z)


__all__ = [
    "identity",
    "normalize",
    "multiply",
    "inverse",
    "from_axis_angle",
    "rotate_vector",
    "forward",
    "angle",
    "slerp",
    "look_rotation",
]
