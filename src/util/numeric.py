"""
どこで: `util.numeric`
何を: スカラー（int/float）の範囲ユーティリティ（二乗、下限/上限、クランプ、開区間判定、角度クランプ）。
なぜ: ベクトル系（`util.vector`）や変換系から同一の境界規則で再利用するため。

命名について:
    旧来の拡張メソッドでは `Min(n, m)` が「大きい方」、`Max(n, m)` が「小さい方」を返していた
    （n に下限 m / 上限 m を課す意味）。挙動はそのまま保持し、名前だけ `at_least`/`at_most` とした。
"""

from __future__ import annotations

import math

from common.types import Number


def squared(n: Number) -> Number:
    return n * n


def at_least(n: Number, m: Number) -> Number:
    """`n` と `m` の大きい方を返す（`n` に下限 `m` を課す）。"""
    return n if n > m else m


def at_most(n: Number, m: Number) -> Number:
    """`n` と `m` の小さい方を返す（`n` に上限 `m` を課す）。"""
    return n if n < m else m


def clamp(n: Number, lo: Number, hi: Number) -> Number:
    """`n` を `[lo, hi]` に収める。

    `lo <= hi` の検証は行わない。逆転している場合は下限判定が先に勝つ。

    Examples
    --------
    >>> clamp(5, 0, 10)
    5
    >>> clamp(-1.0, 0.0, 10.0)
    0.0
    >>> clamp(15, 0, 10)
    10
    """
    return lo if n < lo else hi if n > hi else n


def is_strictly_between(n: Number, a: Number, b: Number) -> bool:
    """`n` が `a` と `b` の間（両端を含まない）にあるか。`a`/`b` の大小は問わない。"""
    if a < b:
        return a < n < b
    return b < n < a


# これを超える |n| は先に剰余で 1 周未満へ縮めてから巻き戻す
_ANGLE_FMOD_THRESHOLD = 360.0 * 1e6


def clamp_angle_degrees(n: float, lo: float, hi: float) -> float:
    """角度 `n`（度）を [-180, 180] へ巻き戻してから `[lo, hi]` にクランプする。

    巻き戻しは 360 の加減算を繰り返す逐次方式。範囲内の入力はビット単位でそのまま
    保たれ、境界値 ±180 も変化しない。`|n|` が `_ANGLE_FMOD_THRESHOLD` を超える場合だけ
    先に `math.fmod(n, 360)` で縮める（大きな値では `n - 360 == n` となり逐次方式が
    終わらないため）。反復回数は高々 1e6 程度に収まる。

    Raises
    ------
    ValueError
        `n` が NaN/Inf の場合。
    """
    if not math.isfinite(n):
        raise ValueError(f"angle must be finite, got {n}")
    if abs(n) > _ANGLE_FMOD_THRESHOLD:
        n = math.fmod(n, 360.0)
    while n > 180:
        n -= 360
    while n < -180:
        n += 360
    return clamp(n, lo, hi)


__all__ = [
    "squared",
    "at_least",
    "at_most",
    "clamp",
    "is_strictly_between",
    "clamp_angle_degrees",
]
