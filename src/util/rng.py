"""
どこで: `util.rng`
何を: NumPy の乱数ジェネレータ生成と、省略時に共有する既定ジェネレータの管理。
なぜ: シャッフル/ランダム選択に明示的な乱数源を渡せるようにし、テストで決定的にするため。
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from common import settings

logger = logging.getLogger(__name__)

# (設定の世代, ジェネレータ)
_default: Optional[tuple[int, np.random.Generator]] = None


def create_rng(seed: int | None = None) -> np.random.Generator:
    """`np.random.Generator` を生成する。

    `seed` が None の場合は設定 `RNG_SEED`（`XTB_RNG_SEED`）を使い、
    それも未設定なら OS エントロピーから初期化する。
    """
    if seed is None:
        seed = settings.get().RNG_SEED
    return np.random.default_rng(seed)


def default_rng() -> np.random.Generator:
    """`rng` 省略時に使う共有ジェネレータ。

    初回と `settings.reload_from_env()` の後に `create_rng()` から作り直し、それ以外は
    同じインスタンスを返す。呼び出しごとに状態が進むため、シード固定でも毎回同じ値には
    ならない（同じシードで作り直せば同じ列を再現する）。
    """
    global _default
    gen = settings.generation()
    if _default is None or _default[0] != gen:
        _default = (gen, create_rng())
        logger.debug("default rng created (seed=%s)", settings.get().RNG_SEED)
    return _default[1]


def reset_default_rng() -> None:
    """共有ジェネレータを破棄する。次の `default_rng()` で現在の設定から作り直す。"""
    global _default
    _default = None


__all__ = ["create_rng", "default_rng", "reset_default_rng"]
