"""
どこで: `common.settings`
何を: ツールボックスの調整値を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` やマジックナンバーの散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

読み込み順（後勝ち）:
1) `_Settings` の既定値
2) 構成ファイル（`util.utils.load_config()` の `toolbox:` セクション）
3) 環境変数 `XTB_*`
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from .env import env_float, env_int

logger = logging.getLogger(__name__)

CONFIG_SECTION = "toolbox"


@dataclass
class _Settings:
    # Zeno 系（ホストの変換を目標へ寄せる）のスナップ閾値
    ZENO_SNAP_DISTANCE: float = 0.01
    ZENO_SNAP_ANGLE_DEG: float = 0.5

    # 角度・方向計算での零ベクトル判定
    ANGLE_EPS: float = 1e-15

    # 乱数（None は OS エントロピー）
    RNG_SEED: int | None = None


_settings = _Settings()
_generation = 0


def _apply_mapping(target: _Settings, values: Mapping[str, Any]) -> None:
    """構成ファイル由来の値を型に合わせて適用（不正値は無視）。"""
    known = {f.name.lower(): f.name for f in fields(_Settings)}
    for key, raw in values.items():
        name = known.get(str(key).lower())
        if name is None:
            logger.debug("unknown toolbox setting ignored: %s", key)
            continue
        try:
            if name == "RNG_SEED":
                setattr(target, name, None if raw is None else int(raw))
            else:
                val = float(raw)
                if not math.isfinite(val) or val < 0.0:
                    raise ValueError(f"{name} must be a finite non-negative number")
                setattr(target, name, val)
        except (TypeError, ValueError) as exc:
            logger.warning("invalid toolbox setting %s=%r: %s", key, raw, exc)


def reload_from_env() -> None:
    """構成ファイルと環境変数から設定を再読込。

    - 構成ファイルは fail-soft（存在しない/不正なら既定値のまま）。
    - float は `env_float`、int は `env_int` を使用し、負値は 0 に丸める。
    """
    global _generation

    # 循環 import を避けるため関数内で読み込む
    from util.utils import load_config

    fresh = _Settings()
    section = load_config().get(CONFIG_SECTION)
    if isinstance(section, Mapping):
        _apply_mapping(fresh, section)

    fresh.ZENO_SNAP_DISTANCE = env_float(
        "XTB_ZENO_SNAP_DISTANCE", fresh.ZENO_SNAP_DISTANCE, min_value=0.0
    ) or 0.0
    fresh.ZENO_SNAP_ANGLE_DEG = env_float(
        "XTB_ZENO_SNAP_ANGLE_DEG", fresh.ZENO_SNAP_ANGLE_DEG, min_value=0.0
    ) or 0.0
    fresh.ANGLE_EPS = env_float("XTB_ANGLE_EPS", fresh.ANGLE_EPS, min_value=0.0) or 0.0
    fresh.RNG_SEED = env_int("XTB_RNG_SEED", fresh.RNG_SEED, min_value=0)

    # 既存スナップショットを保持している呼び出し側にも反映させる
    for f in fields(_Settings):
        setattr(_settings, f.name, getattr(fresh, f.name))

    # 再読込の世代（共有乱数ジェネレータの作り直し判定に使う）
    _generation += 1


def generation() -> int:
    """`reload_from_env()` の実行回数。"""
    return _generation


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "generation", "reload_from_env", "_Settings", "CONFIG_SECTION"]
