"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得するだけで、import 時に設定しない。
- アプリ側で設定が無い場合でも、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), None)
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - 上位のランナー/スクリプトから呼び出す想定（ライブラリ内部からは呼ばない）
    """
    root = logging.getLogger()
    if root.handlers:
        # アプリ側で設定済みとみなす
        return
    logging.basicConfig(level=_resolve_level(level), format=DEFAULT_FORMAT)


__all__ = ["setup_default_logging", "DEFAULT_FORMAT"]
