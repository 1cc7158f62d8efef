"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定と完了済みの除去）。
なぜ: ホストのフレームループから呼び出すだけで、複数の追従処理の更新順と寿命を統一するため。
"""

from __future__ import annotations

import logging
import time
from typing import Iterable

from .tickable import Tickable

logger = logging.getLogger(__name__)


class FrameClock:
    """登録された Tickable を固定順序で実行し、完了したものを外す極小クラス。"""

    def __init__(self, tickables: Iterable[Tickable] = ()):
        self._tickables: list[Tickable] = list(tickables)
        self._last_time = time.perf_counter()

    def add(self, tickable: Tickable) -> None:
        self._tickables.append(tickable)

    @property
    def active(self) -> tuple[Tickable, ...]:
        return tuple(self._tickables)

    # ホストのフレームコールバックから呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # dt を渡さないループ用
            now = time.perf_counter()
            dt = now - self._last_time
            self._last_time = now

        remaining: list[Tickable] = []
        for t in self._tickables:
            if t.tick(dt):
                logger.debug("FrameClock: %r finished", t)
            else:
                remaining.append(t)
        self._tickables = remaining


__all__ = ["FrameClock"]
