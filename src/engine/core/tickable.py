"""
どこで: `engine.core` の更新インターフェース。
何を: 1フレーム更新 `tick(dt)` を持つ `Tickable` Protocol を定義。
なぜ: フレーム駆動で目標へ寄せる処理（Zeno 追従など）を一様に扱うため。
"""

from typing import Optional, Protocol


class Tickable(Protocol):
    """1 フレーム分の更新を行うインターフェース。"""

    def tick(self, dt: float) -> Optional[bool]:
        """内部状態を `dt` 秒ぶん進める。True を返したら完了（以後は呼ばれない）。"""
