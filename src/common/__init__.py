"""
どこで: `common` パッケージ。
何を: 全層で使う軽量な型エイリアス・環境変数ヘルパ・設定・ロギング補助。
なぜ: util/engine/api から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging
from .types import Number, Quat, Vec2, Vec3, VecLike

__all__ = [
    "Number",
    "Quat",
    "Vec2",
    "Vec3",
    "VecLike",
    "setup_default_logging",
]
