"""
どこで: `common` の型定義。
何を: Vec2/Vec3/Quat/Number などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from typing import Sequence, Union

Number = Union[int, float]

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
# (x, y, z, w)。ホスト側の回転表現に合わせる。
Quat = tuple[float, float, float, float]

# 入力として受理するベクトル（tuple/list/np.ndarray）
VecLike = Sequence[float]

__all__ = ["Number", "Vec2", "Vec3", "Quat", "VecLike"]
