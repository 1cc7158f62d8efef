"""
どこで: `engine.core.host`
何を: 連携するホスト（ゲームエンジン）側オブジェクトの最小インターフェースを Protocol で定義。
なぜ: ホスト型を再実装せず、アダプタ越しに変換/シーン/カメラ/アニメータ操作を書けるようにするため。

回転は `(x, y, z, w)` 四元数、位置/スケールは 3 成分の数値列で受け渡す。
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

from common.types import Quat, VecLike

C = TypeVar("C")


class TransformLike(Protocol):
    """位置・回転・スケールと親子関係を持つ変換ノード。

    `position`/`rotation` はワールド座標、`local_*` は親基準。
    代入時の座標系変換はホスト側の責務とする。
    """

    name: str
    parent: Optional["TransformLike"]
    position: VecLike
    rotation: Quat
    local_position: VecLike
    local_rotation: Quat
    local_scale: VecLike

    @property
    def children(self) -> Sequence["TransformLike"]:
        """直下の子（順序付き）。"""
        ...


class ComponentLike(Protocol):
    """変換ノードにぶら下がるコンポーネント。"""

    @property
    def transform(self) -> TransformLike: ...


class SceneNodeLike(Protocol):
    """レイヤ番号と子ノード、コンポーネント検索/追加を持つシーンノード。"""

    layer: int

    @property
    def children(self) -> Sequence["SceneNodeLike"]: ...

    def get_component(self, component_type: type[C]) -> Optional[C]: ...

    def add_component(self, component_type: type[C]) -> C: ...


class CameraLike(Protocol):
    """投影行列（4x4, 行優先の `m[row, col]`）とクリップ距離を持つカメラ。"""

    projection_matrix: np.ndarray
    near_clip_plane: float
    far_clip_plane: float


class AnimatorParameterLike(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def name_hash(self) -> int: ...


class AnimatorLike(Protocol):
    @property
    def parameters(self) -> Sequence[AnimatorParameterLike]: ...


__all__ = [
    "TransformLike",
    "ComponentLike",
    "SceneNodeLike",
    "CameraLike",
    "AnimatorParameterLike",
    "AnimatorLike",
]
