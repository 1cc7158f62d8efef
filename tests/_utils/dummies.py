"""テストで使うホスト型のダミー実装（Protocol を満たす最小のデータ保持クラス）。

- ワールド/ローカルの座標変換は行わない（互いに独立した属性として保持）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

IDENTITY = (0.0, 0.0, 0.0, 1.0)


@dataclass
class DummyTransform:
    name: str = "node"
    parent: Optional["DummyTransform"] = None
    position: tuple = (0.0, 0.0, 0.0)
    rotation: tuple = IDENTITY
    local_position: tuple = (0.0, 0.0, 0.0)
    local_rotation: tuple = IDENTITY
    local_scale: tuple = (1.0, 1.0, 1.0)
    children: list = field(default_factory=list)

    def add_child(self, child: "DummyTransform") -> "DummyTransform":
        child.parent = self
        self.children.append(child)
        return child


@dataclass
class DummyComponent:
    transform: DummyTransform = field(default_factory=DummyTransform)


@dataclass
class DummySceneNode:
    layer: int = 0
    children: list = field(default_factory=list)
    components: dict = field(default_factory=dict)
    add_calls: int = 0

    def get_component(self, component_type: type) -> Any:
        return self.components.get(component_type)

    def add_component(self, component_type: type) -> Any:
        self.add_calls += 1
        comp = component_type()
        self.components[component_type] = comp
        return comp


@dataclass
class DummyCamera:
    projection_matrix: np.ndarray
    near_clip_plane: float = 1.0
    far_clip_plane: float = 10.0


@dataclass(frozen=True)
class DummyParameter:
    name: str
    name_hash: int


@dataclass
class DummyAnimator:
    parameters: list = field(default_factory=list)
