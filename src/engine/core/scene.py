"""
どこで: `engine.core.scene`
何を: シーンノードのレイヤ一括設定と、コンポーネントの取得または追加。
なぜ: ホストのシーングラフ API を `SceneNodeLike` 越しに薄く包むため。
"""

from __future__ import annotations

from typing import TypeVar

from .host import SceneNodeLike

C = TypeVar("C")


def set_layer_recursively(node: SceneNodeLike, layer: int) -> None:
    """`node` とその子孫すべての `layer` を設定する（深い階層でも再帰上限に当たらない）。"""
    stack = [node]
    while stack:
        cur = stack.pop()
        cur.layer = layer
        stack.extend(cur.children)


def get_or_add_component(node: SceneNodeLike, component_type: type[C]) -> C:
    """`component_type` のコンポーネントを返す。無ければ追加して返す。"""
    component = node.get_component(component_type)
    if component is not None:
        return component
    return node.add_component(component_type)


__all__ = ["set_layer_recursively", "get_or_add_component"]
