"""
どこで: `engine.core.animator`
何を: アニメータが名前またはハッシュで指定したパラメータを持つかの判定。
"""

from __future__ import annotations

from .host import AnimatorLike


def has_parameter(animator: AnimatorLike, key: str | int) -> bool:
    """`key` が str なら名前、int ならハッシュでパラメータを探す。"""
    if isinstance(key, bool):
        raise TypeError("parameter key must be str or int, not bool")
    if isinstance(key, str):
        return any(p.name == key for p in animator.parameters)
    if isinstance(key, int):
        return any(p.name_hash == key for p in animator.parameters)
    raise TypeError(f"parameter key must be str or int, got {type(key).__name__}")


__all__ = ["has_parameter"]
