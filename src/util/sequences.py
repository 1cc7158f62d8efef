"""
どこで: `util.sequences`
何を: リスト向けの小さな操作（重複なし追加、入れ替え、シャッフル、先頭/末尾の取り出し、
      ランダム選択、先頭挿入）。
なぜ: 空コレクションや範囲外インデックスでも例外を投げない、決まった振る舞いを一箇所に集めるため。

方針:
- 空の場合の取り出し系は「不在」を `default`（既定 None）で返す。要素としての None と
  区別したい場合は呼び出し側で番兵オブジェクトを渡す。
- 乱数を使う操作は `rng`（`np.random.Generator`）を受け取る。省略時は共有の `util.rng.default_rng()`。
"""

from __future__ import annotations

from typing import MutableSequence, Optional, Sequence, TypeVar

import numpy as np

from .rng import default_rng

T = TypeVar("T")


def add_unique(seq: MutableSequence[T], item: T) -> bool:
    """`item` が未登録なら末尾に追加する。追加したかどうかを返す。

    全件を線形探索する（O(n)）。多数の要素に対して繰り返すなら set を使うこと。
    """
    if item in seq:
        return False
    seq.append(item)
    return True


def swap(seq: MutableSequence[T], i: int, j: int) -> None:
    """`i` と `j` の要素を入れ替える。

    どちらかが `[0, len)` の外、または `i == j` の場合は何もしない（例外も投げない）。
    負のインデックスも範囲外として扱う。
    """
    n = len(seq)
    if not (0 <= i < n) or not (0 <= j < n) or i == j:
        return
    seq[i], seq[j] = seq[j], seq[i]


def shuffle(seq: MutableSequence[T], rng: Optional[np.random.Generator] = None) -> None:
    """Fisher–Yates でその場シャッフルする。"""
    r = rng if rng is not None else default_rng()
    for i in range(len(seq) - 1, 0, -1):
        j = int(r.integers(0, i + 1))
        if j != i:
            seq[i], seq[j] = seq[j], seq[i]


def shuffled(seq: Sequence[T], rng: Optional[np.random.Generator] = None) -> list[T]:
    """シャッフルした新しいリストを返す。入力（list/tuple/配列）は変更しない。"""
    out = list(seq)
    shuffle(out, rng)
    return out


def last_or_default(seq: Sequence[T], default: Optional[T] = None) -> Optional[T]:
    return seq[-1] if len(seq) > 0 else default


def first_or_default(seq: Sequence[T], default: Optional[T] = None) -> Optional[T]:
    return seq[0] if len(seq) > 0 else default


def random_element(
    seq: Sequence[T],
    rng: Optional[np.random.Generator] = None,
    default: Optional[T] = None,
) -> Optional[T]:
    """一様にランダムな要素を返す。空なら `default`。1 要素なら乱数を消費しない。"""
    n = len(seq)
    if n < 1:
        return default
    if n == 1:
        return seq[0]
    r = rng if rng is not None else default_rng()
    return seq[int(r.integers(0, n))]


def shift(seq: MutableSequence[T], default: Optional[T] = None) -> Optional[T]:
    """先頭要素を取り除いて返す（キュー的な取り出し）。空なら `default`。

    先頭削除は O(n)。追加と取り出しだけなら `collections.deque` の方が適する。
    """
    if len(seq) < 1:
        return default
    item = seq[0]
    del seq[0]
    return item


def pop(seq: MutableSequence[T], default: Optional[T] = None) -> Optional[T]:
    """末尾要素を取り除いて返す。空なら `default`。"""
    if len(seq) < 1:
        return default
    item = seq[-1]
    del seq[-1]
    return item


def unshift(seq: MutableSequence[T], item: T) -> None:
    seq.insert(0, item)


def unshift_unique(seq: MutableSequence[T], item: T) -> bool:
    """`item` が未登録なら先頭に挿入する。挿入したかどうかを返す。"""
    if item in seq:
        return False
    seq.insert(0, item)
    return True


__all__ = [
    "add_unique",
    "swap",
    "shuffle",
    "shuffled",
    "last_or_default",
    "first_or_default",
    "random_element",
    "shift",
    "pop",
    "unshift",
    "unshift_unique",
]
