"""
どこで: `util.strings`
何を: 文字列の切り出し・数値配列パース・区切り挿入・大文字化/キャメルケース化・非英字除去・
      リッチテキスト色タグ。
なぜ: UI ラベルや設定文字列の整形を、ホストに依存しない純関数として揃えるため。
"""

from __future__ import annotations

import logging
import re
from typing import Callable, TypeVar

from .color import to_hex_string

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)

_ALPHA = re.compile(r"[^a-zA-Z]")
_ALPHA_NUMERIC = re.compile(r"[^a-zA-Z0-9]")

# 数値トークン（前後の ASCII 空白は許容）
_INT_TOKEN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
_FLOAT_TOKEN = re.compile(
    r"\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)\s*",
    re.ASCII | re.IGNORECASE,
)


class ParseError(ValueError):
    """数値配列のパースに失敗したことを表す例外。

    Attributes
    ----------
    token : str
        解釈できなかったトークン（前後空白込み）。
    index : int
        区切り後のトークン位置（空トークンも数える）。
    """

    def __init__(self, token: str, index: int, kind: str) -> None:
        super().__init__(f"invalid {kind} at token {index}: {token!r}")
        self.token = token
        self.index = index


def shift_prefix(s: str, length: int) -> tuple[str, str]:
    """先頭 `length` 文字を切り出し、`(head, rest)` を返す。

    - `length >= len(s)` なら全体を消費して `(s, "")`。
    - `length <= 0` なら何も消費せず `("", s)`。
    """
    if length <= 0:
        return ("", s)
    if len(s) > length:
        return (s[:length], s[length:])
    return (s, "")


def _parse_array(
    s: str, sep: str, conv: Callable[[str], T], pattern: re.Pattern[str], kind: str
) -> list[T]:
    if not sep:
        raise ValueError("separator must not be empty")
    values: list[T] = []
    for i, token in enumerate(s.strip().split(sep)):
        if not token:
            continue
        # ASCII 表記のみ（全角数字や `1_000` などは受理しない）
        if pattern.fullmatch(token) is None:
            logger.debug("rejected %s token %d: %r", kind, i, token)
            raise ParseError(token, i, kind)
        try:
            values.append(conv(token))
        except ValueError as e:
            logger.debug("parse failed for %s token %d: %r", kind, i, token)
            raise ParseError(token, i, kind) from e
    return values


def parse_int_array(s: str, sep: str = ",") -> list[int]:
    """`sep` 区切りの整数列をパースする。

    前後の空白は除去し、空トークンは読み飛ばす。トークン両端の空白は許容する。

    Examples
    --------
    >>> parse_int_array("1, 2, 3", ",")
    [1, 2, 3]
    >>> parse_int_array("", ",")
    []

    Raises
    ------
    ParseError
        空でないトークンが整数として解釈できない場合。
    """
    return _parse_array(s, sep, int, _INT_TOKEN, "integer")


def parse_float_array(s: str, sep: str = ",") -> list[float]:
    """`sep` 区切りの実数列をパースする（ロケール非依存、小数点は `.`）。"""
    return _parse_array(s, sep, float, _FLOAT_TOKEN, "float")


def insert_every_n(s: str, n: int, marker: str = " ") -> str:
    """元の文字列の `n` 文字ごとに `marker` を挿入する（末尾には付けない）。

    挿入した `marker` 自体は数えない。`n < 1` なら何もしない。
    """
    if n < 1:
        return s
    i = n
    while i < len(s):
        s = s[:i] + marker + s[i:]
        i += len(marker) + n
    return s


def wrap_in_color_tag(s: str, color: object) -> str:
    """リッチテキストの色タグ `<color=#RRGGBBAA>...</color>` で包む。"""
    return f"<color=#{to_hex_string(color)}>{s}</color>"


def capitalize(s: str) -> str:
    """先頭を大文字、残りを小文字にする。空文字はそのまま、1 文字なら大文字化のみ。"""
    if not s:
        return s
    if len(s) < 2:
        return s.upper()
    return s[0].upper() + s[1:].lower()


def to_camel_case(s: str, capitalize_first: bool = False, keep_capitals: bool = True) -> str:
    """アンダースコア/空白区切りの語をキャメルケースへ連結する。

    Parameters
    ----------
    capitalize_first : bool, default False
        True なら先頭語も大文字始まり（PascalCase）。
    keep_capitals : bool, default True
        False なら大文字化した語の 2 文字目以降を小文字にする。

    Notes
    -----
    連続した区切りで生じる空の語は捨てる。先頭語は `capitalize_first` が False のとき変更しない。

    >>> to_camel_case("my_cool_var")
    'myCoolVar'
    """
    if not s:
        return s
    words = [w for w in s.replace("_", " ").split(" ") if w]
    start = 0 if capitalize_first else 1
    for i in range(start, len(words)):
        w = words[i]
        rest = w[1:] if keep_capitals else w[1:].lower()
        words[i] = w[0].upper() + rest
    return "".join(words)


def strip_non_alpha(s: str, strip_numeric: bool = True) -> str:
    """英字以外（`strip_numeric=False` なら英数字以外）を取り除く。"""
    pattern = _ALPHA if strip_numeric else _ALPHA_NUMERIC
    return pattern.sub("", s)


__all__ = [
    "ParseError",
    "shift_prefix",
    "parse_int_array",
    "parse_float_array",
    "insert_every_n",
    "wrap_in_color_tag",
    "capitalize",
    "to_camel_case",
    "strip_non_alpha",
]
