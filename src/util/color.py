"""
どこで: `util.color`。
何を: 色指定の正規化（Hex, RGBA 0–1, RGBA 0–255）と、Hex 文字列化・アルファ差し替え。
なぜ: 文字列装飾（`util.strings.wrap_in_color_tag`）やホスト側の色値を同一の受理仕様で扱うため。

色は RGBA(0–1) の tuple で表す。値型の色を「その場で」書き換える API は提供しない
（`with_alpha` のように常に新しい値を返す）。
"""

from __future__ import annotations

from typing import Sequence

RGBA = tuple[float, float, float, float]


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列を RGBA(0–1) に変換する。

    `#` または `0x` の接頭辞は任意。桁は RRGGBB か RRGGBBAA（大文字/小文字は不問）。
    """
    digits = s.strip()
    for prefix in ("#", "0x", "0X"):
        if digits.startswith(prefix):
            digits = digits[len(prefix) :]
            break
    if len(digits) not in (6, 8):
        raise ValueError(f"hex color must be RRGGBB or RRGGBBAA, got {s!r}")
    try:
        channels = bytes.fromhex(digits)
    except ValueError as e:
        raise ValueError(f"invalid hex color: {s!r}") from e
    if len(channels) == 3:
        channels += b"\xff"
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def _as_floats(value: object) -> list[float] | None:
    if isinstance(value, str):
        return None
    if hasattr(value, "tolist"):
        # np.ndarray
        value = value.tolist()
    if not isinstance(value, Sequence):
        return None
    try:
        return [float(x) for x in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （0–1 または 0–255）
    - 全成分が 0..1 なら 0–1 とみなし、そうでなければ 0–255 とみなして丸め→スケール
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    seq = _as_floats(value)
    if seq is None:
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    if all(0.0 <= x <= 1.0 for x in seq):
        a = seq[3] if len(seq) == 4 else 1.0
        return (_clamp01(seq[0]), _clamp01(seq[1]), _clamp01(seq[2]), _clamp01(a))
    u8 = [max(0, min(255, int(round(x)))) for x in seq]
    if len(u8) == 3:
        u8.append(255)
    return (u8[0] / 255.0, u8[1] / 255.0, u8[2] / 255.0, u8[3] / 255.0)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する（四捨五入）。"""
    r, g, b, a = (int(round(c * 255)) for c in normalize_color(value))
    return (r, g, b, a)


def to_hex_string(value: object) -> str:
    """色を `RRGGBBAA`（大文字、各 2 桁）へ変換する。

    各チャネルは `int(c * 255)` の切り捨て。リッチテキスト/HTML 用。
    """
    return "".join(f"{int(c * 255):02X}" for c in normalize_color(value))


def with_alpha(value: object, alpha: float) -> RGBA:
    """アルファだけを差し替えた新しい色を返す。"""
    r, g, b, _a = normalize_color(value)
    return (r, g, b, _clamp01(float(alpha)))


__all__ = [
    "RGBA",
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
    "to_hex_string",
    "with_alpha",
]
