"""
どこで: `api` 入口（高レベル公開 API）。
何を: 数値・ベクトル・文字列・シーケンス・色・乱数・ホスト変換ユーティリティを単一名前空間に再輸出。
なぜ: 利用者が個々のモジュール配置を意識せずに `from api import clamp, zeno_to` のように使えるようにするため。

Usage:
    from api import clamp, closest_point_on_segment, shuffled, create_rng

    clamp(15, 0, 10)                                   # 10
    closest_point_on_segment((5, 0, 0), (0, 0, -1), (0, 0, 1))  # (0.0, 0.0, 0.0)
    shuffled([1, 2, 3], rng=create_rng(42))
"""

from common.logging import setup_default_logging
from engine.core import quaternion
from engine.core.animator import has_parameter
from engine.core.camera import perspective_off_center, set_vanishing_point
from engine.core.frame_clock import FrameClock
from engine.core.scene import get_or_add_component, set_layer_recursively
from engine.core.transform_utils import (
    ZenoFollower,
    copy_in_place,
    local_zeno_to,
    look_at,
    match,
    path_in_scene,
    snap_to_zero,
    xz_look_at,
    zeno_forward_to,
    zeno_to,
    zeno_to_transform,
)
from util.color import (
    RGBA,
    normalize_color,
    parse_hex_color_str,
    to_hex_string,
    to_u8_rgba,
    with_alpha,
)
from util.numeric import (
    at_least,
    at_most,
    clamp,
    clamp_angle_degrees,
    is_strictly_between,
    squared,
)
from util.rng import create_rng, default_rng, reset_default_rng
from util.sequences import (
    add_unique,
    first_or_default,
    last_or_default,
    pop,
    random_element,
    shift,
    shuffle,
    shuffled,
    swap,
    unshift,
    unshift_unique,
)
from util.strings import (
    ParseError,
    capitalize,
    insert_every_n,
    parse_float_array,
    parse_int_array,
    shift_prefix,
    strip_non_alpha,
    to_camel_case,
    wrap_in_color_tag,
)
from util.vector import (
    angle_between,
    cartesian_to_polar,
    closest_point_on_segment,
    dot,
    lerp,
    magnitude,
    polar_to_cartesian,
    project,
    slerp,
    sqr_magnitude,
    vector_clamp,
    x0z,
    xz,
    xzy,
    yx,
)

__all__ = [
    # 数値
    "squared",
    "at_least",
    "at_most",
    "clamp",
    "is_strictly_between",
    "clamp_angle_degrees",
    # ベクトル
    "xzy",
    "xz",
    "x0z",
    "yx",
    "cartesian_to_polar",
    "polar_to_cartesian",
    "vector_clamp",
    "project",
    "dot",
    "sqr_magnitude",
    "magnitude",
    "closest_point_on_segment",
    "lerp",
    "slerp",
    "angle_between",
    # 文字列
    "ParseError",
    "shift_prefix",
    "parse_int_array",
    "parse_float_array",
    "insert_every_n",
    "wrap_in_color_tag",
    "capitalize",
    "to_camel_case",
    "strip_non_alpha",
    # シーケンス
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
    # 色・乱数
    "RGBA",
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
    "to_hex_string",
    "with_alpha",
    "create_rng",
    "default_rng",
    "reset_default_rng",
    # ホスト変換（アダプタ越し）
    "quaternion",
    "snap_to_zero",
    "look_at",
    "xz_look_at",
    "path_in_scene",
    "match",
    "zeno_to",
    "zeno_to_transform",
    "local_zeno_to",
    "zeno_forward_to",
    "copy_in_place",
    "ZenoFollower",
    "FrameClock",
    "set_layer_recursively",
    "get_or_add_component",
    "perspective_off_center",
    "set_vanishing_point",
    "has_parameter",
    # ロギング
    "setup_default_logging",
]

# バージョン情報
__version__ = "2026.10"
