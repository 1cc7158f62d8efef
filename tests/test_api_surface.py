from __future__ import annotations

import importlib

import pytest

import api

# 公開 API の名前がすべて解決でき、各モジュールの公開名を取りこぼしていないこと

_MODULES = [
    "util.numeric",
    "util.vector",
    "util.strings",
    "util.sequences",
    "util.color",
    "util.rng",
    "engine.core.transform_utils",
    "engine.core.scene",
    "engine.core.camera",
    "engine.core.animator",
    "engine.core.frame_clock",
]


def test_all_names_resolve() -> None:
    missing = [name for name in api.__all__ if not hasattr(api, name)]
    assert missing == []
    assert len(set(api.__all__)) == len(api.__all__)


@pytest.mark.parametrize("module_name", _MODULES)
def test_facade_covers_module(module_name: str) -> None:
    mod = importlib.import_module(module_name)
    missing = [name for name in mod.__all__ if name not in api.__all__]
    assert missing == []
    for name in mod.__all__:
        assert getattr(api, name) is getattr(mod, name)


def test_min_flow() -> None:
    assert api.clamp(15, 0, 10) == 10
    assert api.closest_point_on_segment((5, 0, 0), (0, 0, -1), (0, 0, 1)) == (0.0, 0.0, 0.0)
    assert sorted(api.shuffled([3, 1, 2], rng=api.create_rng(42))) == [1, 2, 3]
    assert api.to_camel_case("frame_clock", capitalize_first=True) == "FrameClock"
    assert api.lerp((0, 0), (2, 2), 0.5) == (1.0, 1.0)
    assert api.to_u8_rgba("#FF000080") == (255, 0, 0, 128)
    assert isinstance(api.__version__, str)
