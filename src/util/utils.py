"""
どこで: `util.utils`
何を: YAML 構成ファイルの探索と読み込み（フェイルソフト）。
なぜ: 設定層（`common.settings`）がファイル構成を意識せずに既定値の上書きを受け取れるようにするため。
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterator

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "XTB_CONFIG_PATH"

# いずれかがあればプロジェクトルートとみなす
_ROOT_MARKERS = (".git", "pyproject.toml", "configs")


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("failed to load config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """`start` から上へ辿り、`_ROOT_MARKERS` を含む最も近いディレクトリを返す。

    見つからなければ `start.parent.parent`（`<repo>/src/util` -> `<repo>` を想定）。
    """
    here = start.resolve()
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here.parent.parent


def _config_candidates(project_root: Path) -> Iterator[Path]:
    # 後に出るものほど優先
    yield project_root / "configs" / "default.yaml"
    yield project_root / "config.yaml"
    override = os.getenv(CONFIG_PATH_ENV)
    if override:
        path = Path(override)
        if not path.exists():
            logger.debug("%s points to a missing file: %s", CONFIG_PATH_ENV, path)
        yield path


def load_config() -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）
    3) 環境変数 `XTB_CONFIG_PATH` が指すファイル（最後に上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    """
    merged: Dict[str, Any] = {}
    for path in _config_candidates(_find_project_root(Path(__file__).parent)):
        if path.exists():
            merged.update(_safe_load_yaml(path))
    return merged
