"""チェックアウトからアーティファクトの候補パスを収集する（読み取り専用）。"""

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from convlint.models.artifact import ArtifactKind
from convlint.models.errors import CollectionError
from convlint.naming import template_values
from convlint.rules.table import PathRuleTable
from convlint.rules.template import render_template

logger = logging.getLogger(__name__)

EXCLUDE_DIRS: frozenset[str] = frozenset({".git", "node_modules", "tmp", "log", "vendor", "public", "coverage"})


def collect_paths(
    root: Path,
    component_name: str,
    model_name: str,
    table: PathRuleTable,
) -> dict[ArtifactKind, str]:
    """種別ごとの候補パスをディレクトリツリーから探す。

    規約どおりの位置にファイルがあればそれを、なければ同じファイル名で
    コンポーネント名のディレクトリ配下にあるファイルをツリー全体から探して候補とする（配置ミスを検出するため）。
    見つからない種別は結果に含めない。

    Args:
        root: リポジトリのルートディレクトリ。
        component_name: コンポーネント名。
        model_name: モデル名。
        table: パスルールテーブル。

    Returns:
        種別 → ルートからの相対パス（POSIX形式）。

    Raises:
        CollectionError: rootがディレクトリでない場合。
        InvalidNameError: 名前をケース変換できない場合。
    """
    if not root.is_dir():
        raise CollectionError(f"Not a directory: {root}")

    values = {**template_values(component_name, model_name), "timestamp": "*"}
    found: dict[ArtifactKind, str] = {}

    for rule in table:
        pattern = render_template(rule.path_template, values)
        matches = _files(root.glob(pattern), root)
        if not matches:
            # 他コンポーネントの同名ファイル（index.js等）は候補にしない
            basename = pattern.rsplit("/", 1)[-1]
            matches = [m for m in _files(root.rglob(basename), root) if _belongs_to(m, values["component"])]
        if matches:
            found[rule.kind] = matches[0]
            if len(matches) > 1:
                logger.warning("Multiple candidates for %s, using %s", rule.kind, matches[0])

    logger.info("Collected %d candidate paths under %s", len(found), root)
    return found


def _files(paths: Iterable[Path], root: Path) -> list[str]:
    relative: list[str] = []
    for path in paths:
        if not path.is_file():
            continue
        rel = path.relative_to(root)
        if any(part in EXCLUDE_DIRS for part in rel.parts[:-1]):
            continue
        relative.append(rel.as_posix())
    return sorted(relative)


def _belongs_to(rel_path: str, component: str) -> bool:
    # ディレクトリ名かファイル名（拡張子なし）がコンポーネント名と一致するもの
    path = PurePosixPath(rel_path)
    return component in path.parts[:-1] or path.name.split(".", 1)[0] == component
