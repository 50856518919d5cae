"""アーティファクト種別ごとのパスルールテーブル。"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import ValidationError

from convlint.models.artifact import ArtifactKind, PathRule, parse_kind
from convlint.models.errors import RuleTableError, UnknownKindError

logger = logging.getLogger(__name__)

RULES_FILE_NAME = "path-rules.yaml"

# モデルとマイグレーションは常に必須
REQUIRED_MANDATORY_KINDS: tuple[ArtifactKind, ...] = (ArtifactKind.MODEL, ArtifactKind.MIGRATION)


class PathRuleTable:
    """ArtifactKind → PathRule の不変マッピング。

    全ての種別にちょうど1つのルールが定義され、モデルとマイグレーションが
    必須であることを構築時に保証する。
    反復順はArtifactKindの定義順（チェックリストの順序）。
    """

    def __init__(self, rules: Iterable[PathRule]) -> None:
        by_kind: dict[ArtifactKind, PathRule] = {}
        for rule in rules:
            if rule.kind in by_kind:
                raise RuleTableError(f"Duplicate path rule for kind: {rule.kind}")
            by_kind[rule.kind] = rule

        missing = [kind.value for kind in ArtifactKind if kind not in by_kind]
        if missing:
            raise RuleTableError(f"Path rules missing for kinds: {', '.join(missing)}")

        optional = [kind.value for kind in REQUIRED_MANDATORY_KINDS if not by_kind[kind].mandatory]
        if optional:
            raise RuleTableError(f"Path rules must be mandatory for kinds: {', '.join(optional)}")

        self._rules = MappingProxyType({kind: by_kind[kind] for kind in ArtifactKind})

    def lookup(self, kind: ArtifactKind | str) -> PathRule:
        """種別に対応するパスルールを返す。

        Raises:
            UnknownKindError: 種別が存在しない場合。
        """
        rule = self._rules.get(parse_kind(kind))
        if rule is None:
            raise UnknownKindError(kind)
        return rule

    def kinds(self) -> list[ArtifactKind]:
        return list(self._rules)

    def mandatory_kinds(self) -> list[ArtifactKind]:
        return [kind for kind, rule in self._rules.items() if rule.mandatory]

    def __iter__(self) -> Iterator[PathRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)


def load_rule_table(config_dir: Path) -> PathRuleTable:
    """パスルール定義をYAMLファイルから読み込む。

    Args:
        config_dir: `path-rules.yaml` を含む設定ディレクトリ。

    Returns:
        検証済みのPathRuleTable。

    Raises:
        RuleTableError: ファイルが存在しない、または定義が不正な場合。
    """
    rules_file = config_dir / RULES_FILE_NAME
    try:
        with open(rules_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise RuleTableError(f"Path rules file not found: {rules_file}") from None
    except yaml.YAMLError as e:
        raise RuleTableError(f"Invalid YAML in {rules_file}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("rules"), list):
        raise RuleTableError(f"{rules_file} must contain a 'rules' list")

    rules: list[PathRule] = []
    for rule_data in data["rules"]:
        try:
            rules.append(PathRule.model_validate(rule_data))
        except ValidationError as e:
            raise RuleTableError(f"Invalid path rule in {rules_file}: {e}") from e

    table = PathRuleTable(rules)
    logger.debug("Loaded %d path rules from %s", len(table), rules_file)
    return table
