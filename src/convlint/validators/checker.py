"""パスルールに基づくアーティファクト検証ロジック。"""

import logging
from datetime import UTC, datetime

from convlint.models.artifact import ArtifactKind, CheckResult, PathRule
from convlint.models.errors import InvalidNameError, PatternMismatchError
from convlint.naming import template_values
from convlint.rules.table import PathRuleTable
from convlint.rules.template import TIMESTAMP_LABEL, compile_template, normalize_path, render_template

logger = logging.getLogger(__name__)


class RuleChecker:
    """パスルールテーブルに基づいて候補パス・識別子を検証する。"""

    def __init__(self, table: PathRuleTable) -> None:
        self._table = table

    @property
    def table(self) -> PathRuleTable:
        return self._table

    def check(
        self,
        kind: ArtifactKind | str,
        component_name: str,
        model_name: str,
        candidate_path: str,
    ) -> CheckResult:
        """候補パスが規約どおりの配置・命名になっているか検証する。

        Args:
            kind: アーティファクト種別。
            component_name: コンポーネント名（任意のケース）。
            model_name: モデル名（任意のケース）。
            candidate_path: 検証対象のパス（リポジトリルートからの相対パス）。

        Returns:
            検証結果。不一致や不正な名前は例外ではなく失敗結果として返す。

        Raises:
            UnknownKindError: 種別がルールテーブルに存在しない場合。
        """
        rule = self._table.lookup(kind)
        return self._evaluate(rule, rule.path_template, component_name, model_name, normalize_path(candidate_path))

    def check_identifier(
        self,
        kind: ArtifactKind | str,
        component_name: str,
        model_name: str,
        identifier: str,
    ) -> CheckResult:
        """クラス名などの識別子が命名規約どおりか検証する。"""
        rule = self._table.lookup(kind)
        return self._evaluate(rule, rule.identifier_template, component_name, model_name, identifier.strip())

    def render_path(
        self,
        kind: ArtifactKind | str,
        component_name: str,
        model_name: str,
        timestamp: str | None = None,
    ) -> str:
        """規約どおりの具体的なパスを生成する。

        `{timestamp}` には指定値、未指定の場合は現在時刻（UTC）を使う。

        Raises:
            UnknownKindError: 種別がルールテーブルに存在しない場合。
            InvalidNameError: 名前をケース変換できない場合。
        """
        rule = self._table.lookup(kind)
        values = template_values(component_name, model_name)
        values["timestamp"] = timestamp or datetime.now(UTC).strftime("%Y%m%d%H%M%S")
        return render_template(rule.path_template, values)

    def render_identifier(self, kind: ArtifactKind | str, component_name: str, model_name: str) -> str:
        rule = self._table.lookup(kind)
        return render_template(rule.identifier_template, template_values(component_name, model_name))

    def expected_path(self, kind: ArtifactKind | str, component_name: str, model_name: str) -> str:
        """表示用の期待パス。名前が不正な場合はテンプレートをそのまま返す。"""
        rule = self._table.lookup(kind)
        try:
            values = template_values(component_name, model_name)
        except InvalidNameError:
            return rule.path_template
        return render_template(rule.path_template, {**values, "timestamp": TIMESTAMP_LABEL})

    def _evaluate(
        self,
        rule: PathRule,
        template: str,
        component_name: str,
        model_name: str,
        actual: str,
    ) -> CheckResult:
        expected = template
        try:
            values = template_values(component_name, model_name)
            expected = render_template(template, {**values, "timestamp": TIMESTAMP_LABEL})
            if not compile_template(template, values).fullmatch(actual):
                raise PatternMismatchError(rule.kind, expected, actual)
        except (InvalidNameError, PatternMismatchError) as e:
            logger.debug("%s check failed for %r: %s", rule.kind, actual, e)
            return CheckResult(
                kind=rule.kind,
                expected=expected,
                actual=actual,
                passed=False,
                message=str(e),
                error=type(e).__name__,
            )

        return CheckResult(kind=rule.kind, expected=expected, actual=actual, passed=True)
