"""機能追加チェックリスト全体の検証を行うサービス。"""

import logging
from collections.abc import Mapping

from convlint.models.artifact import ArtifactKind, CheckResult, ExpectedArtifact, LintReport, parse_kind
from convlint.models.errors import MissingMandatoryArtifactError
from convlint.rules.template import TIMESTAMP_LABEL
from convlint.validators.checker import RuleChecker

logger = logging.getLogger(__name__)


class ChecklistRunner:
    """model → migration → ... → view の順にアーティファクトを検証する。"""

    def __init__(self, checker: RuleChecker) -> None:
        self._checker = checker

    def run(
        self,
        component_name: str,
        model_name: str,
        provided_paths: Mapping[ArtifactKind | str, str],
    ) -> LintReport:
        """指定されたパスをチェックリスト順に検証する。

        指定された種別のみ検証し、必須種別（model/migration）が指定されていない場合は
        失敗結果を追加する。失敗があっても残りの種別の検証は継続する。

        Args:
            component_name: コンポーネント名。
            model_name: モデル名。
            provided_paths: 種別 → 候補パスのマッピング。

        Returns:
            チェックリスト順の検証結果。

        Raises:
            UnknownKindError: 存在しない種別が指定された場合。
        """
        paths = {parse_kind(kind): path for kind, path in provided_paths.items()}
        results: list[CheckResult] = []

        for rule in self._checker.table:
            candidate = paths.get(rule.kind)
            if candidate is not None:
                results.append(self._checker.check(rule.kind, component_name, model_name, candidate))
                continue
            if rule.mandatory:
                error = MissingMandatoryArtifactError(rule.kind)
                results.append(
                    CheckResult(
                        kind=rule.kind,
                        expected=self._checker.expected_path(rule.kind, component_name, model_name),
                        actual=None,
                        passed=False,
                        message=str(error),
                        error=type(error).__name__,
                    )
                )

        report = LintReport(component=component_name, model=model_name, results=results)
        for result in report.results:
            logger.debug("%s %s %s", "PASS" if result.passed else "FAIL", result.kind, result.actual)
        logger.info(
            "Checked %d artifacts for %s/%s: %d failed",
            len(report.results),
            component_name,
            model_name,
            len(report.failures),
        )
        return report

    def expected_paths(self, component_name: str, model_name: str) -> list[ExpectedArtifact]:
        """コンポーネント・モデルの組に対する期待パスと識別子の一覧を返す。

        Raises:
            InvalidNameError: 名前をケース変換できない場合。
        """
        return [
            ExpectedArtifact(
                kind=rule.kind,
                path=self._checker.render_path(rule.kind, component_name, model_name, timestamp=TIMESTAMP_LABEL),
                identifier=self._checker.render_identifier(rule.kind, component_name, model_name),
                mandatory=rule.mandatory,
                description=rule.description,
            )
            for rule in self._checker.table
        ]
