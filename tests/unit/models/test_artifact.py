"""アーティファクト関連モデルのユニットテスト。"""

import pytest
from pydantic import ValidationError

from convlint.models.artifact import ArtifactKind, CheckResult, LintReport, PathRule, parse_kind
from convlint.models.errors import UnknownKindError


class TestArtifactKind:
    def test_checklist_order(self) -> None:
        assert [k.value for k in ArtifactKind] == [
            "model",
            "migration",
            "graphql_type",
            "graphql_query",
            "schema_entry",
            "react_component",
            "component_export",
            "vite_entrypoint",
            "view",
        ]

    def test_parse_kind_normalizes_case(self) -> None:
        assert parse_kind("GRAPHQL_TYPE") == ArtifactKind.GRAPHQL_TYPE
        assert parse_kind(ArtifactKind.VIEW) == ArtifactKind.VIEW

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("GraphqlType", ArtifactKind.GRAPHQL_TYPE),
            ("ViteEntrypoint", ArtifactKind.VITE_ENTRYPOINT),
            ("schema-entry", ArtifactKind.SCHEMA_ENTRY),
        ],
    )
    def test_parse_kind_accepts_pascal_case(self, value: str, expected: ArtifactKind) -> None:
        assert parse_kind(value) == expected

    def test_parse_unknown_kind_raises_error(self) -> None:
        with pytest.raises(UnknownKindError):
            parse_kind("controller")

    def test_parse_empty_kind_raises_error(self) -> None:
        with pytest.raises(UnknownKindError):
            parse_kind("  ")


class TestPathRule:
    def test_defaults(self) -> None:
        rule = PathRule(kind="model", path_template="{model}.rb", identifier_template="{Model}")
        assert rule.kind == ArtifactKind.MODEL
        assert rule.mandatory is False
        assert rule.description == ""

    def test_unsupported_placeholder(self) -> None:
        with pytest.raises(ValidationError):
            PathRule(kind="model", path_template="{table}.rb", identifier_template="{Model}")


class TestCheckResult:
    def test_result_is_immutable(self) -> None:
        result = CheckResult(kind="model", expected="a.rb", actual="a.rb", passed=True)
        with pytest.raises(ValidationError):
            result.passed = False  # type: ignore[misc]


class TestLintReport:
    def _result(self, kind: str, passed: bool) -> CheckResult:
        return CheckResult(kind=kind, expected="x", actual="x" if passed else "y", passed=passed)

    def test_empty_report_passes(self) -> None:
        report = LintReport(component="accounting", model="note", results=[])
        assert report.passed is True
        assert report.exit_code == 0

    def test_report_with_failure(self) -> None:
        report = LintReport(
            component="accounting",
            model="note",
            results=[self._result("model", True), self._result("migration", False)],
        )
        assert report.passed is False
        assert report.exit_code == 1
        assert [r.kind for r in report.failures] == [ArtifactKind.MIGRATION]

    def test_serialization_includes_status(self) -> None:
        report = LintReport(component="accounting", model="note", results=[self._result("model", True)])
        data = report.model_dump(mode="json")
        assert data["passed"] is True
        assert data["exit_code"] == 0
        assert data["results"][0]["kind"] == "model"
