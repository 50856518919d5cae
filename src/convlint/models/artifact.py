"""アーティファクト規約関連のデータモデル。"""

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, computed_field, field_validator

from convlint.models.errors import InvalidNameError, UnknownKindError
from convlint.naming import to_snake_case

PLACEHOLDER = re.compile(r"\{(\w+)\}")
NAME_PLACEHOLDERS: frozenset[str] = frozenset({"component", "Component", "model", "Model", "models", "Models"})
PATH_PLACEHOLDERS: frozenset[str] = NAME_PLACEHOLDERS | {"timestamp"}


class ArtifactKind(StrEnum):
    """機能追加時に作成するアーティファクトの種別。定義順がチェックリストの順序。"""

    MODEL = "model"
    MIGRATION = "migration"
    GRAPHQL_TYPE = "graphql_type"
    GRAPHQL_QUERY = "graphql_query"
    SCHEMA_ENTRY = "schema_entry"
    REACT_COMPONENT = "react_component"
    COMPONENT_EXPORT = "component_export"
    VITE_ENTRYPOINT = "vite_entrypoint"
    VIEW = "view"


def parse_kind(value: ArtifactKind | str) -> ArtifactKind:
    """文字列をArtifactKindに変換する。`GraphqlType` のようなPascalCase表記も受け付ける。

    Raises:
        UnknownKindError: 該当する種別がない場合。
    """
    try:
        return ArtifactKind(to_snake_case(str(value)))
    except (ValueError, InvalidNameError):
        raise UnknownKindError(value) from None


def _check_placeholders(template: str, allowed: frozenset[str]) -> str:
    unknown = sorted(set(PLACEHOLDER.findall(template)) - allowed)
    if unknown:
        raise ValueError(f"unsupported placeholders: {', '.join(unknown)}")
    return template


class PathRule(BaseModel):
    """アーティファクト種別ごとの配置・命名ルール（YAMLから読み込み）。"""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    path_template: str
    identifier_template: str
    description: str = ""
    mandatory: bool = False

    @field_validator("path_template")
    @classmethod
    def _validate_path_template(cls, value: str) -> str:
        return _check_placeholders(value, PATH_PLACEHOLDERS)

    @field_validator("identifier_template")
    @classmethod
    def _validate_identifier_template(cls, value: str) -> str:
        return _check_placeholders(value, NAME_PLACEHOLDERS)


class CheckResult(BaseModel):
    """単一アーティファクトの検証結果。"""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    expected: str
    actual: str | None
    passed: bool
    message: str = ""
    error: str | None = None


class ExpectedArtifact(BaseModel):
    """コンポーネント・モデルの組に対して期待されるパスと識別子。"""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    path: str
    identifier: str
    mandatory: bool
    description: str


class LintReport(BaseModel):
    """チェックリスト全体の検証結果。resultsはチェックリスト順。"""

    model_config = ConfigDict(frozen=True)

    component: str
    model: str
    results: list[CheckResult]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[CheckResult]:
        return [r for r in self.results if not r.passed]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1
