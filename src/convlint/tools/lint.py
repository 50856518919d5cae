"""規約検証のMCPツール定義。"""

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from convlint.models.errors import ConvLintError
from convlint.naming import camel_to_snake, client_field_name, graphql_field_name
from convlint.services.checklist import ChecklistRunner
from convlint.services.collector import collect_paths
from convlint.validators.checker import RuleChecker


def register_lint_tools(mcp: FastMCP, checker: RuleChecker, runner: ChecklistRunner) -> None:
    """規約検証関連のMCPツールを登録する。"""

    @mcp.tool()
    async def check_artifact(
        component: str,
        model: str,
        kind: str,
        path: str,
    ) -> dict[str, Any]:
        """単一アーティファクトのパスが配置・命名規約に従っているか検証する。

        Args:
            component: コンポーネント名（例: "accounting"）。
            model: モデル名（例: "note"）。
            kind: アーティファクト種別（"model", "migration", "graphql_type" 等）。
            path: リポジトリルートからの相対パス。
        """
        try:
            return checker.check(kind, component, model, path).model_dump(mode="json")
        except ConvLintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def check_identifier(
        component: str,
        model: str,
        kind: str,
        identifier: str,
    ) -> dict[str, Any]:
        """クラス名などの識別子が命名規約に従っているか検証する。

        Args:
            component: コンポーネント名。
            model: モデル名。
            kind: アーティファクト種別。
            identifier: 検証対象の識別子（例: "Accounting::Types::NoteType"）。
        """
        try:
            return checker.check_identifier(kind, component, model, identifier).model_dump(mode="json")
        except ConvLintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def run_checklist(
        component: str,
        model: str,
        paths: dict[str, str],
    ) -> dict[str, Any]:
        """機能追加チェックリスト全体を検証する。

        model → migration → GraphQL型 → クエリ → スキーマ登録 → Reactコンポーネント →
        エクスポート → Viteエントリポイント → ビュー の順に検証結果を返します。
        model/migrationが指定されていない場合は失敗として報告されます。

        Args:
            component: コンポーネント名。
            model: モデル名。
            paths: 種別 → パスの辞書。
        """
        try:
            report = runner.run(component, model, paths)
            return report.model_dump(mode="json")
        except ConvLintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def get_expected_paths(component: str, model: str) -> dict[str, Any]:
        """コンポーネント・モデルの組に対する期待パスと識別子の一覧を取得する。

        Args:
            component: コンポーネント名。
            model: モデル名。
        """
        try:
            artifacts = runner.expected_paths(component, model)
            return {"artifacts": [a.model_dump(mode="json") for a in artifacts]}
        except ConvLintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def collect_artifact_paths(root: str, component: str, model: str) -> dict[str, Any]:
        """チェックアウトからアーティファクトの候補パスを収集する。

        ファイルシステムは変更しません。結果は `run_checklist` の `paths` にそのまま渡せます。

        Args:
            root: リポジトリのルートディレクトリ。
            component: コンポーネント名。
            model: モデル名。
        """
        try:
            found = collect_paths(Path(root), component, model, checker.table)
            return {"paths": {kind.value: path for kind, path in found.items()}}
        except ConvLintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def get_field_names(component: str, model: str) -> dict[str, Any]:
        """GraphQLフィールド名（snake_case）とクライアント側のフィールド名（camelCase）を取得する。

        Args:
            component: コンポーネント名。
            model: モデル名。
        """
        try:
            client_field = client_field_name(component, model)
            return {
                "graphql_field": graphql_field_name(component, model),
                "client_field": client_field,
                "round_trip": camel_to_snake(client_field),
            }
        except ConvLintError as e:
            return {"error": type(e).__name__, "message": str(e)}
