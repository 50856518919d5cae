"""機能追加ワークフローのMCPプロンプト定義。"""

from fastmcp import FastMCP


def register_workflow_prompts(mcp: FastMCP) -> None:
    """ワークフロー系のMCPプロンプトを登録する。"""

    def _backend_phase() -> str:
        return (
            "## Phase 1: モデルとマイグレーション\n\n"
            "1. `get_expected_paths` ツールで追加すべきファイルのパスと識別子を確認してください。\n"
            "2. モデルを作成し、続けてマイグレーションを作成してください。**この順序は必ず守ってください。**\n"
            "3. `check_artifact` ツールで model / migration のパスを検証してください。\n\n"
            "## Phase 2: GraphQL\n\n"
            "1. GraphQL型、クエリ、コンポーネントのクエリ型（スキーマ登録）を追加してください。\n"
            "2. `get_field_names` ツールでGraphQLフィールド名とクライアント側のフィールド名を確認してください。\n\n"
        )

    def _frontend_phase() -> str:
        return (
            "## Phase 3: フロントエンド\n\n"
            "1. Reactコンポーネントを追加し、コンポーネントの公開モジュールからエクスポートしてください。\n"
            "2. Viteのエントリポイントを追加してください。追加後はサーバーの再起動が必要です。\n"
            "3. Reactコンポーネントをマウントするビューを追加してください。\n\n"
        )

    def _verify_phase() -> str:
        return (
            "## Phase 4: 検証\n\n"
            "1. `collect_artifact_paths` ツールでチェックアウトから候補パスを収集してください。\n"
            "2. 収集結果を `run_checklist` ツールに渡して全体を検証してください。\n"
            "3. FAILの結果は `expected` に示されたパスへファイルを移動・改名して解消してください。\n\n"
        )

    @mcp.prompt()
    async def feature_checklist(component: str, model: str) -> str:
        """コンポーネントにモデルを追加する機能追加ワークフロー。

        モデル → マイグレーション → GraphQL → React → ビューの追加と検証をガイドします。
        """
        return (
            f"# 機能追加ワークフロー: {component} / {model}\n\n"
            f"コンポーネント `{component}` にモデル `{model}` を追加します。\n\n"
            + _backend_phase()
            + _frontend_phase()
            + _verify_phase()
        )
