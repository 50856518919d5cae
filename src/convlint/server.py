"""FastMCPベースのMCPサーバー。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from convlint.config import LinterConfig
from convlint.prompts.workflow import register_workflow_prompts
from convlint.resources.conventions import register_convention_resources
from convlint.rules.table import load_rule_table
from convlint.services.checklist import ChecklistRunner
from convlint.tools.lint import register_lint_tools
from convlint.validators.checker import RuleChecker


def create_server(config: LinterConfig | None = None) -> FastMCP:
    """convlint MCPサーバーを作成し、ツール・リソース・プロンプトを登録する。

    Args:
        config: 設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。

    Raises:
        RuleTableError: パスルール定義が読み込めない場合。
    """
    if config is None:
        config = LinterConfig()

    mcp = FastMCP("convlint")

    # ルールテーブルは起動時に一度だけ読み込む
    table = load_rule_table(config.config_dir)
    checker = RuleChecker(table)
    runner = ChecklistRunner(checker)

    register_lint_tools(mcp, checker, runner)
    register_convention_resources(mcp, config.config_dir)
    register_workflow_prompts(mcp)

    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "rules": len(table)})

    return mcp
