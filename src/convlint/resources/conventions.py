"""規約関連のMCPリソース定義。"""

from pathlib import Path

import yaml
from fastmcp import FastMCP

from convlint.rules.table import RULES_FILE_NAME


def register_convention_resources(mcp: FastMCP, config_dir: Path) -> None:
    """規約関連のMCPリソースを登録する。"""

    @mcp.resource("convlint://conventions/path-rules")
    async def path_rules() -> str:
        """パスルール定義（クイックリファレンス）を取得する。

        アーティファクト種別ごとのパステンプレート、識別子テンプレート、必須かどうかを返します。
        """
        with open(config_dir / RULES_FILE_NAME, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)
