"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest

from convlint.config import LinterConfig
from convlint.rules.table import PathRuleTable, load_rule_table
from convlint.services.checklist import ChecklistRunner
from convlint.validators.checker import RuleChecker


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "src" / "convlint" / "data"


@pytest.fixture
def rule_table(config_dir: Path) -> PathRuleTable:
    """既定のパスルールテーブル。"""
    return load_rule_table(config_dir)


@pytest.fixture
def checker(rule_table: PathRuleTable) -> RuleChecker:
    """テスト用RuleChecker。"""
    return RuleChecker(rule_table)


@pytest.fixture
def runner(checker: RuleChecker) -> ChecklistRunner:
    """テスト用ChecklistRunner。"""
    return ChecklistRunner(checker)


@pytest.fixture
def linter_config(config_dir: Path) -> LinterConfig:
    """テスト用LinterConfig。"""
    return LinterConfig(config_dir=config_dir)


@pytest.fixture
def accounting_note_paths() -> dict[str, str]:
    """accounting/noteの規約どおりのパス一式。"""
    return {
        "model": "components/accounting/app/models/accounting/note.rb",
        "migration": "components/accounting/db/migrate/20240115093000_create_accounting_notes.rb",
        "graphql_type": "components/accounting/app/graphql/accounting/types/note_type.rb",
        "graphql_query": "components/accounting/app/graphql/accounting/queries/notes_query.rb",
        "schema_entry": "components/accounting/app/graphql/accounting/query_type.rb",
        "react_component": "components/accounting/app/frontend/components/note_list.jsx",
        "component_export": "components/accounting/app/frontend/index.js",
        "vite_entrypoint": "app/frontend/entrypoints/accounting.js",
        "view": "components/accounting/app/views/accounting/notes/index.html.erb",
    }
