"""`lint-conventions` コマンドラインエントリポイント。"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from convlint.config import LOG_LEVELS, LinterConfig
from convlint.models.artifact import ArtifactKind, CheckResult, LintReport, parse_kind
from convlint.models.errors import ConvLintError, PathSpecError, RuleTableError
from convlint.rules.table import load_rule_table
from convlint.services.checklist import ChecklistRunner
from convlint.services.collector import collect_paths
from convlint.validators.checker import RuleChecker

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # stdoutはレポート出力専用
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    kinds = ", ".join(kind.value for kind in ArtifactKind)
    parser = argparse.ArgumentParser(
        prog="lint-conventions",
        description="Check that a feature's files follow the component placement and naming conventions",
    )
    parser.add_argument("--component", required=True, help="Component name, e.g. accounting")
    parser.add_argument("--model", required=True, help="Model name, e.g. note")
    parser.add_argument(
        "--paths",
        action="append",
        default=[],
        metavar="KIND=PATH,...",
        help=f"Comma-separated kind=path entries (repeatable). Kinds: {kinds}",
    )
    parser.add_argument("--root", default=None, help="Collect candidate paths from this checkout")
    parser.add_argument("--expected", action="store_true", help="Print the expected paths and exit")
    parser.add_argument("--format", choices=["text", "json"], default="text")
    parser.add_argument("--config-dir", default=None, help="Directory containing path-rules.yaml")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser


def parse_path_specs(entries: list[str]) -> dict[ArtifactKind, str]:
    """`kind=path` 形式の指定を解釈する。後の指定が優先される。

    Raises:
        PathSpecError: `=` がない、またはパスが空の場合。
        UnknownKindError: 種別が存在しない場合。
    """
    paths: dict[ArtifactKind, str] = {}
    for entry in entries:
        for spec in entry.split(","):
            if not spec.strip():
                continue
            kind, sep, path = spec.partition("=")
            if not sep or not path.strip():
                raise PathSpecError(spec)
            paths[parse_kind(kind)] = path.strip()
    return paths


def format_result(result: CheckResult) -> str:
    line = f"{'PASS' if result.passed else 'FAIL'} {result.kind.value} {result.actual or '-'}"
    if not result.passed and result.message:
        line += f" {result.message}"
    return line


def render_report(report: LintReport, output_format: str) -> str:
    if output_format == "json":
        return report.model_dump_json(indent=2)
    return "\n".join(format_result(r) for r in report.results)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = LinterConfig()
    except ValidationError as exc:
        parser.error(f"Invalid CONVLINT_ settings: {exc}")
        return 2
    configure_logging(args.log_level or config.log_level)
    config_dir = Path(args.config_dir) if args.config_dir else config.config_dir
    logger.debug("Using path rules from %s", config_dir)

    try:
        table = load_rule_table(config_dir)
    except RuleTableError as exc:
        parser.error(str(exc))
        return 2

    checker = RuleChecker(table)
    runner = ChecklistRunner(checker)

    try:
        if args.expected:
            expected = runner.expected_paths(args.component, args.model)
            if args.format == "json":
                print(json.dumps([e.model_dump(mode="json") for e in expected], indent=2, ensure_ascii=False))
            else:
                for item in expected:
                    print(f"{item.kind.value} {item.path} {item.identifier}")
            return 0

        provided: dict[ArtifactKind, str] = {}
        if args.root:
            provided.update(collect_paths(Path(args.root), args.component, args.model, table))
        provided.update(parse_path_specs(args.paths))
    except ConvLintError as exc:
        parser.error(str(exc))
        return 2

    report = runner.run(args.component, args.model, provided)
    print(render_report(report, args.format))
    return report.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
