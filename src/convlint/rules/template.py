"""パステンプレートの展開とパターン化。"""

import re
from collections.abc import Mapping

from convlint.models.artifact import PLACEHOLDER

# Railsのマイグレーションファイル名先頭のタイムスタンプ（YYYYMMDDHHMMSS）
TIMESTAMP_PATTERN = r"\d{14}"
TIMESTAMP_LABEL = "YYYYMMDDHHMMSS"


def render_template(template: str, values: Mapping[str, str]) -> str:
    """プレースホルダを値で置き換える。値のないプレースホルダはそのまま残す。"""
    return PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), template)


def compile_template(template: str, values: Mapping[str, str]) -> re.Pattern[str]:
    """テンプレートを完全一致用の正規表現に変換する。

    名前のプレースホルダはリテラルとして、`{timestamp}` は14桁の数字として扱う。
    """
    parts: list[str] = []
    position = 0
    for match in PLACEHOLDER.finditer(template):
        parts.append(re.escape(template[position : match.start()]))
        name = match.group(1)
        if name == "timestamp":
            parts.append(TIMESTAMP_PATTERN)
        else:
            parts.append(re.escape(values[name]))
        position = match.end()
    parts.append(re.escape(template[position:]))
    return re.compile("".join(parts))


def normalize_path(path: str) -> str:
    """区切り文字を `/` に揃え、先頭の `./` を除去する。"""
    normalized = path.strip().replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized
