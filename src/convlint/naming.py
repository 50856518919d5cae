"""コンポーネント名・モデル名のケース変換。

ファイルパスはsnake_case、クラス識別子はPascalCase、
GraphQLフィールド名はsnake_case、クライアント側のフィールド名はcamelCaseを使う。
"""

import re

from convlint.models.errors import InvalidNameError

_VALID_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_\- ]*$")
_SEPARATORS = re.compile(r"[_\- ]+")
_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

_IRREGULAR_PLURALS: dict[str, str] = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
}
_UNCOUNTABLE: set[str] = {"equipment", "information", "series", "species", "news", "data"}


def split_words(name: str) -> list[str]:
    """名前を小文字の単語リストに分解する。

    Raises:
        InvalidNameError: 空文字列、または英数字・`_`・`-`・空白以外を含む場合。
    """
    text = name.strip()
    if not text or not _VALID_NAME.match(text):
        raise InvalidNameError(name)

    words: list[str] = []
    for chunk in _SEPARATORS.split(text):
        if chunk:
            words.extend(part for part in _CASE_BOUNDARY.split(chunk) if part)
    return [w.lower() for w in words]


def to_snake_case(name: str) -> str:
    return "_".join(split_words(name))


def to_pascal_case(name: str) -> str:
    return "".join(w.capitalize() for w in split_words(name))


def to_camel_case(name: str) -> str:
    first, *rest = split_words(name)
    return first + "".join(w.capitalize() for w in rest)


def camel_to_snake(name: str) -> str:
    """クライアント側のフィールド名（camelCase）をGraphQLフィールド名に戻す。"""
    return to_snake_case(name)


def pluralize(name: str) -> str:
    """snake_case名の最後の単語を複数形にする（テーブル名・ビューディレクトリ用）。"""
    *head, last = split_words(name)
    if last in _UNCOUNTABLE:
        plural = last
    elif last in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[last]
    elif re.search(r"[^aeiou]y$", last):
        plural = last[:-1] + "ies"
    elif re.search(r"(s|x|z|ch|sh)$", last):
        plural = last + "es"
    else:
        plural = last + "s"
    return "_".join([*head, plural])


def template_values(component_name: str, model_name: str) -> dict[str, str]:
    """パステンプレート・識別子テンプレートのプレースホルダ値を組み立てる。"""
    models = pluralize(model_name)
    return {
        "component": to_snake_case(component_name),
        "Component": to_pascal_case(component_name),
        "model": to_snake_case(model_name),
        "Model": to_pascal_case(model_name),
        "models": models,
        "Models": to_pascal_case(models),
    }


def graphql_field_name(component_name: str, model_name: str) -> str:
    # e.g. accounting + note -> accounting_note
    return f"{to_snake_case(component_name)}_{to_snake_case(model_name)}"


def client_field_name(component_name: str, model_name: str) -> str:
    return to_camel_case(graphql_field_name(component_name, model_name))
