"""convlintのカスタム例外クラス。"""


class ConvLintError(Exception):
    """convlintの基底例外クラス。"""


class UnknownKindError(ConvLintError):
    """ルールテーブルに存在しないアーティファクト種別が指定された場合の例外。"""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unknown artifact kind: {kind}")
        self.kind = kind


class MissingMandatoryArtifactError(ConvLintError):
    """必須アーティファクト（model/migration）が指定されていない場合の例外。"""

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"Mandatory artifact not provided: {kind}. "
            "The model and its migration must be added before the remaining artifacts."
        )
        self.kind = kind


class PatternMismatchError(ConvLintError):
    """候補パス・識別子が規約パターンと一致しない場合の例外。"""

    def __init__(self, kind: str, expected: str, actual: str) -> None:
        super().__init__(f"Does not follow convention, expected {expected}")
        self.kind = kind
        self.expected = expected
        self.actual = actual


class InvalidNameError(ConvLintError):
    """コンポーネント名・モデル名をケース変換できない場合の例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid name: {name!r}")
        self.name = name


class RuleTableError(ConvLintError):
    """パスルール定義ファイルの読み込み・検証エラー。"""


class PathSpecError(ConvLintError):
    """`kind=path` 形式の指定を解釈できない場合の例外。"""

    def __init__(self, spec: str) -> None:
        super().__init__(f"Malformed path entry (expected kind=path): {spec!r}")
        self.spec = spec


class CollectionError(ConvLintError):
    """チェックアウトからのパス収集に失敗した場合の例外。"""
