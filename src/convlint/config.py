"""convlintの設定管理。"""

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LinterConfig(BaseSettings):
    """CLI・MCPサーバー共通の設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "CONVLINT_"}

    # 既定のルールファイルはパッケージに同梱
    config_dir: Path = _PACKAGE_ROOT / "data"
    log_level: LogLevel = "WARNING"

    # MCPサーバー
    host: str = "127.0.0.1"
    port: int = 8000
    url_token: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
