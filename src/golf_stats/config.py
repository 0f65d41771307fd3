"""設定管理モジュール

環境変数から設定を読み込み、アプリケーション全体で使用する設定を提供する。
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定

    環境変数または.envファイルから設定を読み込む。
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Field(
        default=Path("data"),
        description="ラウンドデータの保存ディレクトリ",
    )
    rounds_filename: str = Field(
        default="rounds.json",
        description="ラウンドデータのファイル名",
    )
    debug: bool = Field(
        default=False,
        description="デバッグモード(true: デバッグログ出力)",
    )
    default_course_name: str = Field(
        default="My Course",
        description="新規ラウンドのコース名",
    )

    @property
    def rounds_path(self) -> Path:
        """ラウンドデータファイルのパス"""
        return self.data_dir / self.rounds_filename


def get_settings() -> Settings:
    """設定インスタンスを取得する

    Returns:
        Settings: アプリケーション設定
    """
    return Settings()
