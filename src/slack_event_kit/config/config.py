"""統合Config クラス"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from slack_event_kit.config.app import Mode, load_app_config
from slack_event_kit.config.env import load_env_config


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    slack_bot_token: str = Field(..., description="Slack Bot User OAuth Token (xoxb-)")
    slack_signing_secret: str = Field(default="", description="Events APIのリクエスト署名検証に使うSigning Secret")

    # config.yaml由来
    mode: Mode = Field(default="eventsapi", description="イベントの受信方法（eventsapi または rtm）")
    listen_port: int = Field(default=8080, description="Events APIのリクエストを待ち受けるポート")
    endpoint_path: str = Field(default="/slack/events", description="Events APIのリクエストを受けるパス")
    request_timeout: int = Field(default=3, description="Web APIのリクエストタイムアウト（秒）")

    model_config = {"extra": "forbid"}


def load_config(config_path: Path) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    Args:
        config_path: YAMLファイルのパス

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 必須の環境変数が欠けている場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    app_config = load_app_config(config_path)

    return Config(
        slack_bot_token=env_config.slack_bot_token,
        slack_signing_secret=env_config.slack_signing_secret,
        mode=app_config.mode,
        listen_port=app_config.listen_port,
        endpoint_path=app_config.endpoint_path,
        request_timeout=app_config.request_timeout,
    )
