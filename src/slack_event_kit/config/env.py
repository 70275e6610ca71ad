"""Slackの認証情報を環境変数から読み込む

トークンやSigning SecretはYAMLの設定ファイルには書かず、環境変数でのみ受け取る。
"""

import os

from pydantic import BaseModel, Field, ValidationError

BOT_TOKEN_ENV = "SLACK_BOT_TOKEN"
SIGNING_SECRET_ENV = "SLACK_SIGNING_SECRET"


class EnvConfig(BaseModel):
    """環境変数から得たSlackの認証情報"""

    slack_bot_token: str = Field(..., description="Web APIとRTM APIの呼び出しに使うBot User OAuth Token (xoxb-)")
    slack_signing_secret: str = Field(default="", description="Events APIのリクエスト署名検証に使うSigning Secret")

    model_config = {"extra": "forbid"}


def load_env_config() -> EnvConfig:
    """SLACK_BOT_TOKENとSLACK_SIGNING_SECRETを読み込む

    SLACK_BOT_TOKENは必須。SLACK_SIGNING_SECRETは省略でき、その場合は空文字になる。
    空のSigning SecretのままEvents APIを起動するとエラーになるため、
    RTM APIだけを使う場合にのみ省略する。

    Returns:
        EnvConfig: Slackの認証情報

    Raises:
        ValueError: SLACK_BOT_TOKENが設定されていない、または値が不正な場合
    """
    try:
        return EnvConfig(
            slack_bot_token=os.environ[BOT_TOKEN_ENV],
            slack_signing_secret=os.environ.get(SIGNING_SECRET_ENV, ""),
        )
    except KeyError as e:
        msg = f"Slack bot token is not configured: set the {e} environment variable"
        raise ValueError(msg) from e
    except ValidationError as e:
        msg = f"Slack credentials given by environment variables are invalid: {e}"
        raise ValueError(msg) from e
