"""環境変数とYAMLファイルによる設定管理モジュール"""

from slack_event_kit.config.app import AppConfig, Mode, load_app_config
from slack_event_kit.config.config import Config, load_config
from slack_event_kit.config.env import EnvConfig, load_env_config

__all__ = [
    "AppConfig",
    "Config",
    "EnvConfig",
    "Mode",
    "load_app_config",
    "load_config",
    "load_env_config",
]
