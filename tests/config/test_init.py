"""config/__init__.pyの統合テスト"""

from slack_event_kit.config import AppConfig, Config, EnvConfig, load_app_config, load_config, load_env_config


def test_can_import_env_config() -> None:
    """EnvConfigをインポートできること"""
    assert EnvConfig is not None


def test_can_import_app_config() -> None:
    """AppConfigをインポートできること"""
    assert AppConfig is not None


def test_can_import_config() -> None:
    """Configをインポートできること"""
    assert Config is not None


def test_can_import_loaders() -> None:
    """各設定の読み込み関数をインポートできること"""
    assert load_env_config is not None
    assert load_app_config is not None
    assert load_config is not None
