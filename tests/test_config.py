import json

from stellar_sdk import Network

from stellar_wallet.config import (
    DEFAULT_FRIENDBOT_URL,
    DEFAULT_HORIZON_URL,
    WalletConfig,
    resolve_wallet_dir,
)


class TestResolveWalletDir:
    def test_explicit_dir_wins(self, tmp_path):
        assert resolve_wallet_dir(tmp_path / "w") == tmp_path / "w"

    def test_environment_dir(self, isolate_wallet_storage):
        assert resolve_wallet_dir() == isolate_wallet_storage

    def test_home_default(self, monkeypatch, tmp_path):
        monkeypatch.delenv("STELLAR_WALLET_DIR")
        monkeypatch.setenv("HOME", str(tmp_path))

        assert resolve_wallet_dir() == tmp_path / ".config" / "stellar-quick-wallet"


class TestWalletConfig:
    def test_defaults_target_testnet(self, monkeypatch):
        for name in (
            "STELLAR_WALLET_HORIZON_URL",
            "STELLAR_WALLET_FRIENDBOT_URL",
            "STELLAR_WALLET_NETWORK_PASSPHRASE",
        ):
            monkeypatch.delenv(name, raising=False)

        config = WalletConfig.load()

        assert config.horizon_url == DEFAULT_HORIZON_URL
        assert config.friendbot_url == DEFAULT_FRIENDBOT_URL
        assert config.network_passphrase == Network.TESTNET_NETWORK_PASSPHRASE
        assert config.transaction_timeout == 30
        assert config.history_limit == 10
        assert config.default_monitor_interval_ms == 10_000

    def test_config_file_values(self, tmp_path, monkeypatch):
        monkeypatch.delenv("STELLAR_WALLET_HORIZON_URL", raising=False)
        (tmp_path / "config.json").write_text(
            json.dumps(
                {
                    "horizon_url": "http://localhost:8000",
                    "history_limit": 5,
                    "monitor_interval_ms": 2500,
                    "timeout": {"read_timeout": 3.0},
                    "retry": {"max_retries": 1},
                }
            )
        )

        config = WalletConfig.load(tmp_path)

        assert config.horizon_url == "http://localhost:8000"
        assert config.history_limit == 5
        assert config.default_monitor_interval_ms == 2500
        assert config.timeout_config.read_timeout == 3.0
        assert config.timeout_config.connect_timeout == 5.0
        assert config.retry_config.max_retries == 1

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        (tmp_path / "config.json").write_text(json.dumps({"horizon_url": "http://file"}))
        monkeypatch.setenv("STELLAR_WALLET_HORIZON_URL", "http://env")

        assert WalletConfig.load(tmp_path).horizon_url == "http://env"

    def test_unreadable_config_file_ignored(self, tmp_path):
        (tmp_path / "config.json").write_text("{not json")

        config = WalletConfig.load(tmp_path)

        assert config.history_limit == 10
