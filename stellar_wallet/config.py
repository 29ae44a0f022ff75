"""Runtime configuration for Stellar Quick Wallet."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from stellar_sdk import Network

from stellar_wallet.shared.network import RetryConfig, TimeoutConfig

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_URL = "https://horizon-testnet.stellar.org"
DEFAULT_FRIENDBOT_URL = "https://friendbot.stellar.org"


def resolve_wallet_dir(wallet_dir: str | Path | None = None) -> Path:
    if wallet_dir:
        return Path(wallet_dir).expanduser()

    env_dir = os.getenv("STELLAR_WALLET_DIR")
    if env_dir:
        return Path(env_dir).expanduser()

    return Path.home() / ".config" / "stellar-quick-wallet"


@dataclass
class WalletConfig:
    horizon_url: str = DEFAULT_HORIZON_URL
    friendbot_url: str = DEFAULT_FRIENDBOT_URL
    network_passphrase: str = Network.TESTNET_NETWORK_PASSPHRASE
    transaction_timeout: int = 30
    history_limit: int = 10
    default_monitor_interval_ms: int = 10_000
    timeout_config: TimeoutConfig = field(default_factory=TimeoutConfig)
    retry_config: RetryConfig = field(default_factory=RetryConfig)
    wallet_dir: Path = field(default_factory=resolve_wallet_dir)

    @property
    def config_file(self) -> Path:
        return self.wallet_dir / "config.json"

    @classmethod
    def load(cls, wallet_dir: str | Path | None = None) -> "WalletConfig":
        """Defaults, then ``config.json`` in the wallet dir, then environment."""
        config = cls(wallet_dir=resolve_wallet_dir(wallet_dir))
        config._apply_file()
        config._apply_environment()
        return config

    def _apply_file(self) -> None:
        if not self.config_file.exists():
            return

        try:
            with open(self.config_file, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", self.config_file, e)
            return

        self.horizon_url = data.get("horizon_url", self.horizon_url)
        self.friendbot_url = data.get("friendbot_url", self.friendbot_url)
        self.network_passphrase = data.get("network_passphrase", self.network_passphrase)
        self.history_limit = int(data.get("history_limit", self.history_limit))
        self.default_monitor_interval_ms = int(
            data.get("monitor_interval_ms", self.default_monitor_interval_ms)
        )

        timeout_cfg = data.get("timeout", {})
        if timeout_cfg:
            self.timeout_config = TimeoutConfig(
                connect_timeout=timeout_cfg.get("connect_timeout", 5.0),
                read_timeout=timeout_cfg.get("read_timeout", 15.0),
            )
        retry_cfg = data.get("retry", {})
        if retry_cfg:
            self.retry_config = RetryConfig(
                max_retries=retry_cfg.get("max_retries", 3),
                base_delay=retry_cfg.get("base_delay", 1.0),
                max_delay=retry_cfg.get("max_delay", 30.0),
            )

    def _apply_environment(self) -> None:
        self.horizon_url = os.getenv("STELLAR_WALLET_HORIZON_URL", self.horizon_url)
        self.friendbot_url = os.getenv(
            "STELLAR_WALLET_FRIENDBOT_URL", self.friendbot_url
        )
        self.network_passphrase = os.getenv(
            "STELLAR_WALLET_NETWORK_PASSPHRASE", self.network_passphrase
        )
