"""Main application entry point for Stellar Quick Wallet."""

import logging
import sys

from stellar_wallet.config import WalletConfig
from stellar_wallet.controller import InteractiveController
from stellar_wallet.features.account.service import SessionManager
from stellar_wallet.features.history.service import PaymentHistory
from stellar_wallet.features.transfer.batch import BatchExecutor
from stellar_wallet.features.transfer.service import PaymentBuilder
from stellar_wallet.horizon import FriendbotClient, HorizonClient
from stellar_wallet.shared.logging import LoggingConfig, setup_logging
from stellar_wallet.signing import StellarSigner

logger = logging.getLogger(__name__)


def build_controller(config: WalletConfig) -> InteractiveController:
    ledger = HorizonClient(config)
    signer = StellarSigner(config.network_passphrase, config.transaction_timeout)
    session = SessionManager(signer=signer, faucet=FriendbotClient(config))
    payments = PaymentBuilder(ledger=ledger, signer=signer)

    return InteractiveController(
        config=config,
        ledger=ledger,
        session=session,
        payments=payments,
        batch=BatchExecutor(payments),
        history=PaymentHistory(ledger, default_limit=config.history_limit),
    )


def main() -> int:
    """Entry point for the application."""
    config = WalletConfig.load()
    setup_logging(LoggingConfig.from_environment(log_dir=config.wallet_dir))
    logger.info("Starting wallet against %s", config.horizon_url)

    try:
        build_controller(config).run()
    except KeyboardInterrupt:
        print("\nGoodbye!")
    except Exception:
        logger.exception("Wallet terminated unexpectedly")
        print("Unexpected error, see wallet.log for details.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
