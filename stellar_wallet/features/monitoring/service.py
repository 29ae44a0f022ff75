"""Polling balance monitor for Stellar Quick Wallet.

The monitor runs one daemon thread per handle. Each tick waits for the
interval, fetches a fresh account snapshot and reports the native balance.
Fetch failures are reported and polling continues; only ``cancel`` stops it.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from decimal import Decimal
from typing import Callable

from stellar_wallet.models import MonitorHandle
from stellar_wallet.shared.errors import WalletError, WalletErrorKind
from stellar_wallet.shared.protocols import LedgerClientProtocol

logger = logging.getLogger(__name__)

BalanceCallback = Callable[[str, Decimal, datetime], None]
ErrorCallback = Callable[[WalletError], None]


class BalanceMonitor:
    JOIN_TIMEOUT_SECONDS = 2.0

    def __init__(
        self,
        ledger: LedgerClientProtocol,
        on_balance: BalanceCallback | None = None,
        on_error: ErrorCallback | None = None,
    ):
        self.ledger = ledger
        self.on_balance = on_balance
        self.on_error = on_error

    def start(self, address: str, interval_millis: int) -> MonitorHandle:
        if interval_millis <= 0:
            raise ValueError("interval_millis must be positive")

        handle = MonitorHandle(address=address, interval_millis=interval_millis)
        worker = threading.Thread(
            target=self._poll_loop,
            args=(handle,),
            name=f"balance-monitor-{address[:8]}",
            daemon=True,
        )
        handle._worker = worker
        worker.start()
        logger.info("Balance monitor started for %s every %d ms", address, interval_millis)
        return handle

    def cancel(self, handle: MonitorHandle) -> None:
        if handle.cancelled:
            return

        handle.cancelled = True
        handle._signal.set()

        worker = handle._worker
        if worker is not None and worker is not threading.current_thread():
            worker.join(timeout=self.JOIN_TIMEOUT_SECONDS)
            if worker.is_alive():
                logger.warning("Balance monitor tick still in flight after cancel")
        logger.info("Balance monitor stopped for %s", handle.address)

    def _poll_loop(self, handle: MonitorHandle) -> None:
        interval_seconds = handle.interval_millis / 1000
        while not handle._signal.wait(interval_seconds):
            self._tick(handle)

    def _tick(self, handle: MonitorHandle) -> None:
        try:
            snapshot = self.ledger.load_account(handle.address)
        except WalletError as e:
            self._report_error(handle, e)
            return
        except Exception as e:
            logger.exception("Unexpected error while polling %s", handle.address)
            self._report_error(
                handle,
                WalletError(
                    kind=WalletErrorKind.TRANSIENT_NETWORK_ERROR,
                    message=str(e),
                    original_error=e,
                ),
            )
            return

        if handle.cancelled or self.on_balance is None:
            return
        try:
            self.on_balance(handle.address, snapshot.native_balance, datetime.now())
        except Exception as e:
            logger.error("Error in balance callback: %s", e)

    def _report_error(self, handle: MonitorHandle, error: WalletError) -> None:
        logger.warning("Balance poll failed: %s", error)
        if handle.cancelled or self.on_error is None:
            return
        try:
            self.on_error(error)
        except Exception as e:
            logger.error("Error in monitor error callback: %s", e)
