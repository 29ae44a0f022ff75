"""Menu-driven control loop for Stellar Quick Wallet."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable

from stellar_wallet.config import WalletConfig
from stellar_wallet.features.account.reserve import calculate_reserve
from stellar_wallet.features.account.service import SessionManager
from stellar_wallet.features.history.service import PaymentHistory
from stellar_wallet.features.monitoring.service import BalanceMonitor
from stellar_wallet.features.transfer.batch import (
    BatchExecutor,
    BatchOutcome,
    parse_destinations,
)
from stellar_wallet.features.transfer.fees import BASE_FEE_STROOPS, estimate_total_fee
from stellar_wallet.features.transfer.service import PaymentBuilder
from stellar_wallet.models import AccountSnapshot, truncate_memo
from stellar_wallet.shared.errors import WalletError
from stellar_wallet.shared.logging import get_user_friendly_error
from stellar_wallet.shared.protocols import LedgerClientProtocol
from stellar_wallet.shared.validation import AddressValidator, AmountValidator

logger = logging.getLogger(__name__)


class MenuState(Enum):
    MAIN_MENU = "main_menu"
    EXECUTING = "executing"
    MONITORING = "monitoring"
    EXIT = "exit"


MENU_OPTIONS: list[tuple[str, str]] = [
    ("1", "Create new account"),
    ("2", "Load existing account (SECRET)"),
    ("3", "View balance"),
    ("4", "Send payment"),
    ("5", "View history"),
    ("6", "Airdrop (send to several accounts)"),
    ("7", "Balance monitor (every N ms)"),
    ("8", "Fee calculator"),
    ("9", "Exit"),
]
EXIT_COMMAND = "9"


def describe_error(error: Exception) -> str:
    _, suggestion = get_user_friendly_error(error)
    if suggestion:
        return f"{error} ({suggestion})"
    return str(error)


class InteractiveController:
    def __init__(
        self,
        config: WalletConfig,
        ledger: LedgerClientProtocol,
        session: SessionManager,
        payments: PaymentBuilder,
        batch: BatchExecutor,
        history: PaymentHistory,
        monitor: BalanceMonitor | None = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.config = config
        self.ledger = ledger
        self.session = session
        self.payments = payments
        self.batch = batch
        self.history = history
        self.monitor = monitor or BalanceMonitor(
            ledger, on_balance=self._show_tick, on_error=self._show_tick_error
        )
        self._input = input_func
        self._output = output
        self.state = MenuState.MAIN_MENU
        self._commands: dict[str, Callable[[], None]] = {
            "1": self.create_account,
            "2": self.load_account,
            "3": self.view_balance,
            "4": self.send_payment,
            "5": self.view_history,
            "6": self.airdrop,
            "7": self.monitor_balance,
            "8": self.fee_calculator,
        }

    def _say(self, message: str = "") -> None:
        self._output(message)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def run(self) -> None:
        self.state = MenuState.MAIN_MENU
        try:
            while self.state is not MenuState.EXIT:
                self._show_menu()
                try:
                    self.dispatch(self._ask("Choose an option: "))
                except EOFError:
                    self.state = MenuState.EXIT
        finally:
            self.session.clear()

    def dispatch(self, choice: str) -> MenuState:
        if choice == EXIT_COMMAND:
            self._say("Goodbye!")
            self.state = MenuState.EXIT
            return self.state

        handler = self._commands.get(choice)
        if handler is None:
            self._say("Invalid option.")
            return self.state

        self.state = MenuState.EXECUTING
        try:
            handler()
        except WalletError as e:
            logger.info("Command %s failed: %s", choice, e.kind.value)
            self._say(f"Error: {describe_error(e)}")
        except ValueError as e:
            self._say(f"Error: {e}")
        finally:
            self.state = MenuState.MAIN_MENU
        return self.state

    def _show_menu(self) -> None:
        self._say("\n=== MY STELLAR WALLET (TESTNET) ===\n")
        for key, label in MENU_OPTIONS:
            self._say(f"{key}. {label}")
        current = self.session.current()
        if current:
            self._say(f"\nActive account: {current.public_address}")
        self._say()

    def _target_address(self) -> str:
        current = self.session.current()
        if current:
            return current.public_address
        return AddressValidator.accept(self._ask("Public key (G...): "))

    def create_account(self) -> None:
        self._say("Generating key pair...")
        creation = self.session.create_identity()
        self._say("Account generated!")
        self._say(f"PUBLIC KEY (shareable):\n{creation.identity.public_address}")
        self._say(f"SECRET KEY (never share):\n{creation.identity.secret_key}")

        if not creation.funded:
            self._say(f"Funding failed: {creation.error}")
            self._say("The account was not loaded; fund it and load it with option 2.")
            return

        tx_hash = creation.funding.hash if creation.funding else None
        self._say("Funded by Friendbot.")
        self._say(f"Tx hash: {tx_hash or '(not provided)'}")
        self._say("Session updated: account loaded in memory.")

    def load_account(self) -> None:
        identity = self.session.load_identity(self._ask("Enter your SECRET KEY (S...): "))
        self._say(f"Account loaded. PUBLIC KEY: {identity.public_address}")

    def view_balance(self) -> None:
        address = self._target_address()
        self._say(f"\nQuerying account: {address[:8]}...\n")
        snapshot = self.ledger.load_account(address)
        self._say(f"Account ID:\n   {snapshot.id}")
        self._say(f"Sequence:\n   {snapshot.sequence_number}\n")
        self._print_balances(snapshot)

    def _print_balances(self, snapshot: AccountSnapshot) -> None:
        self._say("BALANCES")
        for index, balance in enumerate(snapshot.balances, start=1):
            if balance.is_native:
                reserve = calculate_reserve(snapshot)
                self._say(f"{index}. XLM (Lumens):")
                self._say(f"   Total:     {balance.amount} XLM")
                self._say(f"   Locked:    {reserve.locked} XLM")
                self._say(f"   Available: {reserve.available} XLM")
            else:
                self._say(
                    f"{index}. {balance.asset_code}: {balance.amount} "
                    f"(issuer {(balance.asset_issuer or '')[:8]}...)"
                )

    def send_payment(self) -> None:
        self.session.require_current()
        destination = self._ask("Destination (G...): ")
        amount = self._ask("Amount XLM (e.g. 25 or 25.0000000): ")
        memo = self._ask("Memo (optional, max 28 bytes): ")

        result = self.payments.build_and_submit(self.session, destination, amount, memo or None)
        self._say("\nPAYMENT SUCCESSFUL!")
        self._say(f"Memo: {truncate_memo(memo) or '(no memo)'}")
        self._say(f"Sent: {AmountValidator.normalize(amount)} XLM")
        self._say(f"Hash: {result.hash}\n")

    def view_history(self) -> None:
        address = self._target_address()
        entries = self.history.recent_payments(address, self.config.history_limit)
        self._say(f"\nLatest payments (max {self.config.history_limit}):\n")
        if not entries:
            self._say("No payments found.")
        for entry in entries:
            record = entry.record
            self._say(
                f"{record.created_at}  {entry.direction.value:<3}  "
                f"{record.amount} {record.asset_label}"
            )
            self._say(
                f"   from {record.source[:6]}... to {record.destination[:6]}...  "
                f"(tx: {record.transaction_hash})\n"
            )

    def airdrop(self) -> None:
        self.session.require_current()
        destinations = parse_destinations(
            self._ask("Enter accounts separated by commas: ")
        )
        amount = AmountValidator.accept(self._ask("XLM amount per account: "))
        if not destinations:
            raise ValueError("No destination accounts provided.")

        report = self.batch.run(
            self.session, destinations, amount, on_outcome=self._show_outcome
        )
        self._say(f"Airdrop done: {report.succeeded} sent, {report.failed} failed.")

    def _show_outcome(self, outcome: BatchOutcome) -> None:
        if outcome.success:
            self._say(f"Sent to {outcome.destination} (hash {outcome.hash})")
        else:
            self._say(f"Failed to send to {outcome.destination}: {outcome.error}")

    def monitor_balance(self) -> None:
        address = self._target_address()
        raw_interval = self._ask(
            f"Interval ms (e.g. {self.config.default_monitor_interval_ms}), press enter: "
        )
        try:
            interval = int(raw_interval)
        except ValueError:
            interval = 0
        if interval <= 0:
            interval = self.config.default_monitor_interval_ms

        handle = self.monitor.start(address, interval)
        self.state = MenuState.MONITORING
        self._say(f"\nMonitoring {address[:8]}... every {interval} ms. Press ENTER to stop.\n")
        try:
            self._input("")
        finally:
            self.monitor.cancel(handle)
            self._say("Monitoring stopped.\n")

    def _show_tick(self, address: str, balance: Decimal, at: datetime) -> None:
        self._say(f"[{at.strftime('%H:%M:%S')}] Balance: {balance} XLM")

    def _show_tick_error(self, error: WalletError) -> None:
        self._say(f"Query failed: {describe_error(error)}")

    def fee_calculator(self) -> None:
        try:
            transactions = int(self._ask("Number of transactions: "))
            operations = int(self._ask("Operations per transaction: "))
        except ValueError:
            raise ValueError("Enter whole numbers.") from None

        cost = estimate_total_fee(transactions, operations, BASE_FEE_STROOPS)
        self._say(
            f"\nEstimated cost: {cost:.7f} XLM (BASE_FEE={BASE_FEE_STROOPS} stroops/op)\n"
        )
