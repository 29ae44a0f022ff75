"""Sequential airdrop payments with continue-on-error semantics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from stellar_wallet.features.account.service import SessionManager
from stellar_wallet.features.transfer.service import PaymentBuilder
from stellar_wallet.shared.errors import WalletError
from stellar_wallet.shared.validation import AmountValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchRecipient:
    address: str
    memo: str | None = None


@dataclass
class BatchOutcome:
    destination: str
    success: bool
    hash: str | None = None
    error: WalletError | None = None


@dataclass
class BatchReport:
    amount: str
    outcomes: list[BatchOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.succeeded


def airdrop_memo(address: str) -> str:
    return f"Airdrop to {address[:6]}..."


def parse_destinations(raw: str) -> list[str]:
    """Split a comma separated list of addresses, dropping blanks."""
    return [part.strip() for part in raw.split(",") if part.strip()]


class BatchExecutor:
    def __init__(self, payment_builder: PaymentBuilder):
        self.payment_builder = payment_builder

    def run(
        self,
        session: SessionManager,
        destinations: Iterable[str | BatchRecipient],
        amount: str,
        on_outcome: Callable[[BatchOutcome], None] | None = None,
    ) -> BatchReport:
        session.require_current()
        validated_amount = AmountValidator.accept(amount)

        recipients = [
            d if isinstance(d, BatchRecipient) else BatchRecipient(address=d)
            for d in destinations
        ]
        report = BatchReport(amount=validated_amount)

        for index, recipient in enumerate(recipients, start=1):
            memo = recipient.memo or airdrop_memo(recipient.address)
            try:
                result = self.payment_builder.build_and_submit(
                    session, recipient.address, validated_amount, memo
                )
                outcome = BatchOutcome(
                    destination=recipient.address, success=True, hash=result.hash
                )
            except WalletError as e:
                logger.warning(
                    "Airdrop %d/%d to %s failed: %s",
                    index,
                    len(recipients),
                    recipient.address,
                    e,
                )
                outcome = BatchOutcome(destination=recipient.address, success=False, error=e)

            report.outcomes.append(outcome)
            if on_outcome:
                on_outcome(outcome)

        logger.info(
            "Airdrop finished: %d succeeded, %d failed", report.succeeded, report.failed
        )
        return report
