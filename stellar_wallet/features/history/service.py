"""Recent payment history for an account."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stellar_wallet.models import PaymentDirection, PaymentRecord
from stellar_wallet.shared.protocols import LedgerClientProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    record: PaymentRecord
    direction: PaymentDirection

    @property
    def counterparty(self) -> str:
        if self.direction is PaymentDirection.INCOMING:
            return self.record.source
        return self.record.destination


class PaymentHistory:
    def __init__(self, ledger: LedgerClientProtocol, default_limit: int = 10):
        self.ledger = ledger
        self.default_limit = default_limit

    def recent_payments(self, address: str, limit: int | None = None) -> list[HistoryEntry]:
        """Newest first, payment operations only."""
        records = self.ledger.payments_for(
            address, limit=limit or self.default_limit, order="desc"
        )
        logger.debug("Fetched %d payments for %s", len(records), address)
        return [
            HistoryEntry(record=record, direction=record.direction_for(address))
            for record in records
        ]
