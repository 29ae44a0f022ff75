"""Locked reserve and spendable balance for an account snapshot."""

from dataclasses import dataclass
from decimal import Decimal

from stellar_wallet.models import AccountSnapshot

BASE_RESERVE = Decimal("0.5")
SUBENTRY_RESERVE = Decimal("0.5")
STROOP = Decimal("0.0000001")


@dataclass(frozen=True)
class ReserveSummary:
    total: Decimal
    locked: Decimal
    available: Decimal


def locked_reserve(subentry_count: int) -> Decimal:
    if subentry_count < 0:
        raise ValueError("subentry_count cannot be negative")
    return (BASE_RESERVE + subentry_count * SUBENTRY_RESERVE).quantize(STROOP)


def calculate_reserve(snapshot: AccountSnapshot) -> ReserveSummary:
    total = snapshot.native_balance.quantize(STROOP)
    locked = locked_reserve(snapshot.subentry_count)
    available = max(Decimal("0"), total - locked).quantize(STROOP)
    return ReserveSummary(total=total, locked=locked, available=available)
