"""Data model shared by the wallet core and its collaborators."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

MEMO_MAX_BYTES = 28


class AssetKind(Enum):
    NATIVE = "native"
    ISSUED = "issued"


@dataclass(frozen=True)
class Identity:
    public_address: str
    secret_key: str = field(repr=False)

    @property
    def short_address(self) -> str:
        return f"{self.public_address[:8]}..."


@dataclass(frozen=True)
class Balance:
    kind: AssetKind
    amount: Decimal
    asset_code: str | None = None
    asset_issuer: str | None = None

    @property
    def is_native(self) -> bool:
        return self.kind is AssetKind.NATIVE

    @property
    def label(self) -> str:
        if self.is_native:
            return "XLM"
        return f"{self.asset_code}:{(self.asset_issuer or '')[:6]}..."

    @classmethod
    def from_horizon(cls, data: dict[str, Any]) -> "Balance | None":
        asset_type = data.get("asset_type")
        amount = Decimal(str(data.get("balance", "0")))
        if asset_type == "native":
            return cls(kind=AssetKind.NATIVE, amount=amount)
        if asset_type in ("credit_alphanum4", "credit_alphanum12"):
            return cls(
                kind=AssetKind.ISSUED,
                amount=amount,
                asset_code=data.get("asset_code"),
                asset_issuer=data.get("asset_issuer"),
            )
        # liquidity_pool_shares and future asset types carry no spendable balance here
        return None


@dataclass(frozen=True)
class AccountSnapshot:
    id: str
    sequence_number: int
    subentry_count: int
    balances: tuple[Balance, ...] = ()

    def __post_init__(self):
        natives = sum(1 for balance in self.balances if balance.is_native)
        if natives > 1:
            raise ValueError("Account snapshot has more than one native balance")

    @property
    def native_balance(self) -> Decimal:
        for balance in self.balances:
            if balance.is_native:
                return balance.amount
        return Decimal("0")

    @classmethod
    def from_horizon(cls, data: dict[str, Any]) -> "AccountSnapshot":
        balances = tuple(
            balance
            for balance in (Balance.from_horizon(b) for b in data.get("balances", []))
            if balance is not None
        )
        return cls(
            id=data.get("account_id") or data["id"],
            sequence_number=int(data.get("sequence", 0)),
            subentry_count=int(data.get("subentry_count", 0)),
            balances=balances,
        )


def truncate_memo(memo: str | None, max_bytes: int = MEMO_MAX_BYTES) -> str | None:
    if not memo:
        return None
    encoded = memo.encode("utf-8")
    if len(encoded) <= max_bytes:
        return memo
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


@dataclass(frozen=True)
class PaymentRequest:
    destination: str
    amount: str
    memo: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "memo", truncate_memo(self.memo))


@dataclass(frozen=True)
class SignedTransaction:
    envelope_xdr: str
    hash: str


@dataclass(frozen=True)
class SubmissionResult:
    hash: str
    status: str = "success"
    ledger: int | None = None


@dataclass(frozen=True)
class FundingResult:
    hash: str | None = None


class PaymentDirection(Enum):
    INCOMING = "IN"
    OUTGOING = "OUT"


@dataclass(frozen=True)
class PaymentRecord:
    id: str
    created_at: str
    source: str
    destination: str
    amount: Decimal
    asset_label: str
    transaction_hash: str

    def direction_for(self, address: str) -> PaymentDirection:
        if self.destination == address:
            return PaymentDirection.INCOMING
        return PaymentDirection.OUTGOING

    @classmethod
    def from_horizon(cls, data: dict[str, Any]) -> "PaymentRecord":
        if data.get("asset_type") == "native":
            asset_label = "XLM"
        else:
            asset_label = f"{data.get('asset_code')}:{str(data.get('asset_issuer', ''))[:6]}..."
        return cls(
            id=str(data.get("id", "")),
            created_at=data.get("created_at", ""),
            source=data.get("from", ""),
            destination=data.get("to", ""),
            amount=Decimal(str(data.get("amount", "0"))),
            asset_label=asset_label,
            transaction_hash=data.get("transaction_hash", ""),
        )


@dataclass
class MonitorHandle:
    address: str
    interval_millis: int
    cancelled: bool = False
    _signal: threading.Event = field(
        default_factory=threading.Event, repr=False, compare=False
    )
    _worker: threading.Thread | None = field(default=None, repr=False, compare=False)
