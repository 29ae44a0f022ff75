"""Interfaces the wallet core consumes from its collaborators."""

from __future__ import annotations

from typing import Protocol

from stellar_wallet.models import (
    AccountSnapshot,
    FundingResult,
    Identity,
    PaymentRecord,
    PaymentRequest,
    SignedTransaction,
    SubmissionResult,
)


class LedgerClientProtocol(Protocol):
    """Account lookup, submission and payment history on the ledger."""

    def load_account(self, address: str) -> AccountSnapshot: ...
    def submit(self, signed: SignedTransaction) -> SubmissionResult: ...
    def payments_for(
        self, address: str, limit: int = 10, order: str = "desc"
    ) -> list[PaymentRecord]: ...
    def fetch_base_fee(self) -> int: ...


class FaucetProtocol(Protocol):
    """Testnet funding for freshly generated accounts."""

    def fund(self, address: str) -> FundingResult: ...


class SignerProtocol(Protocol):
    """Keypair generation, secret derivation and transaction signing."""

    def generate(self) -> Identity: ...
    def derive(self, secret_key: str) -> Identity: ...
    def sign(
        self,
        snapshot: AccountSnapshot,
        request: PaymentRequest,
        secret_key: str,
        base_fee: int,
    ) -> SignedTransaction: ...
