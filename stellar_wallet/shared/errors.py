"""Wallet error kinds surfaced to the interactive loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from stellar_wallet.shared.network import NetworkError


class WalletErrorKind(Enum):
    INVALID_AMOUNT = "invalid_amount"
    INVALID_SECRET = "invalid_secret"
    INVALID_ADDRESS = "invalid_address"
    NO_ACTIVE_SESSION = "no_active_session"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    ACCOUNT_NOT_FOUND = "account_not_found"
    SUBMISSION_ERROR = "submission_error"
    TRANSIENT_NETWORK_ERROR = "transient_network_error"
    FUNDING_FAILED = "funding_failed"
    REQUEST_REJECTED = "request_rejected"


@dataclass
class WalletError(Exception):
    kind: WalletErrorKind
    message: str
    result_codes: dict[str, Any] | None = None
    original_error: Exception | None = None

    def __str__(self) -> str:
        if self.result_codes:
            return f"{self.message} {self.result_codes}"
        return self.message


def extract_result_codes(problem: dict[str, Any] | None) -> dict[str, Any] | None:
    """Pull ``extras.result_codes`` out of a Horizon problem document."""
    if not isinstance(problem, dict):
        return None
    extras = problem.get("extras")
    if not isinstance(extras, dict):
        return None
    codes = extras.get("result_codes")
    return codes if isinstance(codes, dict) else None


def from_network_error(
    error: NetworkError, context: str = "", submission: bool = False
) -> WalletError:
    prefix = f"{context}: " if context else ""

    if error.status_code == 404:
        return WalletError(
            kind=WalletErrorKind.ACCOUNT_NOT_FOUND,
            message=f"{prefix}Account not found (is it funded?)",
            original_error=error,
        )

    if error.is_transient:
        return WalletError(
            kind=WalletErrorKind.TRANSIENT_NETWORK_ERROR,
            message=f"{prefix}{error.message}",
            original_error=error,
        )

    if submission:
        return WalletError(
            kind=WalletErrorKind.SUBMISSION_ERROR,
            message=f"{prefix}Transaction rejected by the network",
            result_codes=extract_result_codes(error.problem),
            original_error=error,
        )

    # Reads only take an address from the user; a 400 means Horizon refused it.
    if error.status_code == 400:
        invalid_field = error.extras.get("invalid_field") or "account_id"
        return WalletError(
            kind=WalletErrorKind.INVALID_ADDRESS,
            message=f"{prefix}Horizon rejected {invalid_field}: {error.message}",
            original_error=error,
        )

    return WalletError(
        kind=WalletErrorKind.REQUEST_REJECTED,
        message=f"{prefix}{error.message}",
        original_error=error,
    )
