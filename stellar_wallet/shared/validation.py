"""Input validation for amounts, addresses and secret seeds."""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from stellar_sdk import StrKey

from stellar_wallet.shared.errors import WalletError, WalletErrorKind


@dataclass
class ValidationResult:
    is_valid: bool
    error_message: str | None = None
    normalized_value: Any = None


class AmountValidator:
    # The native asset has 7 fractional digits (1 XLM = 10,000,000 stroops).
    MAX_DECIMAL_PLACES = 7
    AMOUNT_PATTERN = re.compile(r"^[0-9]+(\.[0-9]{1,7})?$")
    EXCESS_PRECISION_PATTERN = re.compile(r"^[0-9]+\.[0-9]{8,}$")

    @staticmethod
    def normalize(value: str) -> str:
        return str(value).replace(",", ".", 1).strip()

    @classmethod
    def validate(cls, value: str) -> ValidationResult:
        if value is None or not str(value).strip():
            return ValidationResult(
                is_valid=False,
                error_message="Amount is required",
            )

        normalized = cls.normalize(value)

        if normalized.startswith("-") or normalized.startswith("+"):
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be a positive number",
            )

        if not cls.AMOUNT_PATTERN.match(normalized):
            if cls.EXCESS_PRECISION_PATTERN.match(normalized):
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Too many decimal places. Maximum {cls.MAX_DECIMAL_PLACES} allowed",
                )
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be a valid number",
            )

        try:
            amount_decimal = Decimal(normalized)
        except InvalidOperation:
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be a valid number",
            )

        if amount_decimal <= 0:
            return ValidationResult(
                is_valid=False,
                error_message="Amount must be greater than zero",
            )

        return ValidationResult(is_valid=True, normalized_value=normalized)

    @classmethod
    def accept(cls, value: str) -> str:
        """Return the normalized amount string or raise ``INVALID_AMOUNT``."""
        result = cls.validate(value)
        if not result.is_valid:
            raise WalletError(
                kind=WalletErrorKind.INVALID_AMOUNT,
                message=result.error_message or "Invalid amount",
            )
        return result.normalized_value


class AddressValidator:
    ADDRESS_LENGTH = 56

    @staticmethod
    def validate(value: str) -> ValidationResult:
        if not value or not value.strip():
            return ValidationResult(
                is_valid=False,
                error_message="Address is required",
            )

        normalized = value.strip().upper()

        if len(normalized) != AddressValidator.ADDRESS_LENGTH:
            return ValidationResult(
                is_valid=False,
                error_message=f"Address must be {AddressValidator.ADDRESS_LENGTH} characters long",
            )

        if not normalized.startswith("G"):
            return ValidationResult(
                is_valid=False,
                error_message="Address must start with 'G'",
            )

        if not StrKey.is_valid_ed25519_public_key(normalized):
            return ValidationResult(
                is_valid=False,
                error_message="Address checksum is invalid",
            )

        return ValidationResult(is_valid=True, normalized_value=normalized)

    @classmethod
    def accept(cls, value: str) -> str:
        result = cls.validate(value)
        if not result.is_valid:
            raise WalletError(
                kind=WalletErrorKind.INVALID_ADDRESS,
                message=result.error_message or "Invalid address",
            )
        return result.normalized_value


class SecretValidator:
    @staticmethod
    def validate(value: str) -> ValidationResult:
        if not value or not value.strip():
            return ValidationResult(
                is_valid=False,
                error_message="Secret key is required",
            )

        normalized = value.strip()
        if not StrKey.is_valid_ed25519_secret_seed(normalized):
            return ValidationResult(
                is_valid=False,
                error_message="Secret key is not a valid seed (expected S...)",
            )

        return ValidationResult(is_valid=True, normalized_value=normalized)
