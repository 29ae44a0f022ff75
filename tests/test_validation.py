import pytest
from stellar_sdk import Keypair

from stellar_wallet.shared.errors import WalletError, WalletErrorKind
from stellar_wallet.shared.validation import (
    AddressValidator,
    AmountValidator,
    SecretValidator,
    ValidationResult,
)


class TestValidationResult:
    def test_valid_result(self):
        result = ValidationResult(is_valid=True, normalized_value="25")
        assert result.is_valid is True
        assert result.error_message is None
        assert result.normalized_value == "25"

    def test_invalid_result(self):
        result = ValidationResult(is_valid=False, error_message="Test error")
        assert result.is_valid is False
        assert result.normalized_value is None


class TestAmountValidator:
    @pytest.mark.parametrize("value", ["25", "25.1234567", "0.0000001", "1000000"])
    def test_accepts_valid_amounts(self, value):
        assert AmountValidator.accept(value) == value

    @pytest.mark.parametrize(
        "value", ["25.12345678", "-5", "0", "abc", "", "   ", "0.0000000", "1.", ".5", "1.2.3"]
    )
    def test_rejects_invalid_amounts(self, value):
        with pytest.raises(WalletError) as exc_info:
            AmountValidator.accept(value)
        assert exc_info.value.kind == WalletErrorKind.INVALID_AMOUNT

    def test_comma_decimal_separator_is_normalized(self):
        assert AmountValidator.accept("25,5") == "25.5"

    def test_whitespace_is_trimmed(self):
        assert AmountValidator.accept("  12.5 ") == "12.5"

    def test_empty_string_message(self):
        result = AmountValidator.validate("")
        assert result.is_valid is False
        assert "required" in result.error_message.lower()

    def test_negative_amount_message(self):
        result = AmountValidator.validate("-10")
        assert "positive" in result.error_message.lower()

    def test_zero_amount_message(self):
        result = AmountValidator.validate("0")
        assert "zero" in result.error_message.lower()

    def test_too_many_decimals_message(self):
        result = AmountValidator.validate("1.12345678")
        assert "decimal places" in result.error_message.lower()

    def test_non_numeric_message(self):
        result = AmountValidator.validate("abc")
        assert "valid number" in result.error_message.lower()

    @pytest.mark.parametrize(
        "value",
        [
            "٢٥",  # Arabic-Indic 25
            "２５",  # fullwidth 25
            "25.١",
            "१.5",  # Devanagari 1
        ],
    )
    def test_rejects_non_ascii_digits(self, value):
        result = AmountValidator.validate(value)
        assert result.is_valid is False
        assert "valid number" in result.error_message.lower()

    def test_non_ascii_excess_precision_is_not_a_decimal_places_error(self):
        result = AmountValidator.validate("1.١٢٣٤٥٦٧٨")
        assert "valid number" in result.error_message.lower()

    def test_accept_rejects_non_ascii_digits(self):
        with pytest.raises(WalletError) as exc_info:
            AmountValidator.accept("٢٥")
        assert exc_info.value.kind == WalletErrorKind.INVALID_AMOUNT


class TestAddressValidator:
    def test_valid_address(self):
        address = Keypair.random().public_key
        result = AddressValidator.validate(address)
        assert result.is_valid is True
        assert result.normalized_value == address

    def test_lowercase_is_normalized(self):
        address = Keypair.random().public_key
        assert AddressValidator.accept(address.lower()) == address

    def test_empty_address(self):
        result = AddressValidator.validate("")
        assert result.is_valid is False
        assert "required" in result.error_message.lower()

    def test_wrong_length(self):
        result = AddressValidator.validate("GABC")
        assert result.is_valid is False
        assert "56" in result.error_message

    def test_secret_seed_is_not_an_address(self):
        result = AddressValidator.validate(Keypair.random().secret)
        assert result.is_valid is False
        assert "'G'" in result.error_message

    def test_bad_checksum(self):
        address = Keypair.random().public_key
        last = "A" if address[-1] != "A" else "B"
        result = AddressValidator.validate(address[:-1] + last)
        assert result.is_valid is False

    def test_accept_raises_invalid_address(self):
        with pytest.raises(WalletError) as exc_info:
            AddressValidator.accept("not-an-address")
        assert exc_info.value.kind == WalletErrorKind.INVALID_ADDRESS


class TestSecretValidator:
    def test_valid_secret(self):
        secret = Keypair.random().secret
        assert SecretValidator.validate(f" {secret} ").normalized_value == secret

    def test_public_key_is_not_a_secret(self):
        result = SecretValidator.validate(Keypair.random().public_key)
        assert result.is_valid is False

    def test_empty_secret(self):
        result = SecretValidator.validate("")
        assert "required" in result.error_message.lower()
