import pytest
from stellar_sdk import Keypair, Network, TransactionEnvelope
from stellar_sdk.memo import TextMemo

from stellar_wallet.models import AccountSnapshot, PaymentRequest
from stellar_wallet.shared.errors import WalletError, WalletErrorKind
from stellar_wallet.signing import StellarSigner

PASSPHRASE = Network.TESTNET_NETWORK_PASSPHRASE


class TestStellarSigner:
    def test_generate_returns_matching_pair(self, signer):
        identity = signer.generate()
        assert identity.public_address.startswith("G")
        assert Keypair.from_secret(identity.secret_key).public_key == identity.public_address

    def test_derive(self, signer, random_keypair):
        identity = signer.derive(f"  {random_keypair.secret}  ")
        assert identity.public_address == random_keypair.public_key

    def test_derive_invalid_secret(self, signer):
        with pytest.raises(WalletError) as exc_info:
            signer.derive("SNOTAVALIDSEED")
        assert exc_info.value.kind == WalletErrorKind.INVALID_SECRET

    def test_sign_builds_payment_envelope(self, random_keypair, destination):
        signer = StellarSigner(PASSPHRASE, transaction_timeout=30)
        snapshot = AccountSnapshot(
            id=random_keypair.public_key, sequence_number=41, subentry_count=0
        )
        request = PaymentRequest(destination=destination, amount="25.5", memo="hello")

        signed = signer.sign(snapshot, request, random_keypair.secret, base_fee=100)

        envelope = TransactionEnvelope.from_xdr(signed.envelope_xdr, PASSPHRASE)
        tx = envelope.transaction
        assert signed.hash == envelope.hash_hex()
        assert tx.sequence == 42
        assert tx.fee == 100
        assert len(tx.operations) == 1
        assert tx.operations[0].destination.account_id == destination
        assert str(tx.operations[0].amount) in ("25.5", "25.5000000")
        assert isinstance(tx.memo, TextMemo)
        assert tx.memo.memo_text == b"hello"
        assert len(envelope.signatures) == 1

    def test_sign_without_memo(self, random_keypair, destination):
        signer = StellarSigner(PASSPHRASE)
        snapshot = AccountSnapshot(
            id=random_keypair.public_key, sequence_number=1, subentry_count=0
        )
        request = PaymentRequest(destination=destination, amount="1")

        signed = signer.sign(snapshot, request, random_keypair.secret, base_fee=100)

        envelope = TransactionEnvelope.from_xdr(signed.envelope_xdr, PASSPHRASE)
        assert not isinstance(envelope.transaction.memo, TextMemo)
