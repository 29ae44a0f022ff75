"""Keypair handling and transaction envelopes via stellar-sdk."""

from __future__ import annotations

import logging

from stellar_sdk import Account, Asset, Keypair, TransactionBuilder

from stellar_wallet.models import (
    AccountSnapshot,
    Identity,
    PaymentRequest,
    SignedTransaction,
)
from stellar_wallet.shared.errors import WalletError, WalletErrorKind

logger = logging.getLogger(__name__)


class StellarSigner:
    def __init__(self, network_passphrase: str, transaction_timeout: int = 30):
        self.network_passphrase = network_passphrase
        self.transaction_timeout = transaction_timeout

    def generate(self) -> Identity:
        keypair = Keypair.random()
        return Identity(public_address=keypair.public_key, secret_key=keypair.secret)

    def derive(self, secret_key: str) -> Identity:
        try:
            keypair = Keypair.from_secret(secret_key.strip())
        except ValueError as e:
            raise WalletError(
                kind=WalletErrorKind.INVALID_SECRET,
                message="Secret key is not a valid seed (expected S...)",
            ) from e
        return Identity(public_address=keypair.public_key, secret_key=keypair.secret)

    def sign(
        self,
        snapshot: AccountSnapshot,
        request: PaymentRequest,
        secret_key: str,
        base_fee: int,
    ) -> SignedTransaction:
        keypair = Keypair.from_secret(secret_key)
        source = Account(account=snapshot.id, sequence=snapshot.sequence_number)

        builder = TransactionBuilder(
            source_account=source,
            network_passphrase=self.network_passphrase,
            base_fee=base_fee,
        ).append_payment_op(
            destination=request.destination,
            asset=Asset.native(),
            amount=request.amount,
        )
        if request.memo:
            builder = builder.add_text_memo(request.memo)

        envelope = builder.set_timeout(self.transaction_timeout).build()
        envelope.sign(keypair)

        tx_hash = envelope.hash_hex()
        logger.debug("Signed payment %s -> %s (%s XLM)", tx_hash, request.destination, request.amount)
        return SignedTransaction(envelope_xdr=envelope.to_xdr(), hash=tx_hash)
