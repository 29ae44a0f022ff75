"""Single native-asset payments from the session account."""

from __future__ import annotations

import logging
from decimal import Decimal

from stellar_wallet.features.account.service import SessionManager
from stellar_wallet.models import PaymentRequest, SubmissionResult
from stellar_wallet.shared.errors import WalletError, WalletErrorKind
from stellar_wallet.shared.protocols import LedgerClientProtocol, SignerProtocol
from stellar_wallet.shared.validation import AddressValidator, AmountValidator

logger = logging.getLogger(__name__)


class PaymentBuilder:
    def __init__(self, ledger: LedgerClientProtocol, signer: SignerProtocol):
        self.ledger = ledger
        self.signer = signer

    def build_and_submit(
        self,
        session: SessionManager,
        destination: str,
        amount: str,
        memo: str | None = None,
    ) -> SubmissionResult:
        identity = session.require_current()
        validated_amount = AmountValidator.accept(amount)
        validated_destination = AddressValidator.accept(destination)

        # Fresh snapshot so the sequence number reflects any earlier submission.
        snapshot = self.ledger.load_account(identity.public_address)

        native_balance = snapshot.native_balance
        if native_balance < Decimal(validated_amount):
            raise WalletError(
                kind=WalletErrorKind.INSUFFICIENT_BALANCE,
                message=f"Insufficient balance: {native_balance} < {validated_amount}",
            )

        request = PaymentRequest(
            destination=validated_destination,
            amount=validated_amount,
            memo=memo.strip() if memo else None,
        )
        base_fee = self.ledger.fetch_base_fee()
        signed = self.signer.sign(snapshot, request, identity.secret_key, base_fee)

        logger.info(
            "Submitting payment of %s XLM from %s to %s",
            request.amount,
            identity.public_address,
            request.destination,
        )
        return self.ledger.submit(signed)
