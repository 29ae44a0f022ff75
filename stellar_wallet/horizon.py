"""Horizon and Friendbot clients backing the wallet core."""

from __future__ import annotations

import logging

from stellar_wallet.config import WalletConfig
from stellar_wallet.models import (
    AccountSnapshot,
    FundingResult,
    PaymentRecord,
    SignedTransaction,
    SubmissionResult,
)
from stellar_wallet.shared.errors import WalletError, WalletErrorKind, from_network_error
from stellar_wallet.shared.network import NetworkClient, NetworkError

logger = logging.getLogger(__name__)

DEFAULT_BASE_FEE = 100


class HorizonClient:
    def __init__(self, config: WalletConfig, network_client: NetworkClient | None = None):
        self.config = config
        self._network_client = network_client or NetworkClient(
            base_url=config.horizon_url,
            timeout_config=config.timeout_config,
            retry_config=config.retry_config,
        )

    def load_account(self, address: str) -> AccountSnapshot:
        try:
            data = self._network_client.get(
                f"/accounts/{address}", context="Load account"
            )
        except NetworkError as e:
            raise from_network_error(e, context="Load account") from e

        snapshot = AccountSnapshot.from_horizon(data)
        logger.debug(
            "Loaded account %s: sequence=%s subentries=%s",
            snapshot.id,
            snapshot.sequence_number,
            snapshot.subentry_count,
        )
        return snapshot

    def submit(self, signed: SignedTransaction) -> SubmissionResult:
        try:
            data = self._network_client.post(
                "/transactions",
                context="Submit transaction",
                data={"tx": signed.envelope_xdr},
            )
        except NetworkError as e:
            error = from_network_error(e, context="Submit transaction", submission=True)
            logger.error(
                "Transaction %s failed: %s (codes=%s)",
                signed.hash,
                error.kind.value,
                error.result_codes,
            )
            raise error from e

        if data.get("successful") is False:
            raise WalletError(
                kind=WalletErrorKind.SUBMISSION_ERROR,
                message="Transaction was not successful",
                result_codes=data.get("extras", {}).get("result_codes"),
            )

        result = SubmissionResult(
            hash=data.get("hash", signed.hash),
            status="success",
            ledger=data.get("ledger"),
        )
        logger.info("Transaction submitted: %s (ledger %s)", result.hash, result.ledger)
        return result

    def payments_for(
        self, address: str, limit: int = 10, order: str = "desc"
    ) -> list[PaymentRecord]:
        try:
            data = self._network_client.get(
                f"/accounts/{address}/payments",
                context="Payment history",
                params={"limit": limit, "order": order},
            )
        except NetworkError as e:
            raise from_network_error(e, context="Payment history") from e

        records = data.get("_embedded", {}).get("records", [])
        return [
            PaymentRecord.from_horizon(record)
            for record in records
            if record.get("type") == "payment"
        ]

    def fetch_base_fee(self) -> int:
        try:
            data = self._network_client.get("/fee_stats", context="Fee stats")
            return int(data.get("last_ledger_base_fee", DEFAULT_BASE_FEE))
        except (NetworkError, ValueError) as e:
            logger.warning(
                "Could not read base fee, using %d stroops: %s", DEFAULT_BASE_FEE, e
            )
            return DEFAULT_BASE_FEE


class FriendbotClient:
    def __init__(self, config: WalletConfig, network_client: NetworkClient | None = None):
        self._network_client = network_client or NetworkClient(
            base_url=config.friendbot_url,
            timeout_config=config.timeout_config,
            retry_config=config.retry_config,
        )

    def fund(self, address: str) -> FundingResult:
        try:
            data = self._network_client.get(
                "/", context="Friendbot funding", params={"addr": address}
            )
        except NetworkError as e:
            raise WalletError(
                kind=WalletErrorKind.FUNDING_FAILED,
                message=f"Friendbot error HTTP {e.status_code}"
                if e.status_code
                else e.message,
                original_error=e,
            ) from e

        logger.info("Friendbot funded %s", address)
        return FundingResult(hash=data.get("hash"))
