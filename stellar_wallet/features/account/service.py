"""Session identity management for Stellar Quick Wallet."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stellar_wallet.models import FundingResult, Identity
from stellar_wallet.shared.errors import WalletError, WalletErrorKind
from stellar_wallet.shared.protocols import FaucetProtocol, SignerProtocol
from stellar_wallet.shared.validation import SecretValidator

logger = logging.getLogger(__name__)


@dataclass
class IdentityCreation:
    """Outcome of generating and funding a new keypair.

    The keypair is always present so the user can record it, even when
    funding failed and the identity was not activated.
    """

    identity: Identity
    funded: bool
    funding: FundingResult | None = None
    error: WalletError | None = None


class SessionManager:
    """Owns the single active identity for the lifetime of the process."""

    def __init__(self, signer: SignerProtocol, faucet: FaucetProtocol):
        self.signer = signer
        self.faucet = faucet
        self._current: Identity | None = None

    def current(self) -> Identity | None:
        return self._current

    def require_current(self) -> Identity:
        if self._current is None:
            raise WalletError(
                kind=WalletErrorKind.NO_ACTIVE_SESSION,
                message="No account loaded. Create or load one first.",
            )
        return self._current

    def create_identity(self) -> IdentityCreation:
        identity = self.signer.generate()
        logger.info("Generated keypair %s, requesting funding", identity.public_address)

        try:
            funding = self.faucet.fund(identity.public_address)
        except WalletError as e:
            logger.warning("Funding failed for %s: %s", identity.public_address, e)
            return IdentityCreation(identity=identity, funded=False, error=e)

        self._install(identity)
        return IdentityCreation(identity=identity, funded=True, funding=funding)

    def load_identity(self, secret_key: str) -> Identity:
        result = SecretValidator.validate(secret_key)
        if not result.is_valid:
            raise WalletError(
                kind=WalletErrorKind.INVALID_SECRET,
                message=result.error_message or "Invalid secret key",
            )
        identity = self.signer.derive(result.normalized_value)
        self._install(identity)
        return identity

    def clear(self) -> None:
        if self._current is not None:
            logger.info("Session cleared for %s", self._current.public_address)
        self._current = None

    def _install(self, identity: Identity) -> None:
        previous = self._current
        self._current = identity
        if previous is not None and previous.public_address != identity.public_address:
            logger.info(
                "Session switched from %s to %s",
                previous.public_address,
                identity.public_address,
            )
        else:
            logger.info("Session loaded for %s", identity.public_address)
