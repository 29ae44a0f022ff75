import tempfile
from pathlib import Path

import pytest
from stellar_sdk import Keypair

from stellar_wallet.features.account.service import SessionManager
from stellar_wallet.features.transfer.service import PaymentBuilder
from stellar_wallet.models import Identity
from stellar_wallet.signing import StellarSigner
from tests.fakes import FakeFaucet, FakeLedger


@pytest.fixture(autouse=True)
def isolate_wallet_storage(monkeypatch):
    """Keep config and log files out of the real home directory."""
    with tempfile.TemporaryDirectory(prefix="stellar-wallet-test-") as tmp_dir:
        monkeypatch.setenv("STELLAR_WALLET_DIR", str(Path(tmp_dir)))
        yield Path(tmp_dir)


@pytest.fixture
def signer():
    return StellarSigner("Test SDF Network ; September 2015")


@pytest.fixture
def ledger():
    return FakeLedger()


@pytest.fixture
def faucet():
    return FakeFaucet()


@pytest.fixture
def random_keypair():
    return Keypair.random()


@pytest.fixture
def destination():
    return Keypair.random().public_key


@pytest.fixture
def session(signer, faucet):
    return SessionManager(signer=signer, faucet=faucet)


@pytest.fixture
def loaded_session(session, random_keypair):
    session.load_identity(random_keypair.secret)
    return session


@pytest.fixture
def payment_builder(ledger, signer):
    return PaymentBuilder(ledger=ledger, signer=signer)


@pytest.fixture
def identity(random_keypair):
    return Identity(
        public_address=random_keypair.public_key, secret_key=random_keypair.secret
    )
