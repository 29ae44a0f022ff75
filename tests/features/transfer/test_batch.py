import pytest
from stellar_sdk import Keypair, Network, TransactionEnvelope

from stellar_wallet.features.transfer.batch import (
    BatchExecutor,
    BatchRecipient,
    airdrop_memo,
    parse_destinations,
)
from stellar_wallet.shared.errors import WalletError, WalletErrorKind


def memo_of(signed) -> bytes:
    envelope = TransactionEnvelope.from_xdr(
        signed.envelope_xdr, Network.TESTNET_NETWORK_PASSPHRASE
    )
    return envelope.transaction.memo.memo_text


@pytest.fixture
def executor(payment_builder):
    return BatchExecutor(payment_builder)


@pytest.fixture
def recipients():
    return [Keypair.random().public_key for _ in range(3)]


class TestBatchExecutor:
    def test_all_succeed(self, executor, loaded_session, ledger, recipients):
        report = executor.run(loaded_session, recipients, "10")

        assert [o.destination for o in report.outcomes] == recipients
        assert all(o.success for o in report.outcomes)
        assert [o.hash for o in report.outcomes] == [s.hash for s in ledger.submitted]
        assert report.succeeded == 3
        assert report.failed == 0

    def test_continues_after_failure(self, executor, loaded_session, ledger, recipients):
        ledger.fail_submissions = {2}

        report = executor.run(loaded_session, recipients, "10")

        assert [o.success for o in report.outcomes] == [True, False, True]
        assert report.outcomes[0].hash is not None
        assert report.outcomes[1].hash is None
        assert report.outcomes[1].error.kind == WalletErrorKind.SUBMISSION_ERROR
        assert report.outcomes[2].hash is not None
        assert len(ledger.submitted) == 3

    def test_invalid_destination_recorded_as_failure(self, executor, loaded_session, ledger, recipients):
        destinations = [recipients[0], "GBROKEN", recipients[1]]

        report = executor.run(loaded_session, destinations, "1")

        assert [o.success for o in report.outcomes] == [True, False, True]
        assert report.outcomes[1].error.kind == WalletErrorKind.INVALID_ADDRESS

    def test_default_memo(self, executor, loaded_session, ledger, recipients):
        executor.run(loaded_session, recipients[:1], "1")

        expected = airdrop_memo(recipients[0]).encode("utf-8")
        assert memo_of(ledger.submitted[0]) == expected

    def test_recipient_memo_overrides_default(self, executor, loaded_session, ledger, recipients):
        executor.run(
            loaded_session,
            [BatchRecipient(address=recipients[0], memo="Mesa 3"), recipients[1]],
            "1",
        )

        assert memo_of(ledger.submitted[0]) == b"Mesa 3"
        assert memo_of(ledger.submitted[1]) == airdrop_memo(recipients[1]).encode("utf-8")

    def test_invalid_amount_rejected_before_any_payment(self, executor, loaded_session, ledger, recipients):
        with pytest.raises(WalletError) as exc_info:
            executor.run(loaded_session, recipients, "0")

        assert exc_info.value.kind == WalletErrorKind.INVALID_AMOUNT
        assert ledger.loaded == []

    def test_requires_session(self, executor, session, ledger, recipients):
        with pytest.raises(WalletError) as exc_info:
            executor.run(session, recipients, "1")

        assert exc_info.value.kind == WalletErrorKind.NO_ACTIVE_SESSION
        assert ledger.loaded == []

    def test_on_outcome_called_in_order(self, executor, loaded_session, recipients):
        seen = []

        executor.run(loaded_session, recipients, "1", on_outcome=seen.append)

        assert [o.destination for o in seen] == recipients

    def test_empty_destinations(self, executor, loaded_session, ledger):
        report = executor.run(loaded_session, [], "1")

        assert report.outcomes == []
        assert ledger.submitted == []


class TestHelpers:
    def test_airdrop_memo_fits_memo_limit(self, destination):
        memo = airdrop_memo(destination)
        assert memo == f"Airdrop to {destination[:6]}..."
        assert len(memo.encode("utf-8")) <= 28

    def test_parse_destinations(self):
        assert parse_destinations(" GA1 , ,GB2,, ") == ["GA1", "GB2"]

    def test_parse_destinations_empty(self):
        assert parse_destinations("   ") == []
