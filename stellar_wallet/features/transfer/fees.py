"""Advisory fee estimate for a series of transactions."""

STROOPS_PER_XLM = 10_000_000
BASE_FEE_STROOPS = 100


def estimate_total_fee(
    transaction_count: int,
    operations_per_transaction: int,
    base_fee: int = BASE_FEE_STROOPS,
) -> float:
    """Total XLM spent on fees for ``transaction_count`` transactions.

    Not used to set real fees; submissions use the network's current base fee.
    """
    for name, value in (
        ("transaction_count", transaction_count),
        ("operations_per_transaction", operations_per_transaction),
        ("base_fee", base_fee),
    ):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"{name} must be a positive integer")

    total_stroops = transaction_count * operations_per_transaction * base_fee
    return total_stroops / STROOPS_PER_XLM
