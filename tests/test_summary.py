"""
Summary statistics over canonical transaction records.
"""

from __future__ import annotations

from solana_history.models.transaction import TransactionRecord
from solana_history.services.helius import normalize_transaction
from solana_history.summary import TransactionAggregator


def _record(signature, success=True, fee=5000, block_time=None, compute=None, tx_type="UNKNOWN"):
    return TransactionRecord(
        signature=signature,
        slot=1,
        block_time=block_time,
        success=success,
        fee=fee,
        fee_payer="",
        compute_units_consumed=compute,
        type=tx_type,
    )


def test_summary_empty_input():
    summary = TransactionAggregator().summarize([])

    assert summary.successful_transactions == 0
    assert summary.failed_transactions == 0
    assert summary.total_fees == 0
    assert summary.total_compute_units == 0
    assert summary.transaction_types == {}
    assert summary.time_range.earliest is None
    assert summary.time_range.latest is None


def test_summary_success_and_failure_from_meta_err():
    records = [
        normalize_transaction({"signature": "ok", "meta": {"err": None, "fee": 5000}}),
        normalize_transaction({"signature": "bad", "meta": {"err": {"InstructionError": [0, {"Custom": 1}]}, "fee": 5000}}),
    ]

    summary = TransactionAggregator().summarize(records)

    assert summary.successful_transactions == 1
    assert summary.failed_transactions == 1
    assert summary.total_fees == 10000


def test_summary_counts_add_up(raw_swap, raw_failed, raw_transfer):
    records = [normalize_transaction(tx) for tx in (raw_swap, raw_failed, raw_transfer)]

    summary = TransactionAggregator().summarize(records)

    assert summary.successful_transactions + summary.failed_transactions == len(records)
    assert summary.total_fees == 15000
    assert summary.total_compute_units == 150000


def test_summary_types_keep_first_occurrence_order():
    records = [
        _record("1", tx_type="TRANSFER"),
        _record("2", tx_type="SWAP"),
        _record("3", tx_type="TRANSFER"),
        _record("4", tx_type="NFT_SALE"),
        _record("5", tx_type="SWAP"),
    ]

    types = TransactionAggregator().count_types(records)

    assert list(types) == ["TRANSFER", "SWAP", "NFT_SALE"]
    assert types == {"TRANSFER": 2, "SWAP": 2, "NFT_SALE": 1}


def test_summary_absent_compute_units_count_as_zero():
    records = [_record("1", compute=200), _record("2"), _record("3", compute=50)]

    assert TransactionAggregator().summarize(records).total_compute_units == 250


def test_summary_time_range():
    records = [_record("1", block_time=1700000500), _record("2", block_time=1699999000), _record("3", block_time=1700000100)]

    time_range = TransactionAggregator().summarize(records).time_range

    assert time_range.earliest == 1699999000
    assert time_range.latest == 1700000500


def test_summary_missing_block_time_counts_as_zero():
    records = [_record("1", block_time=1700000000), _record("2")]

    time_range = TransactionAggregator().summarize(records).time_range

    assert time_range.earliest == 0
    assert time_range.latest == 1700000000


def test_summary_does_not_mutate_records():
    records = [_record("1", fee=10, block_time=5)]
    before = [r.to_dict() for r in records]

    TransactionAggregator().summarize(records)

    assert [r.to_dict() for r in records] == before


def test_summary_serializes_camel_case():
    dumped = TransactionAggregator().summarize([_record("1", tx_type="SWAP", block_time=7)]).model_dump(by_alias=True)

    assert dumped == {
        "successfulTransactions": 1,
        "failedTransactions": 0,
        "totalFees": 5000,
        "totalComputeUnits": 0,
        "transactionTypes": {"SWAP": 1},
        "timeRange": {"earliest": 7, "latest": 7},
    }
