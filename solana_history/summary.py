"""Transaction summary statistics"""
from typing import Dict, List

from solana_history.models.export import TimeRange, TransactionSummary
from solana_history.models.transaction import TransactionRecord

class TransactionAggregator:
    """Calculates summary statistics over canonical transaction records"""

    def count_types(self, transactions: List[TransactionRecord]) -> Dict[str, int]:
        """Count transactions per type, keyed in order of first occurrence"""
        type_counts: Dict[str, int] = {}
        for tx in transactions:
            type_counts[tx.type] = type_counts.get(tx.type, 0) + 1
        return type_counts

    def calculate_time_range(self, transactions: List[TransactionRecord]) -> TimeRange:
        """Earliest and latest block time. Missing block times count as 0."""
        if not transactions:
            return TimeRange()

        block_times = [tx.block_time or 0 for tx in transactions]
        return TimeRange(earliest=min(block_times), latest=max(block_times))

    def summarize(self, transactions: List[TransactionRecord]) -> TransactionSummary:
        """Calculate the full summary for a fetch result"""
        successful = sum(1 for tx in transactions if tx.success)

        return TransactionSummary(
            successful_transactions=successful,
            failed_transactions=len(transactions) - successful,
            total_fees=sum(tx.fee for tx in transactions),
            total_compute_units=sum(tx.compute_units_consumed or 0 for tx in transactions),
            transaction_types=self.count_types(transactions),
            time_range=self.calculate_time_range(transactions)
        )
