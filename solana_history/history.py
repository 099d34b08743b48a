"""Enhanced transaction history export logic"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

from solana_history.config import Settings
from solana_history.decoding import decode_transactions
from solana_history.models.request import HistoryRequest
from solana_history.models.transaction import TransactionRecord
from solana_history.services.export import ExportService, iso_timestamp
from solana_history.services.helius import HeliusAPI
from solana_history.summary import TransactionAggregator

logger = logging.getLogger(__name__)

RECENT_TRANSACTIONS_SHOWN = 5

@dataclass
class ExportResult:
    output_path: str
    transactions: List[TransactionRecord]

class EnhancedHistory:
    """Fetches, decodes, summarizes and exports the history of one address"""

    def __init__(self, settings: Settings):
        """Initialize the pipeline from settings"""
        self.settings = settings
        self.aggregator = TransactionAggregator()
        self.helius = HeliusAPI(
            settings.HELIUS_API_KEY,
            base_url=settings.HELIUS_API_URL,
            timeout=settings.REQUEST_TIMEOUT
        )
        self.exporter = ExportService(
            settings.OUTPUT_DIR,
            api_source=settings.API_SOURCE,
            data_version=settings.DATA_VERSION,
            aggregator=self.aggregator
        )

    def generate(self, address: str, request: HistoryRequest) -> ExportResult:
        """Run the whole pipeline for an address. Nothing is written if any step fails."""
        if request.limit is None:
            request = HistoryRequest(self.settings.DEFAULT_LIMIT, request.before, request.until)

        transactions = self.helius.get_formatted_history(address, request)
        decoded = decode_transactions(transactions)

        output_path = self.exporter.save(decoded, address, self.helius.address_endpoint(address))
        return ExportResult(output_path=output_path, transactions=decoded)

    def display_summary(self, transactions: List[TransactionRecord]) -> None:
        """Log a human readable overview of the fetched transactions"""
        if not transactions:
            logger.info("No enhanced transactions found.")
            return

        summary = self.aggregator.summarize(transactions)
        logger.info("\nEnhanced Transaction Summary:\n")
        logger.info(f"Total Transactions: {len(transactions)}")
        logger.info(f"Successful: {summary.successful_transactions}")
        logger.info(f"Failed: {summary.failed_transactions}")

        logger.info("\nTransaction Types:")
        for tx_type, count in summary.transaction_types.items():
            logger.info(f"  {tx_type}: {count}")

        logger.info("\nRecent Transactions:")
        for index, tx in enumerate(transactions[:RECENT_TRANSACTIONS_SHOWN], start=1):
            logger.info(f"{index}. {tx.signature[:8]}... ({tx.type})")
            logger.info(f"   Status: {'SUCCESS' if tx.success else 'FAILED'}")
            logger.info(f"   Description: {tx.description or 'N/A'}")
            if tx.block_time:
                block_time = datetime.fromtimestamp(tx.block_time, tz=timezone.utc)
                logger.info(f"   Time: {iso_timestamp(block_time)}")
            logger.info("")
