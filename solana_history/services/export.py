"""JSON export service for enhanced transaction data"""
import json
import logging
import os
from datetime import datetime, timezone
from typing import List, Optional

from solana_history.models.export import ExportArtifact, ExportMetadata
from solana_history.models.transaction import TransactionRecord
from solana_history.summary import TransactionAggregator

logger = logging.getLogger(__name__)


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 timestamp with millisecond precision and a Z suffix"""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S') + f'.{moment.microsecond // 1000:03d}Z'


class ExportService:
    """Builds and writes the export artifact for one invocation"""

    def __init__(self, output_dir: str, api_source: str, data_version: str,
                 aggregator: Optional[TransactionAggregator] = None):
        self.output_dir = output_dir
        self.api_source = api_source
        self.data_version = data_version
        self.aggregator = aggregator or TransactionAggregator()

    def generate_filename(self, address: str, moment: datetime) -> str:
        """solana_enhanced_<first 8 chars of address>_<timestamp>.json"""
        timestamp = iso_timestamp(moment).replace(':', '-').replace('.', '-')
        return f"solana_enhanced_{address[:8]}_{timestamp}.json"

    def build_artifact(self, transactions: List[TransactionRecord], address: str,
                       api_endpoint: str, moment: datetime) -> ExportArtifact:
        """Combine metadata, summary and decoded transactions"""
        return ExportArtifact(
            metadata=ExportMetadata(
                fetch_time=iso_timestamp(moment),
                target_address=address,
                total_transactions=len(transactions),
                api_source=self.api_source,
                api_endpoint=api_endpoint,
                data_version=self.data_version
            ),
            summary=self.aggregator.summarize(transactions),
            transactions=[tx.to_dict() for tx in transactions]
        )

    def save(self, transactions: List[TransactionRecord], address: str, api_endpoint: str,
             moment: Optional[datetime] = None) -> str:
        """Write the artifact to the output directory and return its path"""
        moment = moment or datetime.now(timezone.utc)

        try:
            os.makedirs(self.output_dir, exist_ok=True)
            output_path = os.path.join(self.output_dir, self.generate_filename(address, moment))

            artifact = self.build_artifact(transactions, address, api_endpoint, moment)
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(artifact.model_dump(by_alias=True), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Error saving enhanced data to file: {e}")
            raise

        size_mb = os.path.getsize(output_path) / 1024 / 1024
        logger.info(f"Enhanced data with decoded instructions saved to: {output_path}")
        logger.info(f"File size: {size_mb:.2f} MB")

        return output_path
