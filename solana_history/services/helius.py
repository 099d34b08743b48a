"""Helius enhanced transactions API integration service"""
import logging
from typing import Any, Dict, List, Optional

import requests

from solana_history.models.request import HistoryRequest
from solana_history.models.transaction import (
    AccountData,
    Instruction,
    NativeTransfer,
    TokenTransfer,
    TransactionRecord,
    as_dict,
    as_list,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100
REQUEST_TIMEOUT = 30  # seconds


def normalize_transaction(tx: Any) -> TransactionRecord:
    """
    Map a raw enhanced API transaction onto a TransactionRecord.

    Missing fields get defaults instead of failing, so one malformed record
    never sinks the batch. The raw object is kept under `raw`.
    """
    raw = as_dict(tx)
    meta = as_dict(raw.get('meta'))

    # The enhanced endpoint reports failures as transactionError, RPC-shaped payloads as meta.err
    error = meta.get('err') or raw.get('transactionError')

    return TransactionRecord(
        signature=raw.get('signature') or '',
        slot=raw.get('slot') or 0,
        block_time=raw.get('timestamp'),
        success=not error,
        fee=meta.get('fee') or raw.get('fee') or 0,
        fee_payer=raw.get('feePayer') or '',
        compute_units_consumed=meta.get('computeUnitsConsumed'),
        type=raw.get('type') or 'UNKNOWN',
        source=raw.get('source') or 'UNKNOWN',
        description=raw.get('description') or '',
        instructions=[Instruction.from_api(ix) for ix in as_list(raw.get('instructions'))],
        events=dict(as_dict(raw.get('events'))),
        native_transfers=[NativeTransfer.from_api(t) for t in as_list(raw.get('nativeTransfers'))],
        token_transfers=[TokenTransfer.from_api(t) for t in as_list(raw.get('tokenTransfers'))],
        account_data=[AccountData.from_api(a) for a in as_list(raw.get('accountData'))],
        raw=raw
    )


class HeliusAPI:
    """Handles the Helius enhanced transactions endpoint"""

    def __init__(self, api_key: str, base_url: str = "https://api.helius.xyz/v0", timeout: int = REQUEST_TIMEOUT):
        if not api_key:
            raise ValueError("Helius API key not provided")
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def address_endpoint(self, address: str) -> str:
        return f'{self.base_url}/addresses/{address}/transactions'

    def get_transactions(self, address: str, limit: Optional[int] = DEFAULT_LIMIT,
                         before: Optional[str] = None, until: Optional[str] = None) -> List[Dict]:
        """Fetch one page of raw enhanced transactions for an address"""
        params = {
            'api-key': self.api_key,
            'limit': DEFAULT_LIMIT if limit is None else limit,
            'before': before,
            'until': until
        }
        # requests drops None values from the query string
        data = self._make_request(self.address_endpoint(address), params)

        if not isinstance(data, list):
            raise ValueError("Invalid response format from Helius API")

        return data

    def _make_request(self, url: str, params: Dict[str, Any]) -> Any:
        """Make a single request to the Helius API. No retries."""
        headers = {
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        }

        try:
            response = requests.get(url, params=params, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error fetching enhanced transactions: {e}")
            if e.response is not None:
                logger.error(f"Status: {e.response.status_code}")
                logger.error(f"API Response: {e.response.text}")
            raise

        if not response.content:
            raise ValueError("Empty response body from Helius API")

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from Helius API: {e}")
            raise ValueError("Invalid response format from Helius API") from e

    def get_formatted_history(self, address: str, request: HistoryRequest) -> List[TransactionRecord]:
        """Fetch transactions for an address and normalize them"""
        limit = DEFAULT_LIMIT if request.limit is None else request.limit
        logger.info("Fetching enhanced transactions from Helius API...")
        logger.info(f"Target: {address}")
        logger.info(f"Limit: {limit} transactions")

        raw_transactions = self.get_transactions(address, limit, request.before, request.until)
        transactions = [normalize_transaction(tx) for tx in raw_transactions]

        logger.debug(f"Successfully fetched {len(transactions)} enhanced transactions")
        return transactions
