"""
Pytest fixtures for solana_history tests. Raw payloads mirror the Helius enhanced transactions API.
"""

from __future__ import annotations

import pytest

from solana_history.config import Settings

WALLET = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
SWAP_SIG = "5VERv8NMvzbJMEkV8xnrLkEaWRtSz9CosKDYjCJjBRnbJLgp8uirBgmQpjKhoR4tjF3ZpRzrFmBV6UjKdiSZkQUW"
FAILED_SIG = "4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7D4xWLs4gDB4T4KLQ6HYqSTfQVLZQ4ST4gtgDS3oNSvqjqzmUWFsTg5Nq"
TRANSFER_SIG = "3xXJ4cQ3eZtzGdvmAHAMTVfqnjq3MGUJx5bPKvbhpdtGtWqFWSZ3bUSsxS7cVBCDaHgLxhq4VfNyCX3WGhYpHFnU"


@pytest.fixture
def settings(tmp_path):
    """Settings pointed at a temporary output directory, ignoring any local .env."""
    return Settings(
        _env_file=None,
        HELIUS_API_KEY="test-key",
        HELIUS_API_URL="https://api.helius.test/v0",
        OUTPUT_DIR=str(tmp_path / "output"),
    )


@pytest.fixture
def raw_swap():
    return {
        "signature": SWAP_SIG,
        "slot": 250000000,
        "timestamp": 1700000100,
        "type": "SWAP",
        "source": "JUPITER",
        "description": "wallet swapped 1 SOL for 20 USDC",
        "feePayer": WALLET,
        "meta": {"err": None, "fee": 5000, "computeUnitsConsumed": 120000},
        "instructions": [
            {
                "accounts": [WALLET],
                "data": "StV1DL6CwTryKyV",
                "programId": "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4",
                "innerInstructions": [
                    {
                        "accounts": [WALLET],
                        "data": "3Bxs4h24hBtQy9rw",
                        "programId": "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
                    }
                ],
            }
        ],
        "events": {"swap": {"tokenInputs": [], "tokenOutputs": []}},
        "nativeTransfers": [{"fromUserAccount": WALLET, "toUserAccount": "So11111111111111111111111111111111111111112", "amount": 1000000000}],
        "tokenTransfers": [
            {
                "fromTokenAccount": "",
                "toTokenAccount": "AtokenAccount1111111111111111111111111111111",
                "fromUserAccount": "",
                "toUserAccount": WALLET,
                "tokenAmount": 20.0,
                "mint": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
                "tokenStandard": "Fungible",
            }
        ],
        "accountData": [
            {
                "account": WALLET,
                "nativeBalanceChange": -1000005000,
                "tokenBalanceChanges": [
                    {
                        "mint": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
                        "rawTokenAmount": {"tokenAmount": "20000000", "decimals": 6},
                        "tokenAccount": "AtokenAccount1111111111111111111111111111111",
                        "userAccount": WALLET,
                    }
                ],
            }
        ],
    }


@pytest.fixture
def raw_failed():
    return {
        "signature": FAILED_SIG,
        "slot": 249999000,
        "timestamp": 1699999000,
        "type": "SWAP",
        "meta": {"err": {"InstructionError": [0, {"Custom": 6001}]}, "fee": 5000, "computeUnitsConsumed": 30000},
        "instructions": [],
    }


@pytest.fixture
def raw_transfer():
    return {
        "signature": TRANSFER_SIG,
        "slot": 250000500,
        "timestamp": 1700000500,
        "type": "TRANSFER",
        "source": "SYSTEM_PROGRAM",
        "fee": 5000,
        "feePayer": WALLET,
        "transactionError": None,
        "instructions": [
            {"accounts": [WALLET], "data": "", "programId": "11111111111111111111111111111111"}
        ],
    }
