"""Base-58 instruction data decoding"""
import dataclasses
from typing import Any, List, Optional

import base58

from solana_history.models.transaction import DecodedInstructionData, Instruction, TransactionRecord


def decode_base58(data: Any) -> Optional[DecodedInstructionData]:
    """
    Decode a base-58 string into bytes and hex.

    Returns None for empty or whitespace-only input and for anything that is
    not valid base-58. Decoding failures are expected and never raised.
    """
    if not isinstance(data, str) or not data.strip():
        return None

    try:
        decoded = base58.b58decode(data)
    except ValueError:
        # Invalid character, or non-ASCII input
        return None

    return DecodedInstructionData(
        original_data=data,
        decoded_hex=decoded.hex(),
        decoded_bytes=list(decoded),
        data_length=len(decoded)
    )


def decode_instruction(instruction: Instruction) -> Instruction:
    """Return a copy of the instruction tree with decoded data at every node"""
    return dataclasses.replace(
        instruction,
        accounts=list(instruction.accounts),
        inner_instructions=[decode_instruction(inner) for inner in instruction.inner_instructions or []],
        decoded_data=decode_base58(instruction.data)
    )


def decode_transactions(transactions: List[TransactionRecord]) -> List[TransactionRecord]:
    """Decode the instructions of every transaction, leaving the inputs untouched"""
    return [
        dataclasses.replace(tx, instructions=[decode_instruction(ix) for ix in tx.instructions])
        for tx in transactions
    ]
