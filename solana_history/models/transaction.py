"""Domain models for enhanced Solana transaction data"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


@dataclass
class DecodedInstructionData:
    """Base-58 instruction payload decoded to raw bytes"""
    original_data: str
    decoded_hex: str
    decoded_bytes: List[int]
    data_length: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'originalData': self.original_data,
            'decodedHex': self.decoded_hex,
            'decodedBytes': list(self.decoded_bytes),
            'dataLength': self.data_length
        }


@dataclass
class Instruction:
    """
    One instruction of a transaction.
    Inner instructions share the same shape, so the structure is a tree.
    """
    accounts: List[str] = field(default_factory=list)
    data: str = ''
    program_id: str = ''
    inner_instructions: List['Instruction'] = field(default_factory=list)
    parsed: Optional[Any] = None
    decoded_data: Optional[DecodedInstructionData] = None

    @classmethod
    def from_api(cls, raw: Any) -> 'Instruction':
        """Build an instruction tree from an API instruction object"""
        raw = as_dict(raw)
        return cls(
            accounts=list(as_list(raw.get('accounts'))),
            data=raw.get('data') or '',
            program_id=raw.get('programId') or '',
            inner_instructions=[cls.from_api(inner) for inner in as_list(raw.get('innerInstructions'))],
            parsed=raw.get('parsed')
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'accounts': list(self.accounts),
            'data': self.data,
            'programId': self.program_id,
            'innerInstructions': [inner.to_dict() for inner in self.inner_instructions],
        }
        if self.parsed is not None:
            result['parsed'] = self.parsed
        result['decodedData'] = self.decoded_data.to_dict() if self.decoded_data else None
        return result


@dataclass
class NativeTransfer:
    """SOL transfer in lamports"""
    from_user_account: str = ''
    to_user_account: str = ''
    amount: int = 0

    @classmethod
    def from_api(cls, raw: Any) -> 'NativeTransfer':
        raw = as_dict(raw)
        return cls(
            from_user_account=raw.get('fromUserAccount') or '',
            to_user_account=raw.get('toUserAccount') or '',
            amount=raw.get('amount') or 0
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'fromUserAccount': self.from_user_account,
            'toUserAccount': self.to_user_account,
            'amount': self.amount
        }


@dataclass
class TokenTransfer:
    """SPL token transfer"""
    from_token_account: str = ''
    to_token_account: str = ''
    from_user_account: str = ''
    to_user_account: str = ''
    token_amount: float = 0
    mint: str = ''
    token_standard: str = ''

    @classmethod
    def from_api(cls, raw: Any) -> 'TokenTransfer':
        raw = as_dict(raw)
        return cls(
            from_token_account=raw.get('fromTokenAccount') or '',
            to_token_account=raw.get('toTokenAccount') or '',
            from_user_account=raw.get('fromUserAccount') or '',
            to_user_account=raw.get('toUserAccount') or '',
            token_amount=raw.get('tokenAmount') or 0,
            mint=raw.get('mint') or '',
            token_standard=raw.get('tokenStandard') or ''
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'fromTokenAccount': self.from_token_account,
            'toTokenAccount': self.to_token_account,
            'fromUserAccount': self.from_user_account,
            'toUserAccount': self.to_user_account,
            'tokenAmount': self.token_amount,
            'mint': self.mint,
            'tokenStandard': self.token_standard
        }


@dataclass
class TokenBalanceChange:
    mint: str = ''
    raw_token_amount: Dict[str, Any] = field(default_factory=dict)  # {tokenAmount: str, decimals: int}
    token_account: str = ''
    user_account: str = ''

    @classmethod
    def from_api(cls, raw: Any) -> 'TokenBalanceChange':
        raw = as_dict(raw)
        return cls(
            mint=raw.get('mint') or '',
            raw_token_amount=dict(as_dict(raw.get('rawTokenAmount'))),
            token_account=raw.get('tokenAccount') or '',
            user_account=raw.get('userAccount') or ''
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mint': self.mint,
            'rawTokenAmount': dict(self.raw_token_amount),
            'tokenAccount': self.token_account,
            'userAccount': self.user_account
        }


@dataclass
class AccountData:
    """Balance deltas for one account touched by a transaction"""
    account: str = ''
    native_balance_change: int = 0
    token_balance_changes: List[TokenBalanceChange] = field(default_factory=list)

    @classmethod
    def from_api(cls, raw: Any) -> 'AccountData':
        raw = as_dict(raw)
        return cls(
            account=raw.get('account') or '',
            native_balance_change=raw.get('nativeBalanceChange') or 0,
            token_balance_changes=[
                TokenBalanceChange.from_api(change)
                for change in as_list(raw.get('tokenBalanceChanges'))
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'account': self.account,
            'nativeBalanceChange': self.native_balance_change,
            'tokenBalanceChanges': [change.to_dict() for change in self.token_balance_changes]
        }


@dataclass
class TransactionRecord:
    """Canonical transaction record built from one enhanced API transaction"""
    signature: str
    slot: int
    block_time: Optional[int]
    success: bool
    fee: int
    fee_payer: str
    compute_units_consumed: Optional[int] = None
    type: str = 'UNKNOWN'
    source: str = 'UNKNOWN'
    description: str = ''
    instructions: List[Instruction] = field(default_factory=list)
    events: Dict[str, Any] = field(default_factory=dict)  # swap / nft / compressed
    native_transfers: List[NativeTransfer] = field(default_factory=list)
    token_transfers: List[TokenTransfer] = field(default_factory=list)
    account_data: List[AccountData] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)  # Original API payload

    def to_dict(self) -> Dict[str, Any]:
        return {
            'signature': self.signature,
            'slot': self.slot,
            'blockTime': self.block_time,
            'success': self.success,
            'fee': self.fee,
            'feePayer': self.fee_payer,
            'computeUnitsConsumed': self.compute_units_consumed,
            'type': self.type,
            'source': self.source,
            'description': self.description,
            'instructions': [instruction.to_dict() for instruction in self.instructions],
            'events': self.events,
            'nativeTransfers': [transfer.to_dict() for transfer in self.native_transfers],
            'tokenTransfers': [transfer.to_dict() for transfer in self.token_transfers],
            'accountData': [account.to_dict() for account in self.account_data],
            'raw': self.raw
        }
