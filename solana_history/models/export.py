"""Export artifact model definitions"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Serializes field names as camelCase when dumped with by_alias=True"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class TimeRange(CamelModel):
    """Earliest and latest block time; both None when there are no transactions"""
    earliest: Optional[int] = None
    latest: Optional[int] = None

class TransactionSummary(CamelModel):
    """Aggregate statistics over one fetch result"""
    successful_transactions: int = 0
    failed_transactions: int = 0
    total_fees: int = 0
    total_compute_units: int = 0
    transaction_types: Dict[str, int] = Field(default_factory=dict)
    time_range: TimeRange = Field(default_factory=TimeRange)

class ExportMetadata(CamelModel):
    fetch_time: str
    target_address: str
    total_transactions: int
    api_source: str
    api_endpoint: str
    data_version: str

class ExportArtifact(CamelModel):
    """
    The file written for one invocation.

    Attributes:
        metadata: When, what and where the data came from
        summary: Aggregate statistics over the transactions
        transactions: Decoded transaction records in API order
    """
    metadata: ExportMetadata
    summary: TransactionSummary
    transactions: List[Dict[str, Any]] = Field(default_factory=list)
