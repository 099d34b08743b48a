"""Request parameters for a history fetch"""
from dataclasses import dataclass
from typing import Optional

@dataclass
class HistoryRequest:
    """Passed through to the API as-is; the remote side enforces limits"""
    limit: Optional[int] = None
    before: Optional[str] = None  # Signature to search backwards from
    until: Optional[str] = None   # Signature to stop at
