"""Response envelope shared by every data operation.

The wire form keeps the payload's own keys and adds underscore-prefixed
provenance fields (``_dataSource``, ``_apiProvider``, ``_message`` ...)
that clients use to tell live data from generated data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..models.odds import Odds

MOCK_PROVIDER = "Mock"
FALLBACK_MESSAGE = "Real API failed, using mock data as fallback"
GAME_NOT_FOUND_MESSAGE = "Game not found in real odds API, using mock data"


class DataSource(str, Enum):
    REAL = "REAL"
    MOCK = "MOCK"


@dataclass
class ApiResponse:
    data: Any
    data_source: DataSource
    api_provider: Optional[str] = None
    message: Optional[str] = None
    requested_date: Optional[str] = None
    fallback_date: Optional[str] = None
    meta: Optional[Dict] = None
    debug: Optional[Dict] = None
    # date-specific game queries always report _fallbackDate, even when null
    include_fallback_date: bool = field(default=False, repr=False)

    @property
    def is_mock(self) -> bool:
        return self.data_source is DataSource.MOCK

    def _payload(self) -> Dict:
        if isinstance(self.data, Odds):
            return self.data.to_dict()
        if isinstance(self.data, list):
            return {"data": [item.to_dict() for item in self.data]}
        if self.data is None:
            return {"data": None}
        return {"data": self.data.to_dict()}

    def to_dict(self) -> Dict:
        """Render the wire envelope."""
        out = self._payload()
        if self.meta:
            out["meta"] = dict(self.meta)
        out["_dataSource"] = self.data_source.value
        if self.api_provider:
            out["_apiProvider"] = self.api_provider
        if self.message:
            out["_message"] = self.message
        if self.requested_date:
            out["_requestedDate"] = self.requested_date
        if self.include_fallback_date or self.fallback_date:
            out["_fallbackDate"] = self.fallback_date
        if self.debug:
            out["_debug"] = dict(self.debug)
        return out


def mask_key(key: Optional[str]) -> str:
    """Show only the ends of an API key for logging."""
    if not key:
        return "NOT SET"
    if len(key) <= 8:
        return "***"
    return f"{key[:4]}***{key[-4:]}"


def game_count(response: ApiResponse) -> int:
    return len(response.data) if isinstance(response.data, list) else 0


def describe(responses: List[ApiResponse]) -> List[str]:
    """User-facing notes for any mock-sourced responses."""
    notes = []
    for response in responses:
        if response.is_mock and response.message and response.message not in notes:
            notes.append(response.message)
    return notes
