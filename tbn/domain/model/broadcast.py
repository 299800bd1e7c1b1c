"""Broadcast metadata scraped from the TBN on-air page."""

from enum import Enum
from typing import Callable, Optional

from tbn.domain.model.common import DomainModel

# Placeholders shown to listeners instead of missing data
NOT_AVAILABLE = "정보 없음"
LOAD_FAILED = "정보 로드 실패"
UNKNOWN_REGION = "알수없음"


class BroadcastDetails(DomainModel):
    """Fields extracted from the page; each one may be missing."""

    title: Optional[str] = None
    mc: Optional[str] = None
    time: Optional[str] = None


class BroadcastInfo(DomainModel):
    """What a listener sees for a region: always fully populated."""

    title: str
    mc: str
    time: str
    region_code: str
    region_name: str


class LookupFailure(str, Enum):
    """Stage at which a broadcast lookup failed."""

    FETCH = "fetch"
    PARSE = "parse"


class BroadcastLookupResult(DomainModel):
    """Outcome of a lookup, including why placeholders were used."""

    info: BroadcastInfo
    failure: Optional[LookupFailure] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


# Turns raw page HTML into details; raises BroadcastParseError on failure
BroadcastPageParser = Callable[[str], BroadcastDetails]
