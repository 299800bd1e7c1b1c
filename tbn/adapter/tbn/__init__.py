"""TBN on-air page adapter."""

from .client import HttpxTbnPageClient, MockTbnPageClient, TbnPageClient
from .parser import parse_broadcast_page

__all__ = [
    "HttpxTbnPageClient",
    "MockTbnPageClient",
    "TbnPageClient",
    "parse_broadcast_page",
]
