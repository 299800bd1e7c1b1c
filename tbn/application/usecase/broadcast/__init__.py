"""Broadcast use cases."""

from .get_broadcast_info import (
    BroadcastInfoResponse,
    GetBroadcastInfoRequest,
    GetBroadcastInfoUseCase,
)
from .list_regions import ListRegionsUseCase

__all__ = [
    "BroadcastInfoResponse",
    "GetBroadcastInfoRequest",
    "GetBroadcastInfoUseCase",
    "ListRegionsUseCase",
]
