"""Get broadcast info use case."""

from pydantic import BaseModel

from tbn.domain.service import BroadcastService


class GetBroadcastInfoRequest(BaseModel):
    """Get broadcast info request."""

    region_code: str


class BroadcastInfoResponse(BaseModel):
    """Broadcast info response.

    Fields that could not be read hold a Korean placeholder instead.
    """

    title: str
    mc: str
    time: str
    region_code: str
    region_name: str


class GetBroadcastInfoUseCase:
    """Use case for showing what a regional station is airing."""

    def __init__(self, broadcast_service: BroadcastService) -> None:
        self.broadcast_service = broadcast_service

    async def execute(self, request: GetBroadcastInfoRequest) -> BroadcastInfoResponse:
        """Look up broadcast info; never raises for upstream failures."""
        info = await self.broadcast_service.lookup(request.region_code)
        return BroadcastInfoResponse(**info.model_dump())
