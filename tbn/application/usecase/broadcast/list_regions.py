"""List regions use case."""

from tbn.domain.service import BroadcastService


class ListRegionsUseCase:
    """Use case for listing the regional stations."""

    def __init__(self, broadcast_service: BroadcastService) -> None:
        self.broadcast_service = broadcast_service

    async def execute(self) -> dict[str, str]:
        """Return area code to region name."""
        return self.broadcast_service.list_regions()
