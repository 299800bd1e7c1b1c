"""Broadcast lookup domain service."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

import logfire

from tbn.domain.model import BroadcastInfo, BroadcastLookupResult, LookupFailure
from tbn.domain.model.broadcast import (
    LOAD_FAILED,
    NOT_AVAILABLE,
    UNKNOWN_REGION,
    BroadcastPageParser,
)

from .base import Service


class BroadcastPageClient(ABC):
    """Fetches the raw on-air page of a regional station."""

    @abstractmethod
    async def fetch_page(self, region_code: str) -> str:
        """Download the on-air page for a region.

        Args:
            region_code: TBN area code

        Returns:
            Page HTML

        Raises:
            BroadcastFetchError: If the page could not be downloaded
        """
        pass


class BroadcastService(Service):
    """Looks up what a regional TBN station is airing.

    Lookups never raise: failures degrade to placeholder text so the client
    always has something to show.
    """

    def __init__(
        self,
        page_client: BroadcastPageClient,
        parser: BroadcastPageParser,
        regions: Mapping[str, str],
    ) -> None:
        """Initialize broadcast service.

        Args:
            page_client: Client for the on-air page
            parser: Extracts broadcast details from page HTML
            regions: Read-only map of area code to region name
        """
        self.page_client = page_client
        self.parser = parser
        self.regions = regions

    def region_name(self, region_code: str) -> str:
        return self.regions.get(region_code, UNKNOWN_REGION)

    def list_regions(self) -> dict[str, str]:
        """Return a copy of the region table."""
        return dict(self.regions)

    async def lookup(self, region_code: str) -> BroadcastInfo:
        """Return broadcast info for a region, placeholders on failure."""
        result = await self.resolve(region_code)
        return result.info

    async def resolve(self, region_code: str) -> BroadcastLookupResult:
        """Look up broadcast info and report which stage failed, if any.

        Args:
            region_code: TBN area code

        Returns:
            Lookup result; ``failure`` is None on success
        """
        region_name = self.region_name(region_code)
        with logfire.span(
            "broadcast_service.resolve",
            region_code=region_code,
            region_name=region_name,
        ):
            try:
                html = await self.page_client.fetch_page(region_code)
            except Exception as e:
                logfire.error(
                    "Broadcast page fetch failed",
                    region_code=region_code,
                    error=str(e),
                )
                return self._failed(region_code, region_name, LookupFailure.FETCH, e)

            try:
                details = self.parser(html)
            except Exception as e:
                logfire.error(
                    "Broadcast page parse failed",
                    region_code=region_code,
                    error=str(e),
                )
                return self._failed(region_code, region_name, LookupFailure.PARSE, e)

            info = BroadcastInfo(
                title=details.title or NOT_AVAILABLE,
                mc=details.mc or NOT_AVAILABLE,
                time=details.time or NOT_AVAILABLE,
                region_code=region_code,
                region_name=region_name,
            )
            logfire.info(
                "Broadcast info resolved",
                region_code=region_code,
                title=info.title,
            )
            return BroadcastLookupResult(info=info)

    @staticmethod
    def _failed(
        region_code: str,
        region_name: str,
        failure: LookupFailure,
        error: Exception,
    ) -> BroadcastLookupResult:
        return BroadcastLookupResult(
            info=BroadcastInfo(
                title=LOAD_FAILED,
                mc=LOAD_FAILED,
                time=LOAD_FAILED,
                region_code=region_code,
                region_name=region_name,
            ),
            failure=failure,
            error=str(error),
        )
