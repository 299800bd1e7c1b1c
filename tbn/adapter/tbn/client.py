"""HTTP client for the TBN on-air page."""

import httpx
import logfire

from tbn.domain.error import BroadcastFetchError
from tbn.domain.service.broadcast_service import BroadcastPageClient


class TbnPageClient(BroadcastPageClient):
    """Base class for TBN page clients.

    Provides type distinction for dependency injection.
    """

    pass


class HttpxTbnPageClient(TbnPageClient):
    """Downloads ``tbnlive.tbn?area_code=<code>`` with httpx."""

    def __init__(self, base_url: str, user_agent: str, timeout: float) -> None:
        """Initialize page client.

        Args:
            base_url: On-air page URL without query string
            user_agent: User-Agent header; the site serves browsers only
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    async def fetch_page(self, region_code: str) -> str:
        """Download the on-air page for a region.

        Args:
            region_code: TBN area code

        Returns:
            Page HTML

        Raises:
            BroadcastFetchError: On timeout, transport error or non-2xx status
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.base_url,
                    params={"area_code": region_code},
                    headers={"User-Agent": self.user_agent},
                    follow_redirects=True,
                )
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            logfire.error(
                "TBN page request failed",
                region_code=region_code,
                status_code=e.response.status_code,
            )
            raise BroadcastFetchError(
                f"TBN page request failed: {e.response.status_code}"
            )
        except httpx.HTTPError as e:
            logfire.error("TBN page HTTP error", region_code=region_code, error=str(e))
            raise BroadcastFetchError(f"HTTP error fetching TBN page: {e}")


MOCK_PAGE_HTML = """
<html>
  <body>
    <div class="onair">
      <p class="greeting-text">
        <b id="forumName">출발 서울대행진</b>
        <span>MC : 홍길동 | 방송시간 : 07:00 ~ 09:00</span>
      </p>
    </div>
  </body>
</html>
"""


class MockTbnPageClient(TbnPageClient):
    """Mock page client for testing.

    Serves a fixed page for every region without network access.
    """

    def __init__(self, html: str = MOCK_PAGE_HTML):
        """Initialize mock client without real configuration."""
        self.html = html
        self.requested: list[str] = []

    async def fetch_page(self, region_code: str) -> str:
        self.requested.append(region_code)
        return self.html
