"""TBN broadcast page infrastructure providers."""

from dishka import Scope, provide

from tbn.adapter.tbn.client import HttpxTbnPageClient, TbnPageClient
from tbn.config import BroadcastSettings
from tbn.util.di.base import ProviderBase


class BroadcastProvider(ProviderBase):
    """Broadcast component base."""

    __mock_component__ = "broadcast"


class ProdBroadcastProvider(BroadcastProvider):
    """Production broadcast provider hitting www.tbn.or.kr."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_page_client(self, broadcast_settings: BroadcastSettings) -> TbnPageClient:
        """Provide TBN on-air page client."""
        return HttpxTbnPageClient(
            base_url=broadcast_settings.base_url,
            user_agent=broadcast_settings.user_agent,
            timeout=broadcast_settings.timeout_seconds,
        )
