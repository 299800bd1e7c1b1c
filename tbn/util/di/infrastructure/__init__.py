"""Infrastructure providers."""

# Import bases
from .broadcast import BroadcastProvider
from .google import GoogleProvider
from .persistence import PersistenceProvider
from .verifier import VerifierAggregatorProvider

# Import implementations (needed for __subclasses__())
from .broadcast import ProdBroadcastProvider  # noqa: F401
from .google import ProdGoogleProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "BroadcastProvider",
    "GoogleProvider",
    "PersistenceProvider",
    "ProdBroadcastProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
    "VerifierAggregatorProvider",
]
