"""Infrastructure providers."""

# Import bases
from .payment import StripeProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .payment import ProdStripeProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "StripeProvider",
    "PersistenceProvider",
    "ProdStripeProvider",
    "ProdPersistenceProvider",
]
