"""Domain entities."""

from notaire.domain.entities.order import Order, OrderSide
from notaire.domain.entities.signable import Signable
from notaire.domain.entities.trade import Trade
from notaire.domain.entities.wallet import Wallet

__all__ = [
    "Order",
    "OrderSide",
    "Signable",
    "Trade",
    "Wallet",
]
