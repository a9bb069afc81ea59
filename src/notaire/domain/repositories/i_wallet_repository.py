"""
Wallet repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from notaire.domain.entities.wallet import Wallet


class IWalletRepository(ABC):
    """Interface for wallet persistence operations."""

    @abstractmethod
    async def create(self, wallet: Wallet) -> Wallet:
        """
        Create new wallet.

        Args:
            wallet: Wallet entity to create (id assigned if missing)

        Returns:
            Created wallet entity
        """

    @abstractmethod
    async def get_by_id(self, wallet_id: UUID) -> Optional[Wallet]:
        """
        Get wallet by ID.

        Args:
            wallet_id: Wallet storage identifier

        Returns:
            Wallet entity if found, None otherwise
        """

    @abstractmethod
    async def get_by_address(self, address: str) -> Optional[Wallet]:
        """
        Get wallet by address.

        Args:
            address: Hex address (any case)

        Returns:
            Wallet entity if found, None otherwise
        """

    @abstractmethod
    async def update(self, wallet: Wallet) -> Wallet:
        """
        Update admin/operator flags of an existing wallet.

        Args:
            wallet: Wallet entity with updated data

        Returns:
            Updated wallet entity

        Raises:
            EntityNotFoundError: If wallet does not exist
        """

    @abstractmethod
    async def list_operators(self) -> List[Wallet]:
        """
        List wallets flagged as operators.

        Returns:
            List of operator wallets
        """
