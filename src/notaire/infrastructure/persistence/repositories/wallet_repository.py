"""
Wallet repository implementation using SQLAlchemy.
"""

from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notaire.domain.entities.wallet import Wallet
from notaire.domain.exceptions import EntityNotFoundError, ValidationError
from notaire.domain.repositories.i_wallet_repository import IWalletRepository
from notaire.domain.value_objects.wallet_address import WalletAddress
from notaire.infrastructure.monitoring import get_logger
from notaire.infrastructure.persistence.models import WalletModel
from notaire.infrastructure.persistence.records import WalletRecord, to_record

logger = get_logger(__name__)


class WalletRepository(IWalletRepository):
    """
    SQLAlchemy implementation of wallet repository.

    Rows are mapped through WalletRecord so storage and decoding rules
    live in one place.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, wallet: Wallet) -> Wallet:
        """
        Persist a new wallet.

        Args:
            wallet: Wallet entity (id assigned here when missing)

        Returns:
            Created wallet entity
        """
        if wallet.id is None:
            wallet.id = uuid4()

        record = to_record(wallet)
        model = WalletModel(
            id=record.id,
            address=record.address,
            private_key=record.private_key,
            admin=record.admin,
            operator=record.operator,
        )

        self.session.add(model)
        await self.session.flush()

        logger.info(
            "Wallet stored",
            extra={"wallet_id": str(wallet.id), "wallet_address": record.address},
        )
        return self._to_entity(model)

    async def get_by_id(self, wallet_id: UUID) -> Optional[Wallet]:
        """
        Retrieve wallet by ID.

        Args:
            wallet_id: Wallet storage identifier

        Returns:
            Wallet entity if found, None otherwise
        """
        stmt = select(WalletModel).where(WalletModel.id == wallet_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def get_by_address(self, address: str) -> Optional[Wallet]:
        """
        Retrieve wallet by address (any case, optional 0x).

        Raises:
            ValidationError: If address is not hex
        """
        try:
            checksum = WalletAddress.from_hex(address).checksum
        except ValueError as e:
            raise ValidationError("address", str(e)) from e

        stmt = select(WalletModel).where(WalletModel.address == checksum)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def update(self, wallet: Wallet) -> Wallet:
        """
        Update admin/operator flags.

        Raises:
            EntityNotFoundError: If wallet does not exist
        """
        stmt = select(WalletModel).where(WalletModel.id == wallet.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise EntityNotFoundError("Wallet", str(wallet.id))

        model.admin = wallet.admin
        model.operator = wallet.operator

        await self.session.flush()

        return self._to_entity(model)

    async def list_operators(self) -> List[Wallet]:
        """List wallets flagged as operators, oldest first."""
        stmt = (
            select(WalletModel)
            .where(WalletModel.operator.is_(True))
            .order_by(WalletModel.created_at.asc())
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: WalletModel) -> Wallet:
        """Convert database model to domain entity."""
        record = WalletRecord(
            id=model.id,
            address=model.address,
            private_key=model.private_key,
            admin=model.admin,
            operator=model.operator,
        )
        return record.to_wallet()
