"""
WalletRecord - flat storage projection of a Wallet.

Only used at the persistence boundary; signing logic works on Wallet.
"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from notaire.domain.entities.wallet import Wallet
from notaire.domain.exceptions import RecordDecodeFailed
from notaire.domain.value_objects.wallet_address import WalletAddress


class WalletRecord(BaseModel):
    """Storage record: hex address, hex private key, flags, id."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Optional[UUID] = Field(default=None, alias="_id")
    address: str
    private_key: str = Field(alias="privateKey")
    admin: bool = False
    operator: bool = False

    @classmethod
    def from_wallet(cls, wallet: Wallet) -> "WalletRecord":
        """Project a wallet into its storage record."""
        return cls(
            id=wallet.id,
            address=wallet.get_address(),
            private_key=wallet.get_private_key(),
            admin=wallet.admin,
            operator=wallet.operator,
        )

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "WalletRecord":
        """
        Parse a stored document (keys `_id`, `address`, `privateKey`,
        `admin`, `operator`).

        Raises:
            RecordDecodeFailed: If the document is structurally invalid
        """
        try:
            return cls.model_validate(document)
        except PydanticValidationError as e:
            raise RecordDecodeFailed(
                f"{e.error_count()} invalid field(s): "
                + ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            ) from e

    def to_document(self) -> dict[str, Any]:
        """Dump as a stored document using storage key names."""
        return self.model_dump(by_alias=True)

    def to_wallet(self) -> Wallet:
        """
        Rebuild the wallet.

        Raises:
            InvalidKeyFormat: If the private key is malformed
            RecordDecodeFailed: If the stored address is not hex or does
                not belong to the private key
        """
        wallet = Wallet.from_private_key(
            self.private_key,
            id=self.id,
            admin=self.admin,
            operator=self.operator,
        )

        try:
            stored_address = WalletAddress.from_hex(self.address)
        except ValueError as e:
            raise RecordDecodeFailed(f"address: {e}") from e

        if stored_address != wallet.address:
            raise RecordDecodeFailed("address does not match private key")

        return wallet


def to_record(wallet: Wallet) -> WalletRecord:
    """Encode a wallet for storage."""
    return WalletRecord.from_wallet(wallet)


def from_record(record: WalletRecord) -> Wallet:
    """Decode a wallet from storage."""
    return record.to_wallet()
