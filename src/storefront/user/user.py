"""User aggregate — an account holder with a wallet and a shipping address."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String

from storefront.domain import storefront
from storefront.shared.email import normalize_email, verify_email_address


@storefront.aggregate
class User:
    """A registered shopper, identified by a system ID and a unique email.

    The wallet and the address start out at configured defaults. An address
    still equal to the default means the user has not set one yet.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password: String(required=True, max_length=255)  # credential hash, never plain text
    wallet_money: Float(required=True, min_value=0.0)
    address: String(required=True, max_length=500)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def email_must_be_valid(self):
        verify_email_address(self.email)

    @invariant.post
    def email_must_be_normalized(self):
        if self.email != normalize_email(self.email):
            raise ValidationError({"email": ["Email must be stored trimmed and lowercase"]})

    @classmethod
    def register(cls, name, email, password, wallet_money, address):
        from storefront.user.events import UserRegistered

        now = datetime.now()
        user = cls(
            name=name.strip(),
            email=normalize_email(email),
            password=password,
            wallet_money=wallet_money,
            address=address,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                name=user.name,
                email=user.email,
                wallet_money=user.wallet_money,
                registered_at=now,
            )
        )
        return user

    def has_set_non_default_address(self, default_address) -> bool:
        return self.address != default_address

    def update_address(self, address):
        from storefront.user.events import AddressUpdated

        address = (address or "").strip()
        if not address:
            raise ValidationError({"address": ["Address cannot be blank"]})

        self.address = address
        self.updated_at = datetime.now()

        self.raise_(AddressUpdated(user_id=self.id, address=address))

    def debit_wallet(self, amount):
        """Take `amount` out of the wallet. The balance never goes negative."""
        from storefront.user.events import WalletDebited

        if amount < 0:
            raise ValidationError({"amount": ["Debit amount cannot be negative"]})
        if amount > self.wallet_money:
            raise ValidationError({"wallet_money": ["Insufficient balance"]})

        now = datetime.now()
        self.wallet_money = self.wallet_money - amount
        self.updated_at = now

        self.raise_(
            WalletDebited(
                user_id=self.id,
                amount=amount,
                balance=self.wallet_money,
                debited_at=now,
            )
        )
