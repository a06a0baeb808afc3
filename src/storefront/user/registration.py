"""User registration — command and handler."""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from storefront.config import StorefrontSettings
from storefront.domain import storefront
from storefront.errors import BadRequestError
from storefront.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create a new user account.

    The starting wallet and address come from the caller's settings, see
    `RegisterUser.with_defaults`.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=255)
    wallet_money: Float(required=True, min_value=0.0)
    address: String(required=True, max_length=500)

    @classmethod
    def with_defaults(cls, settings: StorefrontSettings, name, email, password):
        return cls(
            name=name,
            email=email,
            password=password,
            wallet_money=settings.default_wallet_money,
            address=settings.default_address,
        )


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.is_email_taken(command.email):
            raise BadRequestError("Email already taken")

        user = User.register(
            name=command.name,
            email=command.email,
            password=command.password,
            wallet_money=command.wallet_money,
            address=command.address,
        )
        repo.add(user)

        logger.info("user_registered", user_id=str(user.id), email=user.email)
        return str(user.id)
