"""Shipping address updates: command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.user import User


@storefront.command(part_of="User")
class UpdateAddress:
    user_id: Identifier(required=True)
    address: String(required=True, max_length=500)


@storefront.command_handler(part_of=User)
class UpdateAddressHandler:
    @handle(UpdateAddress)
    def update_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.update_address(command.address)
        repo.add(user)
