"""Application tests for shipping address updates."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.user.address import UpdateAddress
from storefront.user.user import User


class TestUpdateAddressFlow:
    def test_update_address(self, make_user):
        user = make_user()
        current_domain.process(UpdateAddress(user_id=user.id, address="128 Park Street, Bengaluru"), asynchronous=False)

        updated = current_domain.repository_for(User).get(user.id)
        assert updated.address == "128 Park Street, Bengaluru"
        assert updated.has_set_non_default_address("ADDRESS_NOT_SET") is True

    def test_blank_address_is_rejected(self, make_user):
        user = make_user()
        with pytest.raises(ValidationError):
            current_domain.process(UpdateAddress(user_id=user.id, address="   "), asynchronous=False)

        assert current_domain.repository_for(User).get(user.id).address == "ADDRESS_NOT_SET"

    def test_unknown_user(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateAddress(user_id="no-such-user", address="12 Hill Road"), asynchronous=False)
