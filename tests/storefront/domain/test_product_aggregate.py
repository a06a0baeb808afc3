import pytest
from protean.exceptions import ValidationError
from protean.utils import DomainObjects
from storefront.product.events import ProductAdded
from storefront.product.product import Product


def test_product_aggregate_element_type():
    assert Product.element_type == DomainObjects.AGGREGATE


class TestProductCreation:
    def test_create_product(self):
        product = Product.create(
            name="YONEX Smash Badminton Racquet",
            category="Sports",
            cost=100,
            rating=5,
            image="https://crio-directus-assets.s3.ap-south-1.amazonaws.com/64b930f7.png",
        )
        assert product.name == "YONEX Smash Badminton Racquet"
        assert product.category == "Sports"
        assert product.cost == 100
        assert product.rating == 5
        assert product.created_at is not None

    def test_rating_defaults_to_zero(self):
        product = Product.create(name="Tan Leatherette Weekender Duffle", category="Fashion", cost=150)
        assert product.rating == 0
        assert product.image is None

    def test_create_raises_event(self):
        product = Product.create(name="Atomberg Ceiling Fan", category="Home & Kitchen", cost=80)
        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, ProductAdded)
        assert event.product_id == product.id
        assert event.cost == 80

    def test_negative_cost_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Product.create(name="Broken", category="Misc", cost=-1)
        assert "cost" in exc.value.messages

    @pytest.mark.parametrize("rating", [-1, 6])
    def test_rating_out_of_range_is_rejected(self, rating):
        with pytest.raises(ValidationError) as exc:
            Product.create(name="Broken", category="Misc", cost=10, rating=rating)
        assert "rating" in exc.value.messages

    def test_category_is_required(self):
        with pytest.raises(ValidationError):
            Product(name="No Category", cost=10)
