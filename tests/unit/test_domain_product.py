"""Unit tests for the Product and ProductImage entities."""

from datetime import timedelta

import pytest
from uuid_extensions import uuid7

from tests.utils.utils import FIXED_NOW, build_image, build_product

LATER = FIXED_NOW + timedelta(minutes=5)


@pytest.mark.unit
class TestProductInvariants:
    def test_negative_quantity_rejected_at_construction(self):
        with pytest.raises(ValueError, match="quantity cannot be negative"):
            build_product(uuid7(), quantity=-1)

    def test_zero_quantity_allowed(self):
        assert build_product(uuid7(), quantity=0).quantity == 0


@pytest.mark.unit
class TestProductApplyUpdate:
    """Test Product.apply_update()."""

    def test_partial_update_changes_only_supplied_fields(self):
        product = build_product(uuid7(), name="Widget", manufacturer="Acme")

        changed = product.apply_update(now=LATER, name=" Gadget ")

        assert changed is True
        assert product.name == "Gadget"
        assert product.manufacturer == "Acme"
        assert product.updated_at == LATER

    def test_no_effective_change(self):
        product = build_product(uuid7(), name="Widget", quantity=5)

        changed = product.apply_update(now=LATER, name="Widget", quantity=5, sku="  ")

        assert changed is False
        assert product.updated_at == FIXED_NOW

    def test_quantity_zero_is_applied(self):
        product = build_product(uuid7(), quantity=5)

        assert product.apply_update(now=LATER, quantity=0) is True
        assert product.quantity == 0

    def test_negative_quantity_update_rejected(self):
        product = build_product(uuid7(), quantity=5)

        with pytest.raises(ValueError):
            product.apply_update(now=LATER, quantity=-3)
        assert product.quantity == 5

    def test_owner_is_never_reassigned(self):
        owner_id = uuid7()
        product = build_product(owner_id)

        with pytest.raises(TypeError):
            product.apply_update(now=LATER, owner_id=uuid7())
        assert product.owner_id == owner_id


@pytest.mark.unit
class TestProductImage:
    def test_belongs_to_parent_only(self):
        product = build_product(uuid7())
        image = build_image(product)

        assert image.belongs_to(product.id)
        assert not image.belongs_to(uuid7())
