"""
Tests for ledger.register_inbound() and ledger.register_inbound_new_item().
"""

import re
import uuid
from datetime import date

import pytest

from almoxarife import ledger, InvalidArgument, NotFound
from almoxarife.models import Movement, MovementType, Product


pytestmark = pytest.mark.django_db


class TestRegisterInbound:
    """Tests for ledger.register_inbound()."""

    def test_inbound_increments_quantity(self, product, user):
        entry = ledger.register_inbound(4, product, user)

        assert entry.product.quantity == 4
        assert entry.movement.type == MovementType.IN
        assert entry.movement.quantity == 4
        assert entry.movement.user == user

        product.refresh_from_db()
        assert product.quantity == 4

    def test_inbound_accepts_ids(self, product, user):
        """Product and user may be given as primary keys."""
        entry = ledger.register_inbound(2, str(product.pk), user.pk)

        assert entry.product.pk == product.pk
        assert entry.movement.user_id == user.pk

    def test_multiple_inbounds_accumulate(self, product, user):
        ledger.register_inbound(3, product, user)
        entry = ledger.register_inbound(5, product, user)

        assert entry.product.quantity == 8
        assert product.movements.count() == 2

    def test_inbound_unknown_product(self, user):
        with pytest.raises(NotFound) as exc:
            ledger.register_inbound(1, uuid.uuid4(), user)

        assert exc.value.code == 'PRODUCT_NOT_FOUND'
        assert Movement.objects.count() == 0

    def test_inbound_malformed_product_id(self, user):
        with pytest.raises(NotFound):
            ledger.register_inbound(1, 'not-a-uuid', user)

    @pytest.mark.parametrize('quantity', [0, -1, 1.5, '3', True, None])
    def test_inbound_invalid_quantity(self, product, user, quantity):
        with pytest.raises(InvalidArgument) as exc:
            ledger.register_inbound(quantity, product, user)

        assert exc.value.code == 'INVALID_QUANTITY'
        product.refresh_from_db()
        assert product.quantity == 0
        assert product.movements.count() == 0

    def test_inbound_has_no_maximum(self, product, user):
        """The per-exit ceiling does not apply to entries."""
        entry = ledger.register_inbound(500, product, user)

        assert entry.product.quantity == 500

    def test_inbound_requires_user(self, product):
        with pytest.raises(InvalidArgument) as exc:
            ledger.register_inbound(1, product, None)

        assert exc.value.code == 'USER_REQUIRED'


class TestRegisterInboundNewItem:
    """Tests for ledger.register_inbound_new_item()."""

    def test_first_item_on_empty_catalog(self, user):
        """WIDGET x7 on an empty catalog gets code 1 and one IN movement."""
        entry = ledger.register_inbound_new_item(7, user, 'WIDGET')

        assert entry.product.code == 1
        assert entry.product.quantity == 7
        assert Product.objects.count() == 1

        movements = list(entry.product.movements.all())
        assert len(movements) == 1
        assert movements[0].type == MovementType.IN
        assert movements[0].quantity == 7
        assert movements[0] == entry.movement

    def test_codes_are_sequential(self, user):
        codes = [
            ledger.register_inbound_new_item(1, user, f'Item {n}').product.code
            for n in range(3)
        ]

        assert codes == [1, 2, 3]

    def test_codes_continue_after_plain_create(self, user, product):
        """Products created outside the ledger draw from the same sequence."""
        entry = ledger.register_inbound_new_item(1, user, 'Caneta')

        assert product.code == 1
        assert entry.product.code == 2

    def test_descriptive_fields(self, user):
        entry = ledger.register_inbound_new_item(
            3, user, '  Monitor 24"  ',
            manufacturer='Dell',
            model='P2422H',
            nfe='000123',
            dt_nfe=date(2026, 1, 15),
            nchagpc='NCH-77',
            sector='TI',
            unit='Sede',
        )
        product = entry.product

        assert product.name == 'Monitor 24"'
        assert product.manufacturer == 'Dell'
        assert product.model == 'P2422H'
        assert product.nfe == '000123'
        assert product.dt_nfe == date(2026, 1, 15)
        assert product.nchagpc == 'NCH-77'
        assert product.sector == 'TI'
        assert product.unit == 'Sede'

    def test_inclusion_time_from_transaction_start(self, user):
        entry = ledger.register_inbound_new_item(1, user, 'Cabo HDMI')
        product = entry.product

        assert product.dt_inclu is not None
        assert re.fullmatch(r'\d{2}:\d{2}', product.hora_inclu)
        assert product.hora_inclu == product.dt_inclu.strftime('%H:%M')

    def test_zero_quantity_rejected(self, user):
        with pytest.raises(InvalidArgument) as exc:
            ledger.register_inbound_new_item(0, user, 'Vazio')

        assert exc.value.code == 'INVALID_QUANTITY'
        assert Product.objects.count() == 0

    def test_blank_name_rejected(self, user):
        with pytest.raises(InvalidArgument) as exc:
            ledger.register_inbound_new_item(1, user, '   ')

        assert exc.value.code == 'NAME_REQUIRED'
        assert Product.objects.count() == 0
        assert Movement.objects.count() == 0
