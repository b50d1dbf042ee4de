"""
Tests for model-level rules: immutability, quantity cache, codes.
"""

import logging

import pytest
from django.db import IntegrityError, transaction
from django.urls import reverse

from almoxarife import ledger
from almoxarife.exceptions import FailedPrecondition, LedgerError, NotFound
from almoxarife.models import Movement, MovementType, Product, Sector, Sequence


pytestmark = pytest.mark.django_db


class TestMovementImmutability:

    def test_save_existing_raises(self, stocked_product):
        movement = stocked_product.movements.get()
        movement.quantity = 99

        with pytest.raises(ValueError):
            movement.save()

    def test_delete_raises(self, stocked_product):
        movement = stocked_product.movements.get()

        with pytest.raises(ValueError):
            movement.delete()

        assert stocked_product.movements.count() == 1

    def test_zero_quantity_rejected(self, product, user):
        with pytest.raises(ValueError):
            Movement.objects.create(product=product, user=user, type=MovementType.IN, quantity=0)

    def test_unknown_type_rejected(self, product, user):
        with pytest.raises(ValueError):
            Movement.objects.create(product=product, user=user, type='MOVE', quantity=1)

    def test_delta_sign(self, product, user):
        movement_in = Movement(product=product, user=user, type=MovementType.IN, quantity=3)
        movement_out = Movement(product=product, user=user, type=MovementType.OUT, quantity=3)

        assert movement_in.delta == 3
        assert movement_out.delta == -3

    def test_str_shows_product_code(self, stocked_product):
        movement = stocked_product.movements.get()

        assert str(movement) == '+10 | #1'

    def test_creating_movement_updates_cache(self, product, user):
        Movement.objects.create(product=product, user=user, type=MovementType.IN, quantity=4)
        Movement.objects.create(product=product, user=user, type=MovementType.OUT, quantity=1)

        product.refresh_from_db()
        assert product.quantity == 3


class TestProductQuantity:

    def test_new_product_starts_empty(self, product):
        assert product.quantity == 0
        assert product.code == 1

    def test_database_rejects_negative_quantity(self, product, user):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Movement.objects.create(product=product, user=user, type=MovementType.OUT, quantity=1)

        product.refresh_from_db()
        assert product.quantity == 0
        assert product.movements.count() == 0

    def test_ledger_total(self, stocked_product, user, unit, sector):
        ledger.register_outbound(4, stocked_product, user, unit=unit, sector=sector)

        assert stocked_product.ledger_total() == 6

    def test_recalculate_fixes_drift(self, stocked_product, caplog):
        Product.objects.filter(pk=stocked_product.pk).update(quantity=42)
        stocked_product.refresh_from_db()

        with caplog.at_level(logging.WARNING, logger='almoxarife'):
            total = stocked_product.recalculate()

        assert total == 10
        stocked_product.refresh_from_db()
        assert stocked_product.quantity == 10
        assert 'recalculated: 42 → 10' in caplog.text

    def test_recalculate_without_drift_is_silent(self, stocked_product, caplog):
        with caplog.at_level(logging.WARNING, logger='almoxarife'):
            assert stocked_product.recalculate() == 10

        assert caplog.text == ''

    def test_hora_inclu_filled_on_create(self, product):
        assert len(product.hora_inclu) == 5
        assert product.hora_inclu[2] == ':'

    def test_str(self, stocked_product):
        assert str(stocked_product) == '#1 Toner HP 85A'


class TestCatalogEdit:

    def test_stale_instance_keeps_ledger_quantity(self, stocked_product, user, unit, sector):
        ledger.register_outbound(3, stocked_product.pk, user, unit=unit, sector=sector)

        stocked_product.name = 'Toner HP'
        stocked_product.save()

        stocked_product.refresh_from_db()
        assert stocked_product.name == 'Toner HP'
        assert stocked_product.quantity == 7
        assert stocked_product.quantity == stocked_product.ledger_total()

    def test_quantity_in_update_fields_is_ignored(self, stocked_product):
        stocked_product.quantity = 99
        stocked_product.save(update_fields=['quantity'])

        stocked_product.refresh_from_db()
        assert stocked_product.quantity == 10

    def test_admin_change_after_exit(self, admin_client, stocked_product, user, unit, sector):
        url = reverse('admin:almoxarife_product_change', args=[stocked_product.pk])
        ledger.register_outbound(4, stocked_product.pk, user, unit=unit, sector=sector)

        response = admin_client.post(url, {
            'name': 'Toner HP 85A (preto)',
            'manufacturer': 'HP',
            'model': 'CE285A',
            'nfe': '',
            'dt_nfe': '',
            'nchagpc': 'NCH-001',
            '_save': 'Salvar',
        })

        assert response.status_code == 302
        stocked_product.refresh_from_db()
        assert stocked_product.name == 'Toner HP 85A (preto)'
        assert stocked_product.quantity == 6
        assert stocked_product.quantity == stocked_product.ledger_total()


class TestSequence:

    def test_next_value_increments(self):
        first = Sequence.next_value('test.counter')
        second = Sequence.next_value('test.counter')

        assert (first, second) == (1, 2)

    def test_seed_used_when_missing(self):
        assert Sequence.next_value('test.seeded', seed=lambda: 100) == 100
        assert Sequence.next_value('test.seeded', seed=lambda: 100) == 101

    def test_missing_product_sequence_starts_after_highest_code(self, user):
        ledger.register_inbound_new_item(1, user, 'A')
        ledger.register_inbound_new_item(1, user, 'B')
        Sequence.objects.filter(name='product.code').delete()

        entry = ledger.register_inbound_new_item(1, user, 'C')

        assert entry.product.code == 3


class TestReferenceData:

    def test_sector_names_unique_per_unit(self, unit, sector, other_unit):
        Sector.objects.create(unit=other_unit, name=sector.name)

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Sector.objects.create(unit=unit, name=sector.name)


class TestErrors:

    def test_error_hierarchy(self):
        assert issubclass(NotFound, LedgerError)
        assert NotFound.http_status == 404
        assert FailedPrecondition.http_status == 409

    def test_as_dict(self):
        error = FailedPrecondition('INSUFFICIENT_STOCK', available=3, requested=4)

        assert error.as_dict() == {
            'code': 'INSUFFICIENT_STOCK',
            'message': 'Estoque insuficiente',
            'data': {'available': 3, 'requested': 4},
        }
        assert str(error) == '[INSUFFICIENT_STOCK] Estoque insuficiente'

    def test_custom_message(self):
        error = NotFound('PRODUCT_NOT_FOUND', 'Sumiu')

        assert error.message == 'Sumiu'
