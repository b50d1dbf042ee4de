"""
Pytest fixtures for Almoxarife tests.
"""

from datetime import date

import pytest
from django.contrib.auth import get_user_model

from almoxarife import ledger
from almoxarife.models import Product, Sector, Supplier, Unit


User = get_user_model()


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username='ana.souza',
        email='ana@example.com',
        password='testpass123',
        first_name='Ana',
        last_name='Souza',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username='bruno', password='testpass123')


@pytest.fixture
def product(db):
    """Product with no stock and no movements."""
    return Product.objects.create(name='Grampeador', manufacturer='Acme')


@pytest.fixture
def stocked_product(user):
    """Product entered through the ledger with 10 units."""
    return ledger.register_inbound_new_item(
        10, user, 'Toner HP 85A',
        manufacturer='HP',
        model='CE285A',
        nchagpc='NCH-001',
    ).product


@pytest.fixture
def unit(db):
    return Unit.objects.create(name='Sede')


@pytest.fixture
def sector(unit):
    return Sector.objects.create(unit=unit, name='Financeiro')


@pytest.fixture
def other_unit(db):
    return Unit.objects.create(name='Filial Norte')


@pytest.fixture
def other_sector(other_unit):
    """Sector that belongs to other_unit, not to unit."""
    return Sector.objects.create(unit=other_unit, name='Almoxarifado')


@pytest.fixture
def supplier(db):
    return Supplier.objects.create(name='Papelaria Central', email='vendas@central.example')


@pytest.fixture
def day1():
    return date(2026, 3, 2)


@pytest.fixture
def day2():
    return date(2026, 3, 3)
