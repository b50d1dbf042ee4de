"""
Shared helpers for Almoxarife tests.
"""

from datetime import datetime, timezone

from almoxarife.models import Movement, MovementType


def at_noon(day):
    """Aware UTC datetime at noon of the given date."""
    return datetime(day.year, day.month, day.day, 12, 0, tzinfo=timezone.utc)


def backdated(product, user, type, quantity, created_at):
    """Movement with a fixed timestamp (still updates the product's quantity)."""
    return Movement.objects.create(
        product=product,
        user=user,
        type=type,
        quantity=quantity,
        created_at=created_at,
    )


def inbound_at(product, user, quantity, created_at):
    return backdated(product, user, MovementType.IN, quantity, created_at)


def outbound_at(product, user, quantity, created_at):
    return backdated(product, user, MovementType.OUT, quantity, created_at)
