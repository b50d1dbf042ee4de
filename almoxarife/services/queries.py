"""
Ledger queries — read-only operations.

All methods are classmethod on Ledger and use no locking.
"""

from datetime import date, datetime, time

from django.utils import timezone

from almoxarife.conf import ledger_settings
from almoxarife.exceptions import InvalidArgument, NotFound
from almoxarife.models.enums import MovementType
from almoxarife.models.movement import Movement
from almoxarife.models.product import Product
from almoxarife.services.movements import first_or_none, pk_of


def as_datetime(value: date | datetime | None, end_of_day: bool = False) -> datetime | None:
    """
    Normalize a date or datetime bound to an aware datetime.

    A bare date becomes local midnight, or the last instant of that day
    when ``end_of_day`` is set, so ``to=<date>`` covers the whole day.
    """
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.max if end_of_day else time.min)
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


class LedgerQueries:
    """Read-only ledger query methods."""

    @classmethod
    def get_product(cls, product) -> Product:
        """
        Fetch a product by id.

        Raises:
            NotFound('PRODUCT_NOT_FOUND')
        """
        found = first_or_none(Product.objects, pk=pk_of(product))
        if found is None:
            raise NotFound('PRODUCT_NOT_FOUND', product=pk_of(product))
        return found

    @classmethod
    def list_movements(cls, limit: int | None = None, type: str | None = None,
                       date_from: date | datetime | None = None,
                       date_to: date | datetime | None = None) -> list[Movement]:
        """
        Latest movements, newest first.

        Args:
            limit: Max rows (None or < 1 = DEFAULT_MOVEMENT_LIMIT)
            type: 'IN' or 'OUT' (None = both)
            date_from: Lower bound on created_at, inclusive
            date_to: Upper bound on created_at, inclusive (a date covers the whole day)

        Returns:
            Movements with product and user loaded

        Raises:
            InvalidArgument('INVALID_MOVEMENT_TYPE')
        """
        if limit is None or limit < 1:
            limit = ledger_settings.DEFAULT_MOVEMENT_LIMIT

        qs = Movement.objects.select_related('product', 'user', 'supplier')

        if type:
            kind = str(type).upper()
            if kind not in MovementType.values:
                raise InvalidArgument('INVALID_MOVEMENT_TYPE', type=type)
            qs = qs.filter(type=kind)

        qs = qs.between(as_datetime(date_from), as_datetime(date_to, end_of_day=True))

        return list(qs.order_by('-created_at', '-id')[:limit])
