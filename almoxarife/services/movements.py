"""
Ledger movements — state-changing operations (inbound, new item, outbound).

All methods use transaction.atomic() and lock the product row with
select_for_update() before reading its quantity.
"""

import logging
from dataclasses import dataclass
from datetime import date

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from almoxarife.conf import ledger_settings
from almoxarife.exceptions import FailedPrecondition, InvalidArgument, NotFound
from almoxarife.models.enums import MovementType
from almoxarife.models.movement import Movement
from almoxarife.models.product import Product
from almoxarife.models.reference import Sector, Supplier, Unit

logger = logging.getLogger('almoxarife')


@dataclass(frozen=True)
class LedgerEntry:
    """Result of a register operation: updated product and the new movement."""

    product: Product
    movement: Movement


def pk_of(obj):
    """Accept a model instance or its primary key."""
    return getattr(obj, 'pk', obj)


def first_or_none(qs, **lookup):
    """Like qs.filter(**lookup).first(), but malformed ids also mean "missing"."""
    try:
        return qs.filter(**lookup).first()
    except (ValueError, TypeError, ValidationError):
        return None


class LedgerMovements:
    """State-changing ledger methods."""

    @classmethod
    def register_inbound(cls, quantity: int, product, user) -> LedgerEntry:
        """
        Stock entry for an existing product.

        Raises:
            InvalidArgument('INVALID_QUANTITY'): If quantity is not an integer >= 1
            NotFound('PRODUCT_NOT_FOUND'): If product does not exist

        Concurrency:
            - Runs under transaction.atomic()
            - Uses select_for_update() on Product
            - Movement.save() updates quantity atomically
        """
        cls._validate_quantity(quantity)
        user_id = cls._user_id(user)

        with transaction.atomic():
            locked = cls._lock_product(product)

            movement = Movement.objects.create(
                product=locked,
                user_id=user_id,
                type=MovementType.IN,
                quantity=quantity,
            )

            locked.refresh_from_db()
            logger.info(
                "ledger.inbound",
                extra={
                    "product": str(locked),
                    "qty": quantity,
                    "user_id": user_id,
                    "movement_id": movement.pk,
                },
            )
            return LedgerEntry(product=locked, movement=movement)

    @classmethod
    def register_inbound_new_item(cls, quantity: int, user, name: str,
                                  manufacturer: str | None = None,
                                  model: str | None = None,
                                  nfe: str | None = None,
                                  dt_nfe: date | None = None,
                                  nchagpc: str | None = None,
                                  sector: str | None = None,
                                  unit: str | None = None) -> LedgerEntry:
        """
        Stock entry that creates the product.

        The product (id, next sequential code, inclusion date/time) and its
        IN movement are created in the same transaction, so a new item always
        comes with stock and an audit trail.

        Raises:
            InvalidArgument('INVALID_QUANTITY'): If quantity is not an integer >= 1
            InvalidArgument('NAME_REQUIRED'): If name is blank
        """
        cls._validate_quantity(quantity)
        if not name or not str(name).strip():
            raise InvalidArgument('NAME_REQUIRED')
        user_id = cls._user_id(user)

        with transaction.atomic():
            now = timezone.now()
            product = Product.objects.create(
                name=str(name).strip(),
                manufacturer=manufacturer,
                model=model,
                nfe=nfe,
                dt_nfe=dt_nfe,
                dt_inclu=now,
                hora_inclu=timezone.localtime(now).strftime('%H:%M'),
                nchagpc=nchagpc,
                sector=sector,
                unit=unit,
            )

            movement = Movement.objects.create(
                product=product,
                user_id=user_id,
                type=MovementType.IN,
                quantity=quantity,
            )

            product.refresh_from_db()
            logger.info(
                "ledger.inbound_new_item",
                extra={
                    "product": str(product),
                    "code": product.code,
                    "qty": quantity,
                    "user_id": user_id,
                    "movement_id": movement.pk,
                },
            )
            return LedgerEntry(product=product, movement=movement)

    @classmethod
    def register_outbound(cls, quantity: int, product, user,
                          unit=None, sector=None,
                          nchagpc: str | None = None,
                          supplier=None) -> LedgerEntry:
        """
        Stock exit to a unit/sector.

        Checks run in this order, each with its own failure:

        1. NotFound('PRODUCT_NOT_FOUND')
        2. InvalidArgument('INVALID_QUANTITY' / 'QUANTITY_EXCEEDS_MAXIMUM')
        3. InvalidArgument('UNIT_SECTOR_REQUIRED')
        4. NotFound('UNIT_NOT_FOUND')
        5. NotFound('SECTOR_NOT_FOUND'): sector missing or from another unit
           NotFound('SUPPLIER_NOT_FOUND'): supplier given but missing
        6. FailedPrecondition('INSUFFICIENT_STOCK')

        On success the product's sector/unit snapshot takes the resolved
        names, and nchagpc is overwritten only when given (None keeps it).

        Concurrency:
            - Runs under transaction.atomic()
            - Uses select_for_update() on Product
            - Verifies stock after lock
        """
        user_id = cls._user_id(user)
        maximum = ledger_settings.MAX_EXIT_QUANTITY

        with transaction.atomic():
            locked = cls._lock_product(product)

            cls._validate_quantity(quantity, maximum=maximum)

            if unit in (None, '') or sector in (None, ''):
                raise InvalidArgument('UNIT_SECTOR_REQUIRED', unit=unit, sector=sector)

            resolved_unit = first_or_none(Unit.objects, pk=pk_of(unit))
            if resolved_unit is None:
                raise NotFound('UNIT_NOT_FOUND', unit=pk_of(unit))

            resolved_sector = first_or_none(
                Sector.objects, pk=pk_of(sector), unit=resolved_unit
            )
            if resolved_sector is None:
                raise NotFound('SECTOR_NOT_FOUND', unit=resolved_unit.pk, sector=pk_of(sector))

            resolved_supplier = None
            if supplier not in (None, ''):
                resolved_supplier = first_or_none(Supplier.objects, pk=pk_of(supplier))
                if resolved_supplier is None:
                    raise NotFound('SUPPLIER_NOT_FOUND', supplier=pk_of(supplier))

            if locked.quantity < quantity:
                raise FailedPrecondition(
                    'INSUFFICIENT_STOCK',
                    available=locked.quantity,
                    requested=quantity,
                )

            locked.sector = resolved_sector.name
            locked.unit = resolved_unit.name
            update_fields = ['sector', 'unit', 'updated_at']
            if nchagpc is not None:
                locked.nchagpc = nchagpc
                update_fields.append('nchagpc')
            locked.save(update_fields=update_fields)

            movement = Movement.objects.create(
                product=locked,
                user_id=user_id,
                type=MovementType.OUT,
                quantity=quantity,
                supplier=resolved_supplier,
            )

            locked.refresh_from_db()
            logger.info(
                "ledger.outbound",
                extra={
                    "product": str(locked),
                    "qty": quantity,
                    "unit": resolved_unit.name,
                    "sector": resolved_sector.name,
                    "user_id": user_id,
                    "movement_id": movement.pk,
                },
            )
            return LedgerEntry(product=locked, movement=movement)

    # ══════════════════════════════════════════════════════════════
    # HELPERS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def _validate_quantity(cls, quantity, maximum: int | None = None):
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidArgument('INVALID_QUANTITY', requested=quantity)
        if maximum is not None and quantity > maximum:
            raise InvalidArgument(
                'QUANTITY_EXCEEDS_MAXIMUM',
                requested=quantity,
                maximum=maximum,
            )

    @classmethod
    def _user_id(cls, user):
        user_id = pk_of(user)
        if user_id in (None, ''):
            raise InvalidArgument('USER_REQUIRED')
        return user_id

    @classmethod
    def _lock_product(cls, product) -> Product:
        """Re-read the product under a row lock. Caller must be inside atomic()."""
        locked = first_or_none(Product.objects.select_for_update(), pk=pk_of(product))
        if locked is None:
            raise NotFound('PRODUCT_NOT_FOUND', product=pk_of(product))
        return locked
