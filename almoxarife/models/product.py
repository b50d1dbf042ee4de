"""
Product model — Stock-keeping unit with cached on-hand quantity.
"""

import logging
import uuid

from django.db import models, transaction
from django.db.models import Max, Q, Sum
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from almoxarife.models.enums import MovementType

logger = logging.getLogger('almoxarife')


class Product(models.Model):
    """
    One stock-keeping unit.

    Identity:
    - id: opaque UUID
    - code: sequential number, assigned on first save, never reused

    Quantity:
    - quantity is a cache updated atomically by Movement
    - Read is O(1), not O(N)
    - Use recalculate() for audit/correction

    sector/unit are snapshots of the names used in the last outbound
    movement, not foreign keys. Renaming a Unit keeps old products as they were.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.PositiveIntegerField(
        unique=True,
        editable=False,
        verbose_name=_('Código'),
    )

    name = models.CharField(max_length=255, verbose_name=_('Nome'))
    manufacturer = models.CharField(max_length=255, null=True, blank=True, verbose_name=_('Fabricante'))
    model = models.CharField(max_length=255, null=True, blank=True, verbose_name=_('Modelo'))
    nfe = models.CharField(max_length=60, null=True, blank=True, verbose_name=_('NF-e'))
    dt_nfe = models.DateField(null=True, blank=True, verbose_name=_('Data da NF-e'))
    dt_inclu = models.DateTimeField(
        default=timezone.now,
        editable=False,
        verbose_name=_('Data de inclusão'),
    )
    hora_inclu = models.CharField(
        max_length=5,
        blank=True,
        default='',
        editable=False,
        verbose_name=_('Hora de inclusão'),
    )
    nchagpc = models.CharField(max_length=120, null=True, blank=True, verbose_name=_('NCHAGPC'))

    # Snapshot of the last outbound destination
    sector = models.CharField(max_length=120, null=True, blank=True, verbose_name=_('Setor'))
    unit = models.CharField(max_length=120, null=True, blank=True, verbose_name=_('Unidade'))

    # Quantity cache (updated atomically by Movement)
    quantity = models.PositiveIntegerField(
        default=0,
        editable=False,
        verbose_name=_('Quantidade'),
    )

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Produto')
        verbose_name_plural = _('Produtos')
        ordering = ['code']
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gte=0),
                name='product_quantity_non_negative',
            )
        ]

    def save(self, *args, **kwargs):
        """
        Assign code and inclusion time on first save.

        Existing rows never write quantity back: the in-memory value may be
        stale, and only Movement (F() update) or recalculate() own it.
        """
        if not self._state.adding:
            update_fields = kwargs.get('update_fields')
            if update_fields is None:
                update_fields = self._catalog_fields()
            kwargs['update_fields'] = [f for f in update_fields if f != 'quantity']
            if not kwargs['update_fields']:
                return
            self._fill_hora_inclu()
            super().save(*args, **kwargs)
            return

        if self.code is None:
            from almoxarife.conf import ledger_settings
            from almoxarife.models.sequence import Sequence

            with transaction.atomic():
                self.code = Sequence.next_value(
                    ledger_settings.PRODUCT_CODE_SEQUENCE,
                    seed=self._next_free_code,
                )
                self._fill_hora_inclu()
                super().save(*args, **kwargs)
            return

        self._fill_hora_inclu()
        super().save(*args, **kwargs)

    def _fill_hora_inclu(self):
        if not self.hora_inclu and self.dt_inclu:
            self.hora_inclu = timezone.localtime(self.dt_inclu).strftime('%H:%M')

    @classmethod
    def _catalog_fields(cls) -> list[str]:
        return [
            f.name for f in cls._meta.concrete_fields
            if not f.primary_key and f.name != 'quantity'
        ]

    @classmethod
    def _next_free_code(cls) -> int:
        """First code above any product created before the sequence existed."""
        highest = cls.objects.aggregate(m=Max('code'))['m']
        return (highest or 0) + 1

    # ══════════════════════════════════════════════════════════════
    # LEDGER
    # ══════════════════════════════════════════════════════════════

    def ledger_total(self) -> int:
        """Sum of IN minus sum of OUT over this product's movements."""
        totals = self.movements.aggregate(
            total_in=Sum('quantity', filter=Q(type=MovementType.IN), default=0),
            total_out=Sum('quantity', filter=Q(type=MovementType.OUT), default=0),
        )
        return totals['total_in'] - totals['total_out']

    def recalculate(self) -> int:
        """
        Recalculate quantity from Movements.

        Use for:
        - Integrity audit
        - Correction after detected inconsistency

        Returns:
            New calculated quantity
        """
        with transaction.atomic():
            locked = Product.objects.select_for_update().get(pk=self.pk)
            total = locked.ledger_total()

            if total != locked.quantity:
                old = locked.quantity
                Product.objects.filter(pk=self.pk).update(
                    quantity=total,
                    updated_at=timezone.now(),
                )
                logger.warning(
                    f"Product {self.code} recalculated: {old} → {total} "
                    f"(diff: {total - old})"
                )

        self.quantity = total
        return total

    def __str__(self) -> str:
        return f"#{self.code} {self.name}"
