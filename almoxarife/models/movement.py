"""
Movement model — Immutable ledger of quantity changes.
"""

from django.conf import settings
from django.db import models, transaction
from django.db.models import F, Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from almoxarife.models.enums import MovementType


class MovementQuerySet(models.QuerySet):
    """Helper filters for Movement queries."""

    def inbound(self):
        return self.filter(type=MovementType.IN)

    def outbound(self):
        return self.filter(type=MovementType.OUT)

    def for_product(self, product):
        """Filter movements for a specific product."""
        return self.filter(product=product)

    def between(self, start=None, end=None):
        """Filter by created_at, both ends inclusive and optional."""
        qs = self
        if start is not None:
            qs = qs.filter(created_at__gte=start)
        if end is not None:
            qs = qs.filter(created_at__lte=end)
        return qs


class Movement(models.Model):
    """
    Immutable record of one quantity change.

    Rules:
    - NEVER update() or delete()
    - Corrections are new Movements in the opposite direction
    - Updates Product.quantity atomically on save()

    This is the ONLY model that changes quantity.
    """

    product = models.ForeignKey(
        'almoxarife.Product',
        on_delete=models.PROTECT,
        related_name='movements',
        verbose_name=_('Produto'),
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='almoxarife_movements',
        verbose_name=_('Usuário'),
    )
    type = models.CharField(
        max_length=3,
        choices=MovementType.choices,
        verbose_name=_('Tipo'),
    )
    quantity = models.PositiveIntegerField(verbose_name=_('Quantidade'))
    supplier = models.ForeignKey(
        'almoxarife.Supplier',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='movements',
        verbose_name=_('Fornecedor'),
    )
    created_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        editable=False,
        verbose_name=_('Data/Hora'),
    )

    objects = MovementQuerySet.as_manager()

    class Meta:
        verbose_name = _('Movimentação')
        verbose_name_plural = _('Movimentações')
        ordering = ['-created_at', '-id']
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gt=0),
                name='movement_quantity_positive',
            )
        ]
        indexes = [
            models.Index(fields=['product', 'created_at'], name='movement_product_created_idx'),
            models.Index(fields=['type', 'created_at'], name='movement_type_created_idx'),
        ]

    @property
    def delta(self) -> int:
        """Signed quantity: positive for IN, negative for OUT."""
        return self.quantity if self.type == MovementType.IN else -self.quantity

    def save(self, *args, **kwargs):
        """Save movement and update product quantity atomically."""
        # Immutability check
        if self.pk:
            raise ValueError(
                "Movimentações são imutáveis. "
                "Para corrigir, registre uma nova movimentação no sentido oposto."
            )

        # Validations
        if self.type not in MovementType.values:
            raise ValueError(f"Tipo de movimentação inválido: {self.type!r}")
        if not self.quantity or self.quantity <= 0:
            raise ValueError("Quantidade deve ser positiva")

        with transaction.atomic():
            super().save(*args, **kwargs)

            from almoxarife.models.product import Product

            # F() keeps the read-modify-write inside the database
            Product.objects.filter(pk=self.product_id).update(
                quantity=F('quantity') + self.delta,
                updated_at=timezone.now(),
            )

    def delete(self, *args, **kwargs):
        """Prevent deletion. Movements are immutable."""
        raise ValueError(
            "Movimentações são imutáveis. "
            "Para estornar, registre uma nova movimentação no sentido oposto."
        )

    def __str__(self) -> str:
        signal = '+' if self.type == MovementType.IN else '-'
        return f"{signal}{self.quantity} | #{self.product.code}"
