"""
Reference models — Units, sectors and suppliers.

Read-only from the ledger's point of view: outbound movements are
validated against Unit/Sector, and may point at a Supplier.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Unit(models.Model):
    """Organizational unit that receives outbound stock."""

    name = models.CharField(
        max_length=120,
        unique=True,
        verbose_name=_('Nome'),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Unidade')
        verbose_name_plural = _('Unidades')
        ordering = ['name']

    def __str__(self) -> str:
        return self.name


class Sector(models.Model):
    """Sector inside exactly one Unit."""

    unit = models.ForeignKey(
        Unit,
        on_delete=models.PROTECT,
        related_name='sectors',
        verbose_name=_('Unidade'),
    )
    name = models.CharField(
        max_length=120,
        verbose_name=_('Nome'),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Setor')
        verbose_name_plural = _('Setores')
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(
                fields=['unit', 'name'],
                name='unique_sector_per_unit',
            )
        ]

    def __str__(self) -> str:
        return f"{self.unit} / {self.name}"


class Supplier(models.Model):
    """Supplier optionally referenced by movements."""

    name = models.CharField(max_length=255, verbose_name=_('Nome'))
    contact = models.CharField(max_length=255, blank=True, default='', verbose_name=_('Contato'))
    email = models.EmailField(blank=True, default='', verbose_name=_('E-mail'))
    phone = models.CharField(max_length=40, blank=True, default='', verbose_name=_('Telefone'))
    address = models.CharField(max_length=255, blank=True, default='', verbose_name=_('Endereço'))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Fornecedor')
        verbose_name_plural = _('Fornecedores')
        ordering = ['name']

    def __str__(self) -> str:
        return self.name
