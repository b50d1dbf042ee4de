"""
Enums for Almoxarife models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class MovementType(models.TextChoices):
    """Direction of a movement."""
    IN = 'IN', _('Entrada')
    OUT = 'OUT', _('Saída')


class Period(models.TextChoices):
    """
    Bucket granularity for summary reports.

    Values match the ``kind`` argument of Django's ``Trunc``.
    """
    DAY = 'day', _('Dia')
    WEEK = 'week', _('Semana')
    MONTH = 'month', _('Mês')
    YEAR = 'year', _('Ano')
