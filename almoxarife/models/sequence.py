"""
Sequence model — Named monotonic counters.
"""

from django.db import models, transaction
from django.db.models import F
from django.utils.translation import gettext_lazy as _


class Sequence(models.Model):
    """
    Monotonic counter stored in a single row.

    ``next_value()`` increments with an ``F()`` update, so the row stays
    locked until the surrounding transaction ends and concurrent callers
    never see the same value.
    """

    name = models.CharField(
        max_length=50,
        primary_key=True,
        verbose_name=_('Nome'),
    )
    last_value = models.PositiveBigIntegerField(
        default=0,
        verbose_name=_('Último valor'),
    )

    class Meta:
        verbose_name = _('Sequência')
        verbose_name_plural = _('Sequências')

    @classmethod
    def next_value(cls, name: str, seed=None) -> int:
        """
        Return the next value of the named sequence.

        Args:
            name: Sequence name
            seed: Callable returning the first value when the row is missing

        Returns:
            The new value
        """
        with transaction.atomic():
            while True:
                updated = cls.objects.filter(name=name).update(
                    last_value=F('last_value') + 1
                )
                if updated:
                    return cls.objects.values_list('last_value', flat=True).get(name=name)

                first = seed() if seed else 1
                _, created = cls.objects.get_or_create(
                    name=name,
                    defaults={'last_value': first},
                )
                if created:
                    return first

    def __str__(self) -> str:
        return f"{self.name}: {self.last_value}"
