"""
Ledger reports — time-bucketed IN/OUT totals.

Read-only. Buckets are computed by the database (Trunc + GROUP BY);
buckets without movements are not synthesized.
"""

import calendar
from datetime import date, datetime, time, timedelta

from django.db.models import Q, Sum
from django.db.models.functions import Trunc
from django.utils import timezone

from almoxarife.models.enums import MovementType, Period
from almoxarife.models.movement import Movement
from almoxarife.services.queries import as_datetime


def _shift_months(value: date, months: int) -> date:
    """Move a date by whole months, clamping the day to the target month."""
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


class LedgerReports:
    """Aggregated ledger reports."""

    @classmethod
    def parse_period(cls, value) -> Period:
        """
        Period from user input.

        Unknown or missing values fall back to DAY instead of failing.
        """
        try:
            return Period(str(value).lower())
        except ValueError:
            return Period.DAY

    @classmethod
    def default_start(cls, period, end: datetime) -> datetime:
        """
        Start of the default window ending at ``end``, at local midnight.

        day → 29 days back (30 buckets), week → 77 days back (11 weeks),
        month → 11 months back (12 months), year → 4 years back (5 years).
        """
        period = cls.parse_period(period)
        local_end = timezone.localtime(end) if timezone.is_aware(end) else end
        day = local_end.date()

        if period == Period.WEEK:
            start = day - timedelta(days=7 * 11)
        elif period == Period.MONTH:
            start = _shift_months(day, -11)
        elif period == Period.YEAR:
            start = _shift_months(day, -12 * 4)
        else:
            start = day - timedelta(days=29)

        return timezone.make_aware(datetime.combine(start, time.min))

    @classmethod
    def summarize(cls, period='day', date_from: date | datetime | None = None,
                  date_to: date | datetime | None = None) -> list[dict]:
        """
        IN/OUT totals per period bucket.

        Args:
            period: 'day', 'week', 'month' or 'year' (anything else = 'day')
            date_from: Window start (None = default_start(period, date_to))
            date_to: Window end (None = now; a date covers the whole day)

        Returns:
            [{'bucket': datetime, 'in_qty': int, 'out_qty': int}, ...]
            ascending by bucket
        """
        period = cls.parse_period(period)
        end = as_datetime(date_to, end_of_day=True) or timezone.now()
        start = as_datetime(date_from) or cls.default_start(period, end)

        rows = (
            Movement.objects
            .between(start, end)
            .annotate(bucket=Trunc('created_at', period.value))
            .values('bucket')
            .annotate(
                in_qty=Sum('quantity', filter=Q(type=MovementType.IN), default=0),
                out_qty=Sum('quantity', filter=Q(type=MovementType.OUT), default=0),
            )
            .order_by('bucket')
        )

        return [
            {
                'bucket': row['bucket'],
                'in_qty': int(row['in_qty']),
                'out_qty': int(row['out_qty']),
            }
            for row in rows
        ]
