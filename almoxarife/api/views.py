"""
REST endpoints for the ledger: entries, exits, movement listing and summary.
"""

import logging

from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from almoxarife.api.serializers import (
    InboundNewItemSerializer,
    InboundSerializer,
    LedgerEntrySerializer,
    MovementListSerializer,
    OutboundSerializer,
    SummaryBucketSerializer,
)
from almoxarife.exceptions import LedgerError
from almoxarife.service import Ledger

logger = logging.getLogger('almoxarife')


def _query_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _query_date(value):
    """ISO date or datetime from a query string; anything unparseable is ignored."""
    if not value:
        return None
    try:
        return parse_date(value) or parse_datetime(value)
    except ValueError:
        return None


class LedgerAPIView(APIView):
    """Base view: authenticated callers, LedgerError rendered as JSON."""

    permission_classes = [IsAuthenticated]

    def handle_exception(self, exc):
        if isinstance(exc, LedgerError):
            logger.info(
                "ledger.rejected",
                extra={"code": exc.code, "path": self.request.path},
            )
            return Response(exc.as_dict(), status=exc.http_status)
        return super().handle_exception(exc)


class EntryView(LedgerAPIView):
    """POST: inbound movement for an existing product"""

    def post(self, request):
        serializer = InboundSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        entry = Ledger.register_inbound(data['quantity'], data['product_id'], request.user)
        return Response(LedgerEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


class EntryNewItemView(LedgerAPIView):
    """POST: create a product together with its first inbound movement"""

    def post(self, request):
        serializer = InboundNewItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        quantity = data.pop('quantity')
        optional = {k: (v or None) for k, v in data.items() if k != 'name'}
        entry = Ledger.register_inbound_new_item(quantity, request.user, data['name'], **optional)
        return Response(LedgerEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


class ExitView(LedgerAPIView):
    """POST: outbound movement to a unit/sector"""

    def post(self, request):
        serializer = OutboundSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        entry = Ledger.register_outbound(
            data['quantity'],
            data['product_id'],
            request.user,
            unit=data.get('unit_id'),
            sector=data.get('sector_id'),
            nchagpc=data.get('nchagpc'),
            supplier=data.get('supplier_id'),
        )
        return Response(LedgerEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


class MovementListView(LedgerAPIView):
    """GET: latest movements (limit, type, from, to)"""

    def get(self, request):
        params = request.query_params
        movements = Ledger.list_movements(
            limit=_query_int(params.get('limit')),
            type=params.get('type') or None,
            date_from=_query_date(params.get('from')),
            date_to=_query_date(params.get('to')),
        )
        return Response(MovementListSerializer(movements, many=True).data)


class SummaryView(LedgerAPIView):
    """GET: IN/OUT totals per bucket (period, from, to)"""

    def get(self, request):
        params = request.query_params
        buckets = Ledger.summarize(
            params.get('period', 'day'),
            date_from=_query_date(params.get('from')),
            date_to=_query_date(params.get('to')),
        )
        return Response(SummaryBucketSerializer(buckets, many=True).data)
