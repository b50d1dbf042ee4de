from rest_framework import serializers

from almoxarife.conf import ledger_settings
from almoxarife.models import Movement, Product


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for Product model"""

    class Meta:
        model = Product
        fields = [
            'id',
            'code',
            'name',
            'manufacturer',
            'model',
            'nfe',
            'dt_nfe',
            'dt_inclu',
            'hora_inclu',
            'nchagpc',
            'sector',
            'unit',
            'quantity',
            'updated_at',
        ]
        read_only_fields = fields


class MovementSerializer(serializers.ModelSerializer):
    """Serializer for Movement model"""

    class Meta:
        model = Movement
        fields = ['id', 'product', 'user', 'type', 'quantity', 'supplier', 'created_at']
        read_only_fields = fields


class LedgerEntrySerializer(serializers.Serializer):
    """Product + movement pair returned by register operations"""

    product = ProductSerializer(read_only=True)
    movement = MovementSerializer(read_only=True)


class ProductSnapshotSerializer(serializers.ModelSerializer):
    """Product display fields embedded in movement listings"""

    class Meta:
        model = Product
        fields = [
            'code',
            'name',
            'manufacturer',
            'model',
            'nfe',
            'dt_nfe',
            'dt_inclu',
            'hora_inclu',
            'nchagpc',
            'sector',
            'unit',
        ]
        read_only_fields = fields


class MovementListSerializer(serializers.ModelSerializer):
    """Movement joined with product snapshot and acting user"""

    product = ProductSnapshotSerializer(read_only=True)
    user = serializers.SerializerMethodField()

    class Meta:
        model = Movement
        fields = ['id', 'type', 'quantity', 'supplier', 'created_at', 'product', 'user']
        read_only_fields = fields

    def get_user(self, obj):
        user = obj.user
        matricula_field = ledger_settings.USER_MATRICULA_FIELD
        return {
            'name': user.get_full_name() or user.get_username(),
            'email': getattr(user, 'email', None) or None,
            'matricula': getattr(user, matricula_field, None) if matricula_field else None,
        }


class SummaryBucketSerializer(serializers.Serializer):
    bucket = serializers.DateTimeField()
    in_qty = serializers.IntegerField()
    out_qty = serializers.IntegerField()


# ====================================
# INPUT
# ====================================

class InboundSerializer(serializers.Serializer):
    """Entry for an existing product"""

    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField()


class InboundNewItemSerializer(serializers.Serializer):
    """Entry that creates the product"""

    name = serializers.CharField(max_length=255)
    quantity = serializers.IntegerField()
    manufacturer = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    model = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    nfe = serializers.CharField(max_length=60, required=False, allow_null=True, allow_blank=True)
    dt_nfe = serializers.DateField(required=False, allow_null=True)
    nchagpc = serializers.CharField(max_length=120, required=False, allow_null=True, allow_blank=True)
    sector = serializers.CharField(max_length=120, required=False, allow_null=True, allow_blank=True)
    unit = serializers.CharField(max_length=120, required=False, allow_null=True, allow_blank=True)


class OutboundSerializer(serializers.Serializer):
    """Exit to a unit/sector. Range and presence rules live in the ledger."""

    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField()
    unit_id = serializers.IntegerField(required=False, allow_null=True)
    sector_id = serializers.IntegerField(required=False, allow_null=True)
    nchagpc = serializers.CharField(max_length=120, required=False, allow_null=True, allow_blank=True)
    supplier_id = serializers.IntegerField(required=False, allow_null=True)
