"""
Almoxarife Admin.

- Unit (with sectors inline), Supplier: editable reference data
- Product: descriptive fields editable; code, quantity and inclusion read-only
- Movement: read-only audit trail
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from almoxarife.models import Movement, Product, Sector, Supplier, Unit


# =========================================================================
# REFERENCE DATA
# =========================================================================

class SectorInline(admin.TabularInline):
    model = Sector
    extra = 0
    fields = ['name']


@admin.register(Unit)
class UnitAdmin(admin.ModelAdmin):
    """Unit admin: editable, sectors inline."""

    list_display = ['name', 'sector_count', 'updated_at']
    search_fields = ['name', 'sectors__name']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [SectorInline]

    @admin.display(description=_('Setores'))
    def sector_count(self, obj):
        return obj.sectors.count()


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ['name', 'contact', 'email', 'phone']
    search_fields = ['name', 'contact', 'email']
    readonly_fields = ['created_at', 'updated_at']


# =========================================================================
# PRODUCT ADMIN
# =========================================================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Product admin: quantity only changes via the ledger."""

    list_display = ['code', 'name', 'manufacturer', 'model', 'quantity', 'unit', 'sector']
    list_filter = ['unit', 'sector']
    search_fields = ['code', 'name', 'manufacturer', 'model', 'nfe', 'nchagpc']
    readonly_fields = ['code', 'quantity', 'dt_inclu', 'hora_inclu',
                       'sector', 'unit', 'updated_at']
    ordering = ['code']

    def has_add_permission(self, request):
        # New items enter through ledger.register_inbound_new_item()
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# MOVEMENT ADMIN (read-only audit trail)
# =========================================================================

@admin.register(Movement)
class MovementAdmin(admin.ModelAdmin):
    """Movement admin: read-only audit trail."""

    list_display = ['created_at', 'product', 'type', 'quantity', 'supplier', 'user']
    list_filter = ['type', 'created_at']
    search_fields = ['product__name', 'product__code']
    readonly_fields = ['product', 'user', 'type', 'quantity', 'supplier', 'created_at']
    list_select_related = ['product', 'user', 'supplier']
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
