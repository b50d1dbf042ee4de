"""
Django Almoxarife — Livro-razão de estoque.

Entradas e saídas atômicas com trilha de auditoria imutável.

Uso:
    from almoxarife import ledger, LedgerError

    entry = ledger.register_inbound_new_item(7, user, name='Toner HP 85A')
    ledger.register_inbound(3, entry.product, user)
    ledger.register_outbound(2, entry.product, user, unit=unidade, sector=setor)
    ledger.summarize('month')
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'ledger':
        from almoxarife.service import Ledger
        return Ledger
    elif name == 'LedgerEntry':
        from almoxarife.services.movements import LedgerEntry
        return LedgerEntry
    elif name in ('LedgerError', 'NotFound', 'InvalidArgument', 'FailedPrecondition'):
        from almoxarife import exceptions
        return getattr(exceptions, name)
    elif name == 'Product':
        from almoxarife.models.product import Product
        return Product
    elif name == 'Movement':
        from almoxarife.models.movement import Movement
        return Movement
    elif name in ('Unit', 'Sector', 'Supplier'):
        from almoxarife.models import reference
        return getattr(reference, name)
    elif name in ('MovementType', 'Period'):
        from almoxarife.models import enums
        return getattr(enums, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'ledger',
    'LedgerEntry',
    'LedgerError',
    'NotFound',
    'InvalidArgument',
    'FailedPrecondition',
    'Product',
    'Movement',
    'Unit',
    'Sector',
    'Supplier',
    'MovementType',
    'Period',
]

__version__ = '0.1.0'
