"""
Almoxarife Models.

Core models for the stock ledger:
- Product: Stock-keeping unit with cached quantity
- Movement: Immutable ledger of changes
- Unit / Sector: Destinations of outbound movements
- Supplier: Optional movement counterpart
- Sequence: Race-safe counters (product codes)
"""

from almoxarife.models.enums import MovementType, Period
from almoxarife.models.movement import Movement
from almoxarife.models.product import Product
from almoxarife.models.reference import Sector, Supplier, Unit
from almoxarife.models.sequence import Sequence

__all__ = [
    'MovementType',
    'Period',
    'Product',
    'Movement',
    'Unit',
    'Sector',
    'Supplier',
    'Sequence',
]
