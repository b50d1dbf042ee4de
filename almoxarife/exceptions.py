"""
Exceptions for Almoxarife.

All ledger errors are LedgerError subclasses with a structured code for
programmatic handling. The subclass says which kind of failure it is:

- NotFound: referenced product, unit, sector or supplier does not exist
- InvalidArgument: bad input (quantity out of range, unit/sector missing)
- FailedPrecondition: state does not allow the operation (insufficient stock)
"""

from typing import Any


class BaseError(Exception):
    """
    Exception with a code, a human-readable message and context data.

    Subclasses provide ``_default_messages`` keyed by code.
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.data!r})"


class LedgerError(BaseError):
    """
    Structured exception for ledger operations.

    Usage:
        try:
            ledger.register_outbound(3, produto, user, unit=1, sector=2)
        except FailedPrecondition as e:
            print(f"Só tem {e.available} em estoque")
        except LedgerError as e:
            print(e.code, e.message)

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
        http_status: Status code used by the REST layer
    """

    http_status = 400

    _default_messages = {
        'PRODUCT_NOT_FOUND': 'Produto não encontrado',
        'UNIT_NOT_FOUND': 'Unidade não encontrada',
        'SECTOR_NOT_FOUND': 'Setor não encontrado para essa unidade',
        'SUPPLIER_NOT_FOUND': 'Fornecedor não encontrado',
        'INVALID_QUANTITY': 'Quantidade inválida (deve ser um inteiro positivo)',
        'QUANTITY_EXCEEDS_MAXIMUM': 'Quantidade excede o máximo permitido por saída',
        'UNIT_SECTOR_REQUIRED': 'Unidade e setor são obrigatórios na saída',
        'NAME_REQUIRED': 'Nome é obrigatório',
        'USER_REQUIRED': 'Usuário responsável é obrigatório',
        'INVALID_MOVEMENT_TYPE': 'Tipo de movimento inválido',
        'INSUFFICIENT_STOCK': 'Estoque insuficiente',
    }

    @property
    def available(self) -> int:
        """Shortcut for data['available']."""
        return self.data.get('available', 0)

    @property
    def requested(self) -> Any:
        """Shortcut for data['requested']."""
        return self.data.get('requested')

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {
                k: v if isinstance(v, (int, float, bool, type(None))) else str(v)
                for k, v in self.data.items()
            },
        }


class NotFound(LedgerError):
    """Referenced entity does not exist."""

    http_status = 404


class InvalidArgument(LedgerError):
    """Input rejected before touching any state."""

    http_status = 400


class FailedPrecondition(LedgerError):
    """Current state does not allow the operation."""

    http_status = 409
