'''
registros r0..r3: códigos de 2 bits, texto canónico, validaciones
'''

from __future__ import annotations
from enum import Enum, IntEnum

class RegErrorKind(Enum):
    MISSING_PREFIX = "missing-prefix"
    INVALID_NUMBER = "invalid-number"
    OUT_OF_RANGE = "out-of-range"

class RegisterError(ValueError):
    """Registro inválido; `kind` indica el motivo."""

    def __init__(self, kind: RegErrorKind, token: object):
        self.kind = kind
        self.token = token
        super().__init__(f"Registro inválido ({kind.value}): {token}")

class Reg(IntEnum):
    """Uno de los cuatro registros; el valor entero es su código de 2 bits."""
    R0 = 0
    R1 = 1
    R2 = 2
    R3 = 3

    @classmethod
    def from_code(cls, code: int) -> "Reg":
        """Devuelve el registro para un código 0..3 o lanza RegisterError."""
        try:
            return cls(code)
        except ValueError:
            raise RegisterError(RegErrorKind.OUT_OF_RANGE, code) from None

    @classmethod
    def from_text(cls, token: str) -> "Reg":
        """Acepta 'r' seguido de un número decimal 0..3; sin normalizar mayúsculas."""
        if not token.startswith("r"):
            raise RegisterError(RegErrorKind.MISSING_PREFIX, token)
        digits = token[1:]
        if not digits.isascii() or not digits.isdigit():
            raise RegisterError(RegErrorKind.INVALID_NUMBER, token)
        n = int(digits)
        if n > 3:
            raise RegisterError(RegErrorKind.OUT_OF_RANGE, token)
        return cls(n)

    @property
    def code(self) -> int:
        return int(self)

    def to_text(self) -> str:
        return f"r{int(self)}"

    def __str__(self) -> str:
        return self.to_text()

    def __format__(self, spec: str) -> str:
        return format(self.to_text(), spec)
