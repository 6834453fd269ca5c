'''
inmediatos acotados (ancho en bits + signo), validados al construirse
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional, Type, TypeVar

from .utils import sign_extend, signed_range, unsigned_range

T = TypeVar("T", bound="Imm")

@dataclass(frozen=True)
class Imm:
    """Inmediato de `BITS` bits, con o sin signo.

    La construcción es el único punto de validación: una instancia nunca existe
    fuera de [MIN, MAX] y, al ser frozen, no puede modificarse después.
    """
    value: int

    BITS: ClassVar[int] = 0
    SIGNED: ClassVar[bool] = False
    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.BITS:
            rng = signed_range if cls.SIGNED else unsigned_range
            cls.MIN, cls.MAX = rng(cls.BITS)

    def __post_init__(self):
        name = type(self).__name__
        if not self.BITS:
            raise TypeError("Imm es abstracto; use I5, U3 o U4")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{name} espera un entero, no {type(self.value).__name__}")
        if not self.MIN <= self.value <= self.MAX:
            raise ValueError(f"{self.value} fuera de rango para {name} ({self.MIN}..{self.MAX})")

    @classmethod
    def new(cls: Type[T], value: int) -> Optional[T]:
        """Devuelve el inmediato o None si `value` está fuera de rango."""
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def from_field(cls: Type[T], field: int) -> T:
        """Reconstruye el inmediato a partir de un campo crudo de BITS bits.

        Con signo se extiende el bit más alto del campo; sin signo se rellena con ceros.
        """
        field &= (1 << cls.BITS) - 1
        value = sign_extend(field, cls.BITS) if cls.SIGNED else field
        return cls(value)

    def get(self) -> int:
        return self.value

    def field(self) -> int:
        """Valor empaquetado en BITS bits (complemento a dos si tiene signo)."""
        return self.value & ((1 << self.BITS) - 1)

    def __str__(self) -> str:
        return str(self.value)

@dataclass(frozen=True)
class I5(Imm):
    """Desplazamiento de salto: 5 bits con signo (-16..15)."""
    BITS: ClassVar[int] = 5
    SIGNED: ClassVar[bool] = True

@dataclass(frozen=True)
class U3(Imm):
    """Operando de ADDI/SUBI: 3 bits sin signo (0..7)."""
    BITS: ClassVar[int] = 3

@dataclass(frozen=True)
class U4(Imm):
    """Operando de SR0/SRH0: 4 bits sin signo (0..15)."""
    BITS: ClassVar[int] = 4
