'''
dataclases de instrucciones (una por variante de la ISA)
'''

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import ClassVar, Dict, Tuple, Type, Union, get_type_hints

from .imm import I5, U3, U4
from .regs import Reg

Operand = Union[Reg, I5, U3, U4]

@dataclass(frozen=True)
class Op:
    """Instrucción con operandos tipados; inmutable y comparable por valor."""
    MNEMONIC: ClassVar[str] = ""

    @classmethod
    def operand_types(cls) -> Tuple[type, ...]:
        """Tipos de los operandos, en orden de declaración."""
        hints = get_type_hints(cls)
        return tuple(hints[f.name] for f in fields(cls))

    def __post_init__(self):
        for f, expected in zip(fields(self), self.operand_types()):
            val = getattr(self, f.name)
            if type(val) is not expected:
                raise TypeError(f"{self.MNEMONIC}.{f.name} espera {expected.__name__}, "
                                f"no {type(val).__name__}")

    @property
    def mnemonic(self) -> str:
        return self.MNEMONIC

    def operands(self) -> Tuple[Operand, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def to_text(self) -> str:
        ops = self.operands()
        if not ops:
            return self.MNEMONIC
        return f"{self.MNEMONIC} " + ", ".join(str(o) for o in ops)

    def __str__(self) -> str:
        return self.to_text()

# ---- Flujo ----

@dataclass(frozen=True)
class BR(Op):
    """Salto relativo incondicional."""
    MNEMONIC: ClassVar[str] = "BR"
    offset: I5

@dataclass(frozen=True)
class BRZ(Op):
    """Salto relativo si cero."""
    MNEMONIC: ClassVar[str] = "BRZ"
    offset: I5

@dataclass(frozen=True)
class PAUSE(Op):
    MNEMONIC: ClassVar[str] = "PAUSE"

# ---- ALU ----

@dataclass(frozen=True)
class ADDI(Op):
    MNEMONIC: ClassVar[str] = "ADDI"
    reg: Reg
    imm: U3

@dataclass(frozen=True)
class SUBI(Op):
    MNEMONIC: ClassVar[str] = "SUBI"
    reg: Reg
    imm: U3

@dataclass(frozen=True)
class SR0(Op):
    MNEMONIC: ClassVar[str] = "SR0"
    imm: U4

@dataclass(frozen=True)
class SRH0(Op):
    MNEMONIC: ClassVar[str] = "SRH0"
    imm: U4

# ---- Memoria ----

@dataclass(frozen=True)
class CLR(Op):
    MNEMONIC: ClassVar[str] = "CLR"
    reg: Reg

@dataclass(frozen=True)
class MOV(Op):
    """Copia src en dst."""
    MNEMONIC: ClassVar[str] = "MOV"
    dst: Reg
    src: Reg

# ---- Motor ----

@dataclass(frozen=True)
class MOVA(Op):
    MNEMONIC: ClassVar[str] = "MOVA"
    reg: Reg

@dataclass(frozen=True)
class MOVR(Op):
    MNEMONIC: ClassVar[str] = "MOVR"
    reg: Reg

@dataclass(frozen=True)
class MOVRHS(Op):
    MNEMONIC: ClassVar[str] = "MOVRHS"
    reg: Reg

ALL_OPS: Tuple[Type[Op], ...] = (BR, BRZ, ADDI, SUBI, SR0, SRH0, CLR, MOV, MOVA, MOVR, MOVRHS, PAUSE)

BY_MNEMONIC: Dict[str, Type[Op]] = {cls.MNEMONIC: cls for cls in ALL_OPS}
