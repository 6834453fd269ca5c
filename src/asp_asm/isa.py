'''
tabla formal de la ISA (prefijos, máscaras, formas de operandos)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

@dataclass(frozen=True)
class ISpec:
    """Especificación de una instrucción.

    - prefix: bits fijos del opcode (los campos de operandos a cero)
    - mask: bits que forman el prefijo; opcode & mask == prefix identifica la instrucción
    - form: forma de operandos en orden: 'none', 'reg', 'imm', 'reg,imm', 'reg,reg'
    """
    mnemonic: str
    prefix: int
    mask: int
    form: str

    def matches(self, opcode: int) -> bool:
        return opcode & self.mask == self.prefix

# Orden de decodificación; las máscaras son disjuntas, así que el orden no altera el resultado
SPEC: Dict[str, ISpec] = {}

def _add(mnemonic: str, prefix: int, mask: int, form: str):
    SPEC[mnemonic] = ISpec(mnemonic, prefix, mask, form)

# Flujo
_add("BR",     0b100_00000, 0b111_00000, "imm")   # 100iiiii
_add("BRZ",    0b101_00000, 0b111_00000, "imm")   # 101iiiii
# ALU
_add("ADDI",   0b000_000_00, 0b111_000_00, "reg,imm")  # 000iiidd
_add("SUBI",   0b001_000_00, 0b111_000_00, "reg,imm")  # 001iiidd
_add("SR0",    0b0100_0000, 0b1111_0000, "imm")    # 0100iiii
_add("SRH0",   0b0101_0000, 0b1111_0000, "imm")    # 0101iiii
# Memoria
_add("CLR",    0b011000_00, 0b111111_00, "reg")    # 011000dd
_add("MOV",    0b0111_00_00, 0b1111_00_00, "reg,reg")  # 0111ddss
# Motor
_add("MOVA",   0b110000_00, 0b111111_00, "reg")  # 110000dd
_add("MOVR",   0b110001_00, 0b111111_00, "reg")  # 110001dd
_add("MOVRHS", 0b110010_00, 0b111111_00, "reg")  # 110010dd
# Sin operandos
_add("PAUSE",  0b1111_1111, 0b1111_1111, "none")   # 11111111

MNEMONICS: Tuple[str, ...] = tuple(SPEC)

def spec(mnemonic: str) -> ISpec:
    """Devuelve la especificación de una instrucción por mnemónico (sensible a mayúsculas)."""
    if mnemonic not in SPEC:
        raise KeyError(f"Instrucción desconocida: {mnemonic}")
    return SPEC[mnemonic]

def lookup(opcode: int) -> Optional[ISpec]:
    """Primera entrada de la tabla cuyo prefijo coincide con el opcode, o None."""
    for sp in SPEC.values():
        if sp.matches(opcode):
            return sp
    return None

def check_partition() -> List[Tuple[int, List[str]]]:
    """Devuelve los opcodes 0..255 reclamados por más de una instrucción (vacío si no hay solapes)."""
    overlaps = []
    for opcode in range(256):
        owners = [sp.mnemonic for sp in SPEC.values() if sp.matches(opcode)]
        if len(owners) > 1:
            overlaps.append((opcode, owners))
    return overlaps
