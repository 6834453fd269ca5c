# src/asp_asm/encoding.py
from __future__ import annotations
from typing import Callable, Dict, Type

from .ast import Op, BR, BRZ, ADDI, SUBI, SR0, SRH0, CLR, MOV, MOVA, MOVR, MOVRHS, PAUSE
from .imm import Imm, I5, U3, U4
from .regs import Reg
from .isa import spec as isa_spec, lookup
from .utils import u8, split_bits
from .diagnostics import InvalidOpcode

# ---------------- Helpers de empaquetado de bits ----------------

def _pack_none(prefix: int) -> int:
    return u8(prefix)

def _pack_imm(prefix: int, imm: Imm) -> int:
    # iiiii / iiii en los bits bajos
    return u8(prefix | imm.field())

def _pack_reg(prefix: int, reg: Reg) -> int:
    return u8(prefix | (reg.code & 0x3))

def _pack_reg_imm(prefix: int, reg: Reg, imm: Imm) -> int:
    # iii en [4:2], dd en [1:0]
    return u8(prefix | (imm.field() << 2) | (reg.code & 0x3))

def _pack_reg_reg(prefix: int, dst: Reg, src: Reg) -> int:
    # dd en [3:2], ss en [1:0]
    return u8(prefix | ((dst.code & 0x3) << 2) | (src.code & 0x3))

# ---------------- Codificador ----------------

def _p(mnemonic: str) -> int:
    return isa_spec(mnemonic).prefix

_ENCODERS: Dict[Type[Op], Callable[..., int]] = {
    BR:     lambda op: _pack_imm(_p("BR"), op.offset),
    BRZ:    lambda op: _pack_imm(_p("BRZ"), op.offset),
    ADDI:   lambda op: _pack_reg_imm(_p("ADDI"), op.reg, op.imm),
    SUBI:   lambda op: _pack_reg_imm(_p("SUBI"), op.reg, op.imm),
    SR0:    lambda op: _pack_imm(_p("SR0"), op.imm),
    SRH0:   lambda op: _pack_imm(_p("SRH0"), op.imm),
    CLR:    lambda op: _pack_reg(_p("CLR"), op.reg),
    MOV:    lambda op: _pack_reg_reg(_p("MOV"), op.dst, op.src),
    MOVA:   lambda op: _pack_reg(_p("MOVA"), op.reg),
    MOVR:   lambda op: _pack_reg(_p("MOVR"), op.reg),
    MOVRHS: lambda op: _pack_reg(_p("MOVRHS"), op.reg),
    PAUSE:  lambda op: _pack_none(_p("PAUSE")),
}

def encode(op: Op) -> int:
    """Devuelve el opcode de 8 bits de una instrucción."""
    try:
        enc = _ENCODERS[type(op)]
    except KeyError:
        raise TypeError(f"Instrucción sin codificador: {type(op).__name__}") from None
    return enc(op)

# ---------------- Decodificador ----------------

def _reg_lo(opcode: int) -> Reg:
    # el campo de 2 bits siempre es un código válido
    return Reg.from_code(opcode & 0x3)

_DECODERS: Dict[str, Callable[[int], Op]] = {
    "BR":     lambda b: BR(I5.from_field(b)),
    "BRZ":    lambda b: BRZ(I5.from_field(b)),
    "ADDI":   lambda b: ADDI(*_reg_imm3(b)),
    "SUBI":   lambda b: SUBI(*_reg_imm3(b)),
    "SR0":    lambda b: SR0(U4.from_field(b)),
    "SRH0":   lambda b: SRH0(U4.from_field(b)),
    "CLR":    lambda b: CLR(_reg_lo(b)),
    "MOV":    lambda b: MOV(*_reg_pair(b)),
    "MOVA":   lambda b: MOVA(_reg_lo(b)),
    "MOVR":   lambda b: MOVR(_reg_lo(b)),
    "MOVRHS": lambda b: MOVRHS(_reg_lo(b)),
    "PAUSE":  lambda b: PAUSE(),
}

def _reg_imm3(opcode: int):
    imm, reg = split_bits(opcode, ((4, 2), (1, 0)))
    return Reg.from_code(reg), U3.from_field(imm)

def _reg_pair(opcode: int):
    dst, src = split_bits(opcode, ((3, 2), (1, 0)))
    return Reg.from_code(dst), Reg.from_code(src)

def decode(opcode: int) -> Op:
    """Decodifica un byte; lanza InvalidOpcode si no corresponde a ninguna instrucción."""
    if isinstance(opcode, bool) or not isinstance(opcode, int) or not 0 <= opcode <= 0xFF:
        raise ValueError(f"opcode debe ser un byte (0..255): {opcode!r}")
    sp = lookup(opcode)
    if sp is None:
        raise InvalidOpcode(opcode)
    return _DECODERS[sp.mnemonic](opcode)
