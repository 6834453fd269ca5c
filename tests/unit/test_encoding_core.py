import pytest
from src.asp_asm.encoding import encode, decode, _ENCODERS, _DECODERS
from src.asp_asm.ast import (
    Op, ALL_OPS, BR, BRZ, ADDI, SUBI, SR0, SRH0, CLR, MOV, MOVA, MOVR, MOVRHS, PAUSE,
)
from src.asp_asm.imm import I5, U3, U4
from src.asp_asm.regs import Reg
from src.asp_asm.isa import SPEC
from src.asp_asm.diagnostics import InvalidOpcode, ErrorKind

R0, R1, R2, R3 = Reg.R0, Reg.R1, Reg.R2, Reg.R3

KNOWN = [
    # Flujo
    (BR(I5(-16)), 0b100_10000),
    (BR(I5(15)), 0b100_01111),
    (BR(I5(-5)), 0b100_11011),
    (BR(I5(3)), 0b100_00011),
    (BRZ(I5(14)), 0b101_01110),
    (PAUSE(), 0b11111111),
    # ALU
    (ADDI(R0, U3(0)), 0b000_000_00),
    (ADDI(R1, U3(2)), 0b000_010_01),
    (ADDI(R2, U3(5)), 0b000_101_10),
    (ADDI(R3, U3(7)), 0b000_111_11),
    (SUBI(R0, U3(1)), 0b001_001_00),
    (SUBI(R1, U3(3)), 0b001_011_01),
    (SUBI(R2, U3(4)), 0b001_100_10),
    (SUBI(R3, U3(6)), 0b001_110_11),
    (SR0(U4(0)), 0b0100_0000),
    (SR0(U4(10)), 0b0100_1010),
    (SR0(U4(15)), 0b0100_1111),
    (SRH0(U4(1)), 0b0101_0001),
    (SRH0(U4(14)), 0b0101_1110),
    # Memoria
    (CLR(R0), 0b011000_00),
    (CLR(R3), 0b011000_11),
    (MOV(R1, R2), 0b0111_01_10),
    (MOV(R0, R2), 0b0111_00_10),
    (MOV(R3, R1), 0b0111_11_01),
    # Motor
    (MOVA(R0), 0b110000_00),
    (MOVA(R3), 0b110000_11),
    (MOVR(R1), 0b110001_01),
    (MOVR(R2), 0b110001_10),
    (MOVRHS(R0), 0b110010_00),
    (MOVRHS(R3), 0b110010_11),
]

@pytest.mark.parametrize("op, code", KNOWN)
def test_known_encodings(op, code):
    assert encode(op) == code, f"Falló \"{op}\" a binario"
    assert decode(code) == op, f"Falló {code:08b} a ensamblador"

def test_every_byte_decodes_uniquely_or_is_invalid():
    valid = 0
    for b in range(256):
        try:
            op = decode(b)
        except InvalidOpcode as exc:
            assert exc.kind is ErrorKind.INVALID_OPCODE and exc.opcode == b
            continue
        assert encode(op) == b
        valid += 1
    assert valid == 193

def test_pause_and_its_neighbour():
    assert decode(0b11111111) == PAUSE()
    assert encode(decode(0b11111111)) == 0b11111111
    with pytest.raises(InvalidOpcode) as ei:
        decode(0b11111110)
    assert "11111110" in str(ei.value)

def test_branch_offset_is_sign_extended():
    assert decode(0b100_10000).offset.get() == -16
    assert decode(0b101_11111).offset.get() == -1
    assert decode(0b101_00001).offset.get() == 1

def test_every_variant_has_encoder_and_decoder():
    assert set(ALL_OPS) == set(Op.__subclasses__())
    assert set(_ENCODERS) == set(ALL_OPS)
    assert set(_DECODERS) == set(SPEC)

def test_rejects_non_bytes_and_unknown_ops():
    with pytest.raises(ValueError):
        decode(256)
    with pytest.raises(ValueError):
        decode(-1)
    with pytest.raises(TypeError):
        encode(object())

def test_operand_types_are_checked():
    with pytest.raises(TypeError):
        ADDI(R0, U4(3))
    with pytest.raises(TypeError):
        BR(3)
