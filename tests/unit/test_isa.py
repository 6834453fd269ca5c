import pytest
from src.asp_asm.isa import spec, lookup, check_partition, MNEMONICS, SPEC
from src.asp_asm.ast import BY_MNEMONIC

def test_core_instructions_present():
    assert spec("BR").prefix == 0x80
    assert spec("BRZ").prefix == 0xA0
    assert spec("ADDI").prefix == 0x00
    assert spec("SUBI").prefix == 0x20
    assert spec("SR0").prefix == 0x40
    assert spec("SRH0").prefix == 0x50
    assert spec("CLR").prefix == 0x60
    assert spec("MOV").prefix == 0x70
    assert spec("MOVA").prefix == 0xC0
    assert spec("MOVR").prefix == 0xC4
    assert spec("MOVRHS").prefix == 0xC8
    assert spec("PAUSE").prefix == 0xFF and spec("PAUSE").mask == 0xFF

def test_mnemonics_are_case_sensitive():
    with pytest.raises(KeyError):
        spec("addi")

def test_opcode_space_has_no_overlaps():
    assert check_partition() == []

def test_valid_opcode_count():
    # 4*32 (BR, BRZ, ADDI, SUBI) + 2*16 (SR0, SRH0) + 16 (MOV) + 4*4 (CLR, motor) + 1 (PAUSE)
    valid = [b for b in range(256) if lookup(b) is not None]
    assert len(valid) == 193
    assert lookup(0xFE) is None
    assert lookup(0x64) is None
    assert lookup(0xFF).mnemonic == "PAUSE"

def test_table_matches_instruction_classes():
    assert set(MNEMONICS) == set(BY_MNEMONIC)
    assert len(MNEMONICS) == 12

def test_form_matches_operand_types():
    from src.asp_asm.imm import Imm
    from src.asp_asm.regs import Reg
    for sp in SPEC.values():
        kinds = ["reg" if t is Reg else "imm" for t in BY_MNEMONIC[sp.mnemonic].operand_types()
                 if t is Reg or issubclass(t, Imm)]
        assert (",".join(kinds) or "none") == sp.form, sp.mnemonic
