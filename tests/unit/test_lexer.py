import pytest
from src.asp_asm.lexer import (
    strip_comment, split_mnemonic_operands, split_operands
)

# --- strip_comment ---
@pytest.mark.parametrize("src, expected", [
    ("PAUSE", "PAUSE"),
    ("BR ; remove comment", "BR"),
    ("  ADDI; trim", "ADDI"),
    ("  ; empty", ""),
    ("   CLR r0   ", "CLR r0"),
    ("", ""),
])
def test_strip_comment(src, expected):
    assert strip_comment(src) == expected

# --- split_mnemonic_operands ---
@pytest.mark.parametrize("src, mn, tail", [
    ("ADDI r3, 7", "ADDI", "r3, 7"),
    ("addi r3, 7", "addi", "r3, 7"),
    ("MOV\tr1,r2", "MOV", "r1,r2"),
    ("PAUSE", "PAUSE", ""),
    ("   ", "", ""),
])
def test_split_mnemonic_operands(src, mn, tail):
    got_mn, got_tail = split_mnemonic_operands(src)
    assert got_mn == mn
    assert got_tail == tail

# --- split_operands ---
@pytest.mark.parametrize("src, expected", [
    ("r1,r2", ["r1","r2"]),
    ("r3,    r2", ["r3","r2"]),
    (" r0 , #3 ", ["r0","#3"]),
    ("r0 3", ["r0","3"]),
    ("r0,,3", ["r0","3"]),
    ("r3r2", ["r3r2"]),
    ("", []),
])
def test_split_operands(src, expected):
    assert split_operands(src) == expected
