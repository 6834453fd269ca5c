import pytest
from src.asp_asm.regs import Reg, RegisterError, RegErrorKind

def test_text_and_codes():
    assert Reg.from_text("r2") is Reg.R2
    assert Reg.from_code(3) is Reg.R3
    assert Reg.R1.code == 1
    assert str(Reg.R3) == "r3"
    assert f"{Reg.R0}" == "r0"

@pytest.mark.parametrize("token, kind", [
    ("x1", RegErrorKind.MISSING_PREFIX),
    ("R1", RegErrorKind.MISSING_PREFIX),
    ("1", RegErrorKind.MISSING_PREFIX),
    ("r", RegErrorKind.INVALID_NUMBER),
    ("rx", RegErrorKind.INVALID_NUMBER),
    ("r-1", RegErrorKind.INVALID_NUMBER),
    ("r3r2", RegErrorKind.INVALID_NUMBER),
    ("r4", RegErrorKind.OUT_OF_RANGE),
    ("r255", RegErrorKind.OUT_OF_RANGE),
])
def test_invalid(token, kind):
    with pytest.raises(RegisterError) as ei:
        Reg.from_text(token)
    assert ei.value.kind is kind

def test_from_code_out_of_range():
    with pytest.raises(RegisterError) as ei:
        Reg.from_code(4)
    assert ei.value.kind is RegErrorKind.OUT_OF_RANGE
