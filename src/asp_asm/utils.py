'''
 bit-twiddling de 8 bits (u8, sign_extend, rangos n-bit, campos)
'''

from __future__ import annotations
from typing import Tuple

# Máscara para 8 bits sin signo
U8_MASK = 0xFF

def u8(x: int) -> int:
    """Fuerza el valor al rango de 8 bits sin signo."""
    return x & U8_MASK

def sign_extend(x: int, bits: int) -> int:
    """Extiende el signo de x, asumiendo que cabe en 'bits' bits (complemento a dos)."""
    if bits <= 0:
        raise ValueError("bits debe ser positivo")
    mask = (1 << bits) - 1
    x &= mask
    sign_bit = 1 << (bits - 1)
    return (x ^ sign_bit) - sign_bit

def unsigned_range(n: int) -> Tuple[int, int]:
    """Rango [min, max] de un entero sin signo de n bits."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0, (1 << n) - 1

def signed_range(n: int) -> Tuple[int, int]:
    """Rango [min, max] de un entero con signo de n bits (complemento a dos)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return -(1 << (n - 1)), (1 << (n - 1)) - 1

def to_bin8(x: int) -> str:
    """Representación binaria de 8 bits (cadena)."""
    return format(u8(x), "08b")

def split_bits(value: int, positions: Tuple[Tuple[int, int], ...]) -> tuple[int, ...]:
    """Extrae campos de bits dados como rangos (hi, lo) inclusivos (base 0)."""
    out = []
    for hi, lo in positions:
        if hi < lo or hi < 0 or lo < 0:
            raise ValueError("rango de bits inválido")
        width = hi - lo + 1
        field = (value >> lo) & ((1 << width) - 1)
        out.append(field)
    return tuple(out)
