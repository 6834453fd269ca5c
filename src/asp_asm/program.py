'''
Program: secuencia ordenada de instrucciones y sus tres serializaciones
(texto, binario crudo y MIF)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .ast import Op
from .encoding import encode
from .diagnostics import ProgramTooLong

# Geometría de la memoria de destino del formato MIF
MIF_WIDTH = 8
MIF_DEPTH = 256

@dataclass(frozen=True)
class Program:
    """Instrucciones en orden de ejecución. Inmutable una vez creado."""
    ops: Tuple[Op, ...] = ()

    @classmethod
    def of(cls, ops: Iterable[Op]) -> "Program":
        return cls(tuple(ops))

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[Op]:
        return iter(self.ops)

    def __getitem__(self, idx: int) -> Op:
        return self.ops[idx]

    def as_text(self) -> str:
        """Ensamblador canónico, una instrucción por línea (re-parseable)."""
        return "\n".join(op.to_text() for op in self.ops)

    def as_binary(self) -> bytes:
        """Un byte por instrucción, sin cabecera."""
        return bytes(encode(op) for op in self.ops)

    def as_mif(self) -> str:
        """Memory Initialization File de MIF_DEPTH palabras de MIF_WIDTH bits.

        Las direcciones no usadas se rellenan con 0. Lanza ProgramTooLong si el
        programa no cabe.
        """
        n = len(self.ops)
        if n > MIF_DEPTH:
            raise ProgramTooLong(n, MIF_DEPTH)

        lines = [
            f"WIDTH={MIF_WIDTH};",
            f"DEPTH={MIF_DEPTH};",
            "",
            "ADDRESS_RADIX=UNS;",
            "DATA_RADIX=BIN;",
            "",
            "CONTENT BEGIN",
        ]
        for addr, word in enumerate(self.as_binary()):
            lines.append(f"\t{addr}\t:\t{word:0{MIF_WIDTH}b};")

        last = MIF_DEPTH - 1
        if n == last:
            lines.append(f"\t{last}\t:\t{0:0{MIF_WIDTH}b};")
        elif n < last:
            lines.append(f"\t[{n}..{last}]\t:\t{0:0{MIF_WIDTH}b};")
        lines.append("END;")
        return "\n".join(lines) + "\n"
