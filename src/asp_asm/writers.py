from __future__ import annotations
from typing import List
from .utils import to_bin8
from .program import Program

def to_bin_lines(program: Program) -> List[str]:
    return [to_bin8(b) for b in program.as_binary()]

def write_text(program: Program, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(program.as_text())

def write_binary(program: Program, path: str) -> None:
    with open(path, "wb") as f:
        f.write(program.as_binary())

def write_mif(program: Program, path: str) -> None:
    # se genera antes de abrir para no dejar un archivo a medias si no cabe
    contents = program.as_mif()
    with open(path, "w", encoding="utf-8") as f:
        f.write(contents)
