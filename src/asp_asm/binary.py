'''
lectura de código máquina crudo (un byte por instrucción, sin cabecera)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import BinaryIO, List, Optional, Union

from .ast import Op
from .encoding import decode
from .program import Program
from .diagnostics import Diagnostic, InvalidOpcode, from_exc

@dataclass(frozen=True)
class DecodeResult:
    program: Optional[Program]
    diagnostics: List[Diagnostic]

def read_binary(source: Union[bytes, bytearray, BinaryIO], *, filename: Optional[str] = None) -> DecodeResult:
    """Decodifica todos los bytes; cada opcode inválido genera un diagnóstico con su desplazamiento.

    Si hay algún error no se construye Program.
    """
    data = source if isinstance(source, (bytes, bytearray)) else source.read()
    ops: List[Op] = []
    diags: List[Diagnostic] = []
    for offset, byte in enumerate(data):
        try:
            ops.append(decode(byte))
        except InvalidOpcode as exc:
            diags.append(from_exc(exc, offset=offset, file=filename))
    if diags:
        return DecodeResult(program=None, diagnostics=diags)
    return DecodeResult(program=Program.of(ops), diagnostics=diags)
