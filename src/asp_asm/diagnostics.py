'''
clase Diagnostic, tipos de error y excepciones del núcleo
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Literal, Union

# Severidad de los diagnósticos; el núcleo solo produce errores
Severity = Literal["error"]

class ErrorKind(Enum):
    """Clases de error que el ensamblador/desensamblador puede reportar."""
    MISSING_IMMEDIATE = "missing-immediate"
    INVALID_IMMEDIATE = "invalid-immediate"
    IMMEDIATE_OUT_OF_RANGE = "immediate-out-of-range"
    MISSING_REGISTER = "missing-register"
    INVALID_REGISTER = "invalid-register"
    INVALID_MNEMONIC = "unrecognized-mnemonic"
    EXTRA_TOKEN = "unexpected-extra-token"
    INVALID_OPCODE = "invalid-opcode"
    CAPACITY_EXCEEDED = "capacity-exceeded"

def _describe(kind: ErrorKind, value: Union[int, str, None]) -> str:
    if kind is ErrorKind.MISSING_IMMEDIATE:
        return "Falta un inmediato"
    if kind is ErrorKind.INVALID_IMMEDIATE:
        return f"Inmediato inválido: '{value}'"
    if kind is ErrorKind.IMMEDIATE_OUT_OF_RANGE:
        return f"Inmediato {value} fuera de rango"
    if kind is ErrorKind.MISSING_REGISTER:
        return "Falta un registro"
    if kind is ErrorKind.INVALID_REGISTER:
        return f"Registro inválido: '{value}'"
    if kind is ErrorKind.INVALID_MNEMONIC:
        return f"Mnemónico inválido: '{value}'"
    if kind is ErrorKind.EXTRA_TOKEN:
        return f"Token inesperado: '{value}'"
    if kind is ErrorKind.INVALID_OPCODE:
        return f"Opcode inválido {value:08b}" if isinstance(value, int) else "Opcode inválido"
    if kind is ErrorKind.CAPACITY_EXCEEDED:
        return f"Programa demasiado largo ({value} instrucciones)"
    raise AssertionError(kind)

class AsmError(ValueError):
    """Error estructurado: una clase de error y el valor que lo provocó."""

    def __init__(self, kind: ErrorKind, value: Union[int, str, None] = None):
        self.kind = kind
        self.value = value
        super().__init__(_describe(kind, value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AsmError):
            return NotImplemented
        return (self.kind, self.value) == (other.kind, other.value)

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

class InvalidOpcode(AsmError):
    """Byte que no corresponde a ninguna instrucción."""

    def __init__(self, opcode: int):
        super().__init__(ErrorKind.INVALID_OPCODE, opcode)
        self.opcode = opcode

class ProgramTooLong(AsmError):
    """El programa no cabe en la memoria de destino."""

    def __init__(self, length: int, depth: int):
        super().__init__(ErrorKind.CAPACITY_EXCEEDED, length)
        self.depth = depth

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Incluye ubicación opcional (archivo y línea, o desplazamiento en bytes para
    entradas binarias) y un mensaje de ayuda (pista) para orientar la corrección.
    `kind` y `value` conservan el error estructurado.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None
    offset: Optional[int] = None
    kind: Optional[ErrorKind] = None
    value: Union[int, str, None] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
        elif self.offset is not None:
            loc += f"0x{self.offset:04x}"
        if loc:
            loc += ": "
        core = f"{self.severity.upper()}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None,
          file: str | None = None, hint: str | None = None,
          offset: int | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, hint, file, offset)

def from_exc(exc: AsmError, *, line: int | None = None, file: str | None = None,
             offset: int | None = None, hint: str | None = None) -> Diagnostic:
    """Convierte un AsmError en un diagnóstico de error conservando su clase."""
    return Diagnostic("error", str(exc), line, hint, file, offset, exc.kind, exc.value)
