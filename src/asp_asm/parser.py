# src/asp_asm/parser.py
from __future__ import annotations
import io
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Type, Union

from .lexer import strip_comment, split_mnemonic_operands, split_operands
from .ast import Op, BY_MNEMONIC
from .imm import Imm
from .regs import Reg, RegisterError, RegErrorKind
from .isa import SPEC, ISpec
from .program import Program
from .diagnostics import AsmError, Diagnostic, ErrorKind, from_exc

DEC_IMM_RE = re.compile(r"^[+-]?[0-9]+$")

Tokens = Iterator[str]

def _get_imm(tokens: Tokens, kind: Type[Imm]) -> Imm:
    tok = next(tokens, None)
    if tok is None:
        raise AsmError(ErrorKind.MISSING_IMMEDIATE)
    t = tok[1:] if tok.startswith("#") else tok
    # Dos pasos: primero el entero sin acotar, luego el rango del tipo destino
    if not DEC_IMM_RE.match(t):
        raise AsmError(ErrorKind.INVALID_IMMEDIATE, t)
    val = int(t)
    imm = kind.new(val)
    if imm is None:
        raise AsmError(ErrorKind.IMMEDIATE_OUT_OF_RANGE, val)
    return imm

def _get_reg(tokens: Tokens) -> Reg:
    tok = next(tokens, None)
    if tok is None:
        raise AsmError(ErrorKind.MISSING_REGISTER)
    try:
        return Reg.from_text(tok)
    except RegisterError:
        raise AsmError(ErrorKind.INVALID_REGISTER, tok) from None

def _build(sp: ISpec, tokens: Tokens) -> Op:
    """Consume los operandos según la forma de la tabla, de izquierda a derecha."""
    cls = BY_MNEMONIC[sp.mnemonic]
    # tipos de inmediato (I5/U3/U4) en el orden en que aparecen en la instrucción
    imm_kinds = iter(t for t in cls.operand_types() if issubclass(t, Imm))
    args = []
    for slot in sp.form.split(","):
        if slot == "reg":
            args.append(_get_reg(tokens))
        elif slot == "imm":
            args.append(_get_imm(tokens, next(imm_kinds)))
    return cls(*args)

def parse_line(line: str) -> Optional[Op]:
    """Parsea una línea de ensamblador.

    Devuelve None para líneas vacías o solo con comentario; lanza AsmError si la
    línea no es una instrucción válida.
    """
    core = strip_comment(line)
    if not core:
        return None

    mnemonic, op_str = split_mnemonic_operands(core)
    sp = SPEC.get(mnemonic)
    if sp is None:
        raise AsmError(ErrorKind.INVALID_MNEMONIC, mnemonic)

    tokens = iter(split_operands(op_str))
    op = _build(sp, tokens)

    extra = next(tokens, None)
    if extra is not None:
        raise AsmError(ErrorKind.EXTRA_TOKEN, extra)
    return op

def _hint(exc: AsmError) -> Optional[str]:
    if exc.kind is ErrorKind.INVALID_MNEMONIC and isinstance(exc.value, str):
        if exc.value.upper() in SPEC:
            return f"los mnemónicos distinguen mayúsculas: {exc.value.upper()}"
    if exc.kind is ErrorKind.INVALID_REGISTER and isinstance(exc.value, str):
        try:
            Reg.from_text(exc.value)
        except RegisterError as reg_exc:
            if reg_exc.kind is RegErrorKind.MISSING_PREFIX and exc.value.lower() != exc.value:
                return "los registros se escriben en minúsculas (r0..r3)"
            if "," not in exc.value and exc.value.count("r") > 1:
                return "separe los operandos con ',' o espacios"
    return None

@dataclass(frozen=True)
class ParseResult:
    program: Optional[Program]
    diagnostics: List[Diagnostic]

def _lines(source: Union[str, Iterable[str]]) -> Iterable[str]:
    if isinstance(source, str):
        # mismos cortes de línea que un archivo abierto en modo texto (\n, \r\n, \r)
        return io.StringIO(source, newline=None)
    return source

def parse(source: Union[str, Iterable[str]], *, filename: Optional[str] = None) -> ParseResult:
    """
    Parsea un programa completo: texto entero o cualquier iterable de líneas
    (p.ej. un archivo abierto en modo texto).

    Reglas:
      - Comentarios: ';' hasta fin de línea.
      - Líneas vacías o solo comentario: se ignoran sin error.
      - Errores: se recogen todos, con su número de línea (base 1).
      - Program se construye solo si no hubo ningún error.
    """
    ops: List[Op] = []
    diags: List[Diagnostic] = []

    for lineno, raw in enumerate(_lines(source), start=1):
        try:
            op = parse_line(raw.rstrip("\r\n"))
        except AsmError as exc:
            diags.append(from_exc(exc, line=lineno, file=filename, hint=_hint(exc)))
            continue
        if op is not None:
            ops.append(op)

    if any(d.severity == "error" for d in diags):
        return ParseResult(program=None, diagnostics=diags)
    return ParseResult(program=Program.of(ops), diagnostics=diags)
