from __future__ import annotations
import argparse, logging, sys
from typing import Callable, Dict, Optional, Tuple

from .parser import parse, ParseResult
from .binary import read_binary, DecodeResult
from .program import Program
from .diagnostics import ProgramTooLong, error, from_exc
from .writers import write_text, write_binary, write_mif, to_bin_lines

logger = logging.getLogger(__name__)

# formato -> (extensión por defecto, escritor)
FORMATS: Dict[str, Tuple[str, Callable[[Program, str], None]]] = {
    "asm": ("s", write_text),
    "hex": ("hex", write_binary),
    "mif": ("mif", write_mif),
}

def assemble_text(text: str, *, filename: str | None = None) -> ParseResult:
    """Ensambla un texto completo. Devuelve ParseResult(program, diagnostics)."""
    return parse(text, filename=filename)

def disassemble_bytes(data: bytes, *, filename: str | None = None) -> DecodeResult:
    """Decodifica código máquina crudo. Devuelve DecodeResult(program, diagnostics)."""
    return read_binary(data, filename=filename)

def _load(path: str, is_binary: bool) -> Tuple[Optional[Program], list]:
    if is_binary:
        with open(path, "rb") as f:
            res = read_binary(f, filename=path)
    else:
        with open(path, "r", encoding="utf-8") as f:
            res = parse(f, filename=path)
    return res.program, res.diagnostics

def _dump(program: Program) -> None:
    logger.debug("---- Assembly ----")
    logger.debug(program.as_text())
    logger.debug("---- Machine Code ----")
    for line in to_bin_lines(program):
        logger.debug(line)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="asp-asm", description="Ensamblador/desensamblador ASP de 8 bits")
    ap.add_argument("source", help="archivo de entrada (.s, o binario con --hex)")
    ap.add_argument("-f", "--fmt", choices=list(FORMATS), default="mif",
                    help="formato de salida (por defecto: mif)")
    ap.add_argument("-o", "--output", help="archivo de salida, por defecto out.<ext>")
    ap.add_argument("-H", "--hex", action="store_true",
                    help="la entrada es código máquina crudo (un byte por instrucción)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="muestra el listado de ensamblador y de código máquina")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logger.setLevel(logging.DEBUG if args.verbose else logging.INFO)

    try:
        program, diags = _load(args.source, args.hex)
    except (OSError, UnicodeDecodeError) as ex:
        print(error(f"no pude leer {args.source}: {ex}"), file=sys.stderr)
        return 2

    for d in diags:
        print(d, file=sys.stderr)
    if program is None:
        print("Saliendo por errores.", file=sys.stderr)
        return 1

    if args.verbose:
        _dump(program)

    ext, writer = FORMATS[args.fmt]
    out = args.output or f"out.{ext}"
    try:
        writer(program, out)
    except ProgramTooLong as ex:
        print(from_exc(ex, file=args.source, hint=f"máximo {ex.depth} instrucciones"), file=sys.stderr)
        return 1
    except OSError as ex:
        print(f"ERROR al escribir {out}: {ex}", file=sys.stderr)
        return 3

    print(f"OK: {len(program)} instrucciones → {out}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
