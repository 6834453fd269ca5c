from __future__ import annotations
import re

COMMENT_CHAR = ";"
OPERAND_SPLIT_RE = re.compile(r"[,\s]+")

def strip_comment(line: str) -> str:
    """Remove a ';' comment and surrounding whitespace."""
    cut = line.find(COMMENT_CHAR)
    if cut != -1:
        line = line[:cut]
    return line.strip()

def split_mnemonic_operands(line: str):
    """Return (mnemonic, rest). Case is preserved: mnemonics are case-sensitive."""
    s = line.strip()
    if not s:
        return "", ""
    parts = s.split(None, 1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()

def split_operands(op_str: str):
    """Split on commas and/or whitespace, dropping empty fragments."""
    if not op_str:
        return []
    return [t for t in OPERAND_SPLIT_RE.split(op_str) if t]
