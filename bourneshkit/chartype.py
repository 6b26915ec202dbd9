"""Character classes used by the shell's lexer and substitution code."""

from __future__ import annotations

# table 1 bits
T_SUB = 0o1
T_MET = 0o2
T_SPC = 0o4
T_DIP = 0o10
T_EOF = 0o20
T_EOR = 0o40
T_QOT = 0o100
T_ESC = 0o200

# table 2 bits
T_BRC = 0o1
T_DEF = 0o2
T_AST = 0o4
T_DIG = 0o10
T_SHN = 0o40
T_IDC = 0o100
T_SET = 0o200

_IDCH = T_IDC | T_DIG
_META = T_SPC | T_DIP | T_MET | T_EOR

_TABLE1: dict[int, int] = {
    0: T_EOF,
    ord("\t"): T_SPC,
    ord("\n"): T_EOR,
    ord(" "): T_SPC,
    ord('"'): T_QOT | T_ESC,
    ord("$"): T_SUB | T_ESC,
    ord("&"): T_DIP,
    ord("("): T_MET,
    ord(")"): T_MET,
    ord(";"): T_DIP,
    ord("<"): T_DIP,
    ord(">"): T_DIP,
    ord("\\"): T_ESC,
    ord("^"): T_MET,
    ord("`"): T_QOT | T_ESC,
    ord("|"): T_DIP,
}

_TABLE2: dict[int, int] = {
    ord("!"): T_SHN,
    ord("#"): T_SHN,
    ord("$"): T_SHN,
    ord("*"): T_AST,
    ord("+"): T_DEF | T_SET,
    ord("-"): T_DEF | T_SHN,
    ord("="): T_DEF,
    ord("?"): T_DEF | T_SHN,
    ord("@"): T_AST,
    ord("_"): T_IDC,
    ord("{"): T_BRC,
    ord("}"): T_DEF,
}
_TABLE2.update({ord(d): T_DIG for d in "0123456789"})
_TABLE2.update({ord(u): T_IDC for u in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"})
_TABLE2.update({ord(lc): T_IDC for lc in "abcdefghijklmnopqrstuvwxyz"})

_QUOTE = 0o200


def _code(c: str | int) -> int:
    if isinstance(c, int):
        return c
    return ord(c) if c else 0


def _t1(c: str | int, mask: int) -> bool:
    code = _code(c)
    return code < _QUOTE and bool(_TABLE1.get(code, 0) & mask)


def _t2(c: str | int, mask: int) -> bool:
    code = _code(c)
    return code < _QUOTE and bool(_TABLE2.get(code, 0) & mask)


def is_space(c: str | int) -> bool:
    """Blank or tab."""
    return _t1(c, T_SPC)


def is_eofmeta(c: str | int) -> bool:
    """A character that ends a word: metacharacter, newline or end of input."""
    return _t1(c, _META | T_EOF)


def is_qotchar(c: str | int) -> bool:
    """A double quote or back quote."""
    return _t1(c, T_QOT)


def is_eolchar(c: str | int) -> bool:
    """Newline or end of input."""
    return _t1(c, T_EOR | T_EOF)


def is_dipchar(c: str | int) -> bool:
    """A character that may be doubled to form an operator."""
    return _t1(c, T_DIP)


def is_subchar(c: str | int) -> bool:
    """A character that starts a substitution or quote."""
    return _t1(c, T_SUB | T_QOT)


def is_escchar(c: str | int) -> bool:
    """A character that a backslash escapes inside double quotes."""
    return _t1(c, T_ESC)


def is_digit(c: str | int) -> bool:
    """An ASCII decimal digit."""
    return _t2(c, T_DIG)


def is_dolchar(c: str | int) -> bool:
    """A character that may follow ``$``."""
    return _t2(c, T_AST | T_BRC | T_DIG | T_IDC | T_SHN)


def is_defchar(c: str | int) -> bool:
    """A parameter substitution operator or closing brace."""
    return _t2(c, T_DEF)


def is_setchar(c: str | int) -> bool:
    """The ``+`` operator."""
    return _t2(c, T_SET)


def is_digchar(c: str | int) -> bool:
    """A digit, ``*`` or ``@``."""
    return _t2(c, T_AST | T_DIG)


def is_letter(c: str | int) -> bool:
    """A letter or underscore that may start a name."""
    return _t2(c, T_IDC)


def is_alphanum(c: str | int) -> bool:
    """A character that may continue a name."""
    return _t2(c, _IDCH)


def is_astchar(c: str | int) -> bool:
    """``*`` or ``@``."""
    return _t2(c, T_AST)