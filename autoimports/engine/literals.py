"""Literal masker: blank out comments, strings and static template text.

The scanner keeps an explicit mode stack so that template interpolations
(``${ ... }``) are scanned as code, including templates nested inside them.
Masking is length preserving: every masked character becomes a space, newlines
survive, and delimiters stay in place. Masking an already masked text is
therefore a no-op.

Regex literals are not recognised; ``/ref/`` reads as two divisions.
"""

from __future__ import annotations

from enum import Enum


class _Mode(str, Enum):
    CODE = "code"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"
    TEMPLATE = "template"
    TEMPLATE_EXPR = "template_expr"


_QUOTES = {"'": _Mode.SINGLE_QUOTE, '"': _Mode.DOUBLE_QUOTE, "`": _Mode.TEMPLATE}
_CLOSERS = {_Mode.SINGLE_QUOTE: "'", _Mode.DOUBLE_QUOTE: '"'}


def _blank(out: list[str], i: int) -> None:
    if out[i] != "\n":
        out[i] = " "


def _blank_escape(out: list[str], i: int) -> None:
    # Backslash-newline continuations are left as is
    if out[i + 1] != "\n":
        out[i] = " "
        out[i + 1] = " "


def strip_literals(code: str) -> str:
    """Return ``code`` with comment, string and static template content blanked."""
    if not code:
        return code

    out = list(code)
    n = len(code)
    stack: list[_Mode] = [_Mode.CODE]
    # One brace depth per open ``${`` so the matching ``}`` can be found
    depths: list[int] = []
    i = 0

    while i < n:
        mode = stack[-1]
        ch = code[i]
        nxt = code[i + 1] if i + 1 < n else ""

        if mode in (_Mode.CODE, _Mode.TEMPLATE_EXPR):
            if ch == "/" and nxt == "/":
                stack.append(_Mode.LINE_COMMENT)
                i += 2
                continue
            if ch == "/" and nxt == "*":
                stack.append(_Mode.BLOCK_COMMENT)
                i += 2
                continue
            if ch in _QUOTES:
                stack.append(_QUOTES[ch])
            elif mode is _Mode.TEMPLATE_EXPR:
                if ch == "{":
                    depths[-1] += 1
                elif ch == "}":
                    if depths[-1] == 0:
                        stack.pop()
                        depths.pop()
                    else:
                        depths[-1] -= 1
            i += 1
            continue

        if mode is _Mode.LINE_COMMENT:
            if ch == "\n":
                stack.pop()
            else:
                out[i] = " "
            i += 1
            continue

        if mode is _Mode.BLOCK_COMMENT:
            if ch == "*" and nxt == "/":
                stack.pop()
                i += 2
                continue
            _blank(out, i)
            i += 1
            continue

        if mode in _CLOSERS:
            if ch == "\\" and nxt:
                _blank_escape(out, i)
                i += 2
                continue
            if ch == _CLOSERS[mode] or ch == "\n":
                # Unterminated strings end at the line break
                stack.pop()
            else:
                out[i] = " "
            i += 1
            continue

        # Template literal body
        if ch == "\\" and nxt:
            _blank_escape(out, i)
            i += 2
        elif ch == "`":
            stack.pop()
            i += 1
        elif ch == "$" and nxt == "{":
            stack.append(_Mode.TEMPLATE_EXPR)
            depths.append(0)
            i += 2
        else:
            _blank(out, i)
            i += 1

    return "".join(out)
