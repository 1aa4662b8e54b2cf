"""Recover the source text of a condition from its call site.

Python cannot stringify an argument expression the way a macro can, so the
text is recovered after the fact: the calling frame's current instruction
carries the column span of the call, the module source comes from
``linecache``, and ``ast`` picks the first argument back out of it.
"""

from __future__ import annotations

import ast
import inspect
import linecache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dis import Positions
    from types import FrameType

__all__ = ['call_site', 'describe_condition']


def call_site(frame: FrameType) -> tuple[str, int]:
    """Return the file name and line number a frame is executing."""
    return frame.f_code.co_filename, frame.f_lineno


def describe_condition(frame: FrameType, function: str) -> str | None:
    """Return the literal source text of the condition passed at ``frame``'s call.

    Args:
        frame: The frame that called ``always``/``never``.
        function: Name the call must go through, e.g. ``'never'``. Guards
            against frames that invoked the assertion indirectly, such as
            ``map(always, conditions)``; an aliased import also falls back.

    Returns:
        The condition's source text, or None when the source is unavailable
        (REPL, ``python -c``, bytecode only) or the call shape cannot be
        recovered (e.g. ``always(*args)``, or a call of another function).
    """
    positions = inspect.getframeinfo(frame, context=0).positions
    if positions is None or None in positions:
        return None

    lines = linecache.getlines(frame.f_code.co_filename, frame.f_globals)
    if len(lines) < positions.end_lineno:
        return None

    try:
        segment = _slice_source(lines, positions)
        tree = ast.parse(segment, mode='eval')
    except (SyntaxError, ValueError):
        return None

    call = tree.body
    if not isinstance(call, ast.Call) or not call.args or _called_name(call) != function:
        return None
    condition = call.args[0]
    if isinstance(condition, ast.Starred):
        return None
    return ast.get_source_segment(segment, condition)


def _slice_source(lines: list[str], positions: Positions) -> str:
    # Column offsets are UTF-8 byte offsets, not character offsets.
    chunk = [line.encode() for line in lines[positions.lineno - 1 : positions.end_lineno]]
    if len(chunk) == 1:
        return chunk[0][positions.col_offset : positions.end_col_offset].decode()
    chunk[0] = chunk[0][positions.col_offset :]
    chunk[-1] = chunk[-1][: positions.end_col_offset]
    return b''.join(chunk).decode()


def _called_name(call: ast.Call) -> str | None:
    if isinstance(call.func, ast.Name):
        return call.func.id
    if isinstance(call.func, ast.Attribute):
        return call.func.attr
    return None
