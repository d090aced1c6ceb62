from __future__ import annotations

import sys


def type_name(t: type) -> str:
    return f"{t.__module__}.{t.__qualname__}"


def caller_name(depth: int = 0) -> str:
    """Name the code ``depth`` frames above the caller of this function.

    Methods are named after their class (through ``self`` or ``cls``),
    everything else after its module.
    """
    frame = sys._getframe(depth + 2)
    try:
        code = frame.f_code
        receiver = code.co_varnames[: min(code.co_argcount, 1)]
        owner = frame.f_locals.get(receiver[0]) if receiver in (("self",), ("cls",)) else None
        if owner is not None:
            cls = owner if isinstance(owner, type) else type(owner)
            return type_name(cls)
        return str(frame.f_globals.get("__name__", "__main__"))
    finally:
        del frame
