from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass
class VmError(Exception):
    """
    Structured error raised by the ownable runtime and the access layer.

    Supported call patterns:

        VmError("simple message")

        VmError("message", code="some_code", context={...})

        # 2-positional form, mirrors receipt/revert payloads:
        VmError("SOME_CODE", "message")

    Attributes:
        code: short machine-readable code string
        message: human-readable message
        context: optional extra fields for debugging / host wiring
    """

    code: str
    message: str
    context: Dict[str, Any]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        code: str = kwargs.pop("code", None) or getattr(type(self), "default_code", "vm_error")
        context: Dict[str, Any] = {}

        if "context" in kwargs:
            ctx = kwargs.pop("context")
            if ctx is not None:
                if not isinstance(ctx, Mapping):
                    raise TypeError(f"context must be a mapping, got {type(ctx).__name__}")
                context = dict(ctx)

        if kwargs:
            raise TypeError(f"unexpected keyword arguments: {sorted(kwargs)}")

        if len(args) == 0:
            message = ""
        elif len(args) == 1:
            message = str(args[0])
        else:
            code = str(args[0])
            message = str(args[1])

        super().__init__(message)

        object.__setattr__(self, "code", str(code))
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "context", context)

    # the generated __eq__ would otherwise leave instances unhashable
    __hash__ = Exception.__hash__

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }


__all__ = ["VmError"]
