from typing import Any, Dict, Optional

from pydantic import BaseModel

from src.commonUtils.enumUtils import ErrorKind


class OperationResult(BaseModel):
    """Explicit outcome of a provider call or of a whole contact submission.

    Failures are returned, not raised, so callers branch on ``ok``.
    """
    ok: bool
    message: str = ""
    error_kind: Optional[ErrorKind] = None
    error_detail: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def success(cls, message: str = "", data: Optional[Dict[str, Any]] = None) -> "OperationResult":
        return cls(ok=True, message=message, data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, detail: Optional[str] = None) -> "OperationResult":
        return cls(ok=False, message=message, error_kind=kind, error_detail=detail)
