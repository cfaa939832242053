from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class ShapeReportDTO(BaseModel):
    source: Optional[str] = None
    limit: int
    trimmed: Any = None
    json_schema: Dict[str, Any] = {}
    errors: List[str] = []
    exit_code: int = 0
