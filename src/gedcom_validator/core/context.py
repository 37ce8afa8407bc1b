from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationContext:
    """
    Shared pipeline context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    output_path: Optional[str] = None
    rules: Optional[List[str]] = None
    append: bool = False

    stats: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
