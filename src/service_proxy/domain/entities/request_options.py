from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class RequestOptions:
    api_key: str
    query: Optional[Dict[str, str]] = None
    # bytes, str, Mapping[str, str], dataclass instance or a Body variant
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
