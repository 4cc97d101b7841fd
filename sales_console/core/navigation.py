from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class RouteSnapshot:
    """Route parameters of the current navigation, as raw path strings."""
    path: str = ""
    params: Dict[str, str] = field(default_factory=dict)

    def param(self, name: str) -> str:
        # Missing parameters read as an empty string, never as None
        return self.params.get(name, "")
