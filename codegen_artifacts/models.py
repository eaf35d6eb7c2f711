"""Core data models shared across codegen-artifacts components."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class LibraryDescriptor:
    """A codegen library config paired with the package root that declared it."""

    config: Dict[str, Any] = field(default_factory=dict)
    library_path: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"config": dict(self.config), "libraryPath": self.library_path}
