"""Preprocessor context model."""

from dataclasses import dataclass, field
from typing import Any, Dict

from ..exceptions import ProtocolError

CONTEXT_FIELDS = ("root", "config", "renderer", "mdbook_version")


@dataclass
class PreprocessorContext:
    """Information mdbook passes alongside the book."""
    root: str
    config: Dict[str, Any]
    renderer: str
    mdbook_version: str
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PreprocessorContext":
        if not isinstance(data, dict):
            raise ProtocolError(f"Expected a context object, got {type(data).__name__}")
        missing = [name for name in ("renderer", "mdbook_version") if name not in data]
        if missing:
            raise ProtocolError(f"Context is missing fields: {', '.join(missing)}")
        for name in ("renderer", "mdbook_version"):
            if not isinstance(data[name], str):
                raise ProtocolError(f"Context field '{name}' must be a string, got {data[name]!r}")
        config = data.get("config", {})
        if not isinstance(config, dict):
            raise ProtocolError(f"Context config must be an object, got {type(config).__name__}")
        return cls(
            root=data.get("root", ""),
            config=config,
            renderer=data["renderer"],
            mdbook_version=data["mdbook_version"],
            extra={k: v for k, v in data.items() if k not in CONTEXT_FIELDS}
        )

    def preprocessor_config(self, name: str) -> Dict[str, Any]:
        """Return the [preprocessor.<name>] table from book.toml, or {}."""
        table = self.config.get("preprocessor") or {}
        if not isinstance(table, dict):
            raise ProtocolError("The 'preprocessor' config must be a table")
        options = table.get(name) or {}
        if not isinstance(options, dict):
            raise ProtocolError(f"The 'preprocessor.{name}' config must be a table")
        return options
