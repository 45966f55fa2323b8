from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from multispinbox.model.sections.base import Section

_REGISTRY: dict[str, type[Section]] = {}

def register_section(cls: type[Section]) -> type[Section]:
    """Class decorator to register a section variant by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key or key == "base":
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls

def create_section(key: str, **kwargs: Any) -> Section:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No section registered for key '{key}'")
    return cls(**kwargs)

def list_keys() -> list[str]:
    return list(_REGISTRY.keys())
