from __future__ import annotations

"""Path addressing for form controls.

A control path is either *relative* to the base path of the page area owning it,
or *absolute*, in which case the owner's base path is ignored. Textual paths use
``/`` as separator; a leading ``/`` marks an absolute path. Repeated items embed
their index as ``name[n]``.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Relative:
    segments: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Absolute:
    segments: Tuple[str, ...] = ()


PathSpec = Union[Relative, Absolute]


def _split(text: str) -> Tuple[str, ...]:
    return tuple(s for s in text.split("/") if s)


def parse_path(text: str) -> PathSpec:
    if text.startswith("/"):
        return Absolute(_split(text))
    return Relative(_split(text))


def resolve_path(base: str, spec: PathSpec) -> str:
    """Return the effective path of *spec* for an owner rooted at *base*."""
    if isinstance(spec, Absolute):
        return "/" + "/".join(spec.segments)
    if not spec.segments:
        return base or "/"
    return base.rstrip("/") + "/" + "/".join(spec.segments)


def indexed(name: str, index: int) -> str:
    """Path segment of the *index*-th item of the repeatable list *name*."""
    if index < 0:
        raise ValueError(f"index must be >= 0, got {index}")
    return name if index == 0 else f"{name}[{index}]"
