"""Page states for the product listing.

A page is in exactly one of these states, so combinations such as "loading
with an error" cannot be represented.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

from ..data.models import Product


@dataclass(frozen=True)
class Idle:
    """Not mounted; nothing requested yet."""


@dataclass(frozen=True)
class Loading:
    """The product request for the current mount is in flight."""


@dataclass(frozen=True)
class Loaded:
    """The request succeeded; products are in server order."""
    products: Tuple[Product, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Failed:
    """The request failed; ``message`` is shown to the user."""
    message: str


PageState = Union[Idle, Loading, Loaded, Failed]
