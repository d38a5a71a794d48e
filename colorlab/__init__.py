from __future__ import annotations

__version__ = "0.1.0"

from .color import ColorContainer, TensorColorContainer, create
from .cs import D65
from .cs.xyz import get_xyz, set_xyz
from .cs.cielab import CIELAB, from_lab, set_lab, get_lab

__all__ = [
    "CIELAB",
    "ColorContainer",
    "D65",
    "TensorColorContainer",
    "create",
    "from_lab",
    "get_lab",
    "get_xyz",
    "set_lab",
    "set_xyz",
]
