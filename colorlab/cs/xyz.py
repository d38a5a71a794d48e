from __future__ import annotations
from torch import Tensor
from ..color import DEFAULT_CONTAINER, Component


def get_xyz(color: Tensor) -> tuple[Tensor, Tensor, Tensor]:
    return DEFAULT_CONTAINER.get_xyz(color)


def set_xyz(
    color: Tensor,
    x: Component,
    y: Component,
    z: Component,
    alpha: Component = 1.0,
) -> Tensor:
    return DEFAULT_CONTAINER.set_xyz(color, x, y, z, alpha)
