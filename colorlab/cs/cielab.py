"""
https://en.wikipedia.org/wiki/CIELAB_color_space

Lab components range: 0 <= l <= 100; -128 <= a <= 127; -128 <= b <= 127.
The ranges are advisory, values outside of them are converted as is.
"""

from __future__ import annotations
import torch
from torch import Tensor
from . import D65
from ..color import ColorContainer, DEFAULT_CONTAINER, Component

EPSILON = 0.008856
SLOPE = 7.787
OFFSET = 16 / 116


def _as_tensor(value: Component) -> Tensor:
    if isinstance(value, Tensor):
        return value
    return torch.tensor(value, dtype=torch.float64)


def _from_lab_component(value: Tensor, white: float) -> Tensor:
    cube = value**3
    # threshold is tested on the cube
    decompanded = torch.where(
        cube > EPSILON, cube, (value - OFFSET) / SLOPE
    )
    return decompanded * white


def _from_xyz_component(value: Tensor, white: float) -> Tensor:
    value = value / white
    # threshold is tested on the normalized value
    return torch.where(
        value > EPSILON, torch.pow(value, 1 / 3), SLOPE * value + OFFSET
    )


class CIELAB:
    _container: ColorContainer

    def __init__(self, container: ColorContainer = DEFAULT_CONTAINER):
        self._container = container

    def from_lab(
        self,
        l: Component,
        a: Component,
        b: Component,
        alpha: Component = 1.0,
    ):
        """
        Creates a new color from Lab component values. Tensor components
        give a color of their broadcast shape
        """
        shape = torch.broadcast_shapes(
            *(_as_tensor(value).shape for value in (l, a, b, alpha))
        )
        return self.set_lab(self._container.create(*shape), l, a, b, alpha)

    def set_lab(
        self,
        color,
        l: Component,
        a: Component,
        b: Component,
        alpha: Component = 1.0,
    ):
        """
        Updates `color` in place from Lab component values and returns it
        """
        y = (_as_tensor(l) + 16) / 116
        x = _as_tensor(a) / 500 + y
        z = y - _as_tensor(b) / 200

        return self._container.set_xyz(
            color,
            _from_lab_component(x, D65[0]),
            _from_lab_component(y, D65[1]),
            _from_lab_component(z, D65[2]),
            alpha,
        )

    def get_lab(self, color) -> Tensor:
        """
        Returns a new `[l, a, b, alpha]` tensor, `color` is left untouched
        """
        xyz = self._container.get_xyz(color)

        x = _from_xyz_component(_as_tensor(xyz[0]), D65[0])
        y = _from_xyz_component(_as_tensor(xyz[1]), D65[1])
        z = _from_xyz_component(_as_tensor(xyz[2]), D65[2])
        alpha = _as_tensor(self._container.get_alpha(color))

        return torch.stack(
            (
                116 * y - 16,
                500 * (x - y),
                200 * (y - z),
                alpha.to(dtype=y.dtype, device=y.device),
            )
        )


_cielab = CIELAB()


def from_lab(
    l: Component, a: Component, b: Component, alpha: Component = 1.0
) -> Tensor:
    return _cielab.from_lab(l, a, b, alpha)


def set_lab(
    color: Tensor,
    l: Component,
    a: Component,
    b: Component,
    alpha: Component = 1.0,
) -> Tensor:
    return _cielab.set_lab(color, l, a, b, alpha)


def get_lab(color: Tensor) -> Tensor:
    return _cielab.get_lab(color)
