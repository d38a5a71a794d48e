from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

import torch
from torch import Tensor


Component = Tensor | float


class ColorContainer(ABC):
    """
    Storage of color values: four slots, three color components
    followed by alpha
    """

    @abstractmethod
    def create(self, *shape: int) -> Any:
        raise NotImplementedError

    @abstractmethod
    def get_xyz(self, color: Any) -> tuple[Any, Any, Any]:
        raise NotImplementedError

    @abstractmethod
    def get_alpha(self, color: Any) -> Any:
        raise NotImplementedError

    @abstractmethod
    def set_xyz(
        self, color: Any, x: Any, y: Any, z: Any, alpha: Any
    ) -> Any:
        raise NotImplementedError


class TensorColorContainer(ColorContainer):
    """
    Color values as tensors of shape `(4, *shape)`
    """

    def __init__(
        self,
        dtype: torch.dtype = torch.float64,
        device: torch.device | str | None = None,
    ) -> None:
        self._dtype = dtype
        self._device = device

    def create(self, *shape: int) -> Tensor:
        return torch.zeros((4, *shape), dtype=self._dtype, device=self._device)

    def get_xyz(self, color: Tensor) -> tuple[Tensor, Tensor, Tensor]:
        assert color.shape[0] == 4, color.shape
        return color[0], color[1], color[2]

    def get_alpha(self, color: Tensor) -> Tensor:
        assert color.shape[0] == 4, color.shape
        return color[3]

    def set_xyz(
        self,
        color: Tensor,
        x: Component,
        y: Component,
        z: Component,
        alpha: Component,
    ) -> Tensor:
        assert color.shape[0] == 4, color.shape
        color[0] = x
        color[1] = y
        color[2] = z
        color[3] = alpha
        return color


DEFAULT_CONTAINER = TensorColorContainer()


def create(*shape: int) -> Tensor:
    return DEFAULT_CONTAINER.create(*shape)
