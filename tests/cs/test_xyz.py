from __future__ import annotations
from unittest import TestCase
import torch
from torch import tensor, testing


class TestXYZ(TestCase):
    def test_set_xyz_returns_same_color(self):
        from colorlab.color import create
        from colorlab.cs.xyz import set_xyz

        color = create()
        self.assertIs(set_xyz(color, 1.0, 2.0, 3.0, 0.5), color)
        self.assertEqual(color.tolist(), [1.0, 2.0, 3.0, 0.5])

    def test_set_xyz_default_alpha(self):
        from colorlab.color import create
        from colorlab.cs.xyz import set_xyz

        color = set_xyz(create(), 1.0, 2.0, 3.0)
        self.assertEqual(color[3].item(), 1.0)

    def test_get_xyz(self):
        from colorlab.cs.xyz import get_xyz

        color = tensor(
            [[1.0, 5.0], [2.0, 6.0], [3.0, 7.0], [4.0, 8.0]],
            dtype=torch.float64,
        )
        x, y, z = get_xyz(color)
        self.assertEqual(x.tolist(), [1.0, 5.0])
        self.assertEqual(y.tolist(), [2.0, 6.0])
        self.assertEqual(z.tolist(), [3.0, 7.0])

    def test_set_xyz_broadcasts_scalars(self):
        from colorlab.color import create
        from colorlab.cs.xyz import set_xyz

        x = tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64)
        color = set_xyz(create(2, 2), x, 0.0, 1.0, 0.25)
        testing.assert_close(color[0], x)
        self.assertEqual(color[3].tolist(), [[0.25, 0.25], [0.25, 0.25]])
