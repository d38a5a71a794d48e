from __future__ import annotations
from unittest import TestCase
from pydantic import ValidationError


class TestBatchConfig(TestCase):
    def test_defaults(self):
        from colorlab.config import BatchConfig

        config = BatchConfig(direction="lab2xyz", colors=[[50, 0, 0]])
        self.assertEqual(config.precision, 4)
        self.assertEqual(config.colors, [(50.0, 0.0, 0.0)])

    def test_alpha(self):
        from colorlab.config import BatchConfig

        config = BatchConfig(direction="xyz2lab", colors=[[1, 2, 3, 0.5]])
        self.assertEqual(config.colors, [(1.0, 2.0, 3.0, 0.5)])

    def test_extra_forbidden(self):
        from colorlab.config import BatchConfig

        with self.assertRaises(ValidationError):
            BatchConfig(direction="lab2xyz", colors=[], illuminant="D50")

    def test_unknown_direction(self):
        from colorlab.config import BatchConfig

        with self.assertRaises(ValidationError):
            BatchConfig(direction="rgb2lab", colors=[])

    def test_wrong_number_of_components(self):
        from colorlab.config import BatchConfig

        with self.assertRaises(ValidationError):
            BatchConfig(direction="lab2xyz", colors=[[1, 2]])
        with self.assertRaises(ValidationError):
            BatchConfig(direction="lab2xyz", colors=[[1, 2, 3, 4, 5]])

    def test_frozen(self):
        from colorlab.config import BatchConfig

        config = BatchConfig(direction="lab2xyz", colors=[])
        with self.assertRaises(ValidationError):
            config.precision = 2  # type: ignore[misc]
