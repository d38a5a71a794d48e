from __future__ import annotations

# https://en.wikipedia.org/wiki/Illuminant_D65 (2° observer)
D65: tuple[float, float, float] = (95.047, 100.0, 108.883)
