from __future__ import annotations
from pathlib import Path
import argparse
import json

import json5
import torch
from torch import Tensor
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .color import create
from .config import BatchConfig, Direction
from .cs.cielab import get_lab, set_lab


HEADERS: dict[Direction, tuple[str, str, str, str]] = {
    "lab2xyz": ("X", "Y", "Z", "alpha"),
    "xyz2lab": ("L", "a", "b", "alpha"),
}


def convert(direction: Direction, colors: Tensor) -> Tensor:
    """
    Converts `colors` of shape `(4, N)` in the given direction
    """
    if direction == "lab2xyz":
        l, a, b, alpha = colors
        return set_lab(create(colors.shape[1]), l, a, b, alpha)
    return get_lab(colors)


def _to_tensor(colors: list[tuple[float, ...]]) -> Tensor:
    out = create(len(colors))
    for idx, color in enumerate(colors):
        out[:, idx] = torch.tensor(
            (*color[:3], color[3] if len(color) == 4 else 1.0),
            dtype=out.dtype,
        )
    return out


def _table(config: BatchConfig, converted: Tensor) -> Table:
    table = Table(title=config.direction)
    for header in HEADERS[config.direction]:
        table.add_column(header, justify="right")
    for row in converted.T.tolist():
        table.add_row(*(f"{value:.{config.precision}f}" for value in row))
    return table


def main(
    argv: list[str] | None = None, console: Console | None = None
) -> int:
    if console is None:
        console = Console()

    parser = argparse.ArgumentParser(
        prog="colorlab", description="CIE Lab <-> CIE XYZ (D65)"
    )
    parser.add_argument(
        "direction", nargs="?", choices=("lab2xyz", "xyz2lab")
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=float,
        help="three components, optionally followed by alpha",
    )
    parser.add_argument("--config", type=Path, help="JSON5 batch file")
    parser.add_argument(
        "--precision", type=int, default=4, help="digits after the point"
    )
    parser.add_argument(
        "--schema",
        action="store_true",
        help="print the JSON schema of the batch file",
    )
    args = parser.parse_args(argv)

    if args.schema:
        console.print_json(json.dumps(BatchConfig.model_json_schema()))
        return 0

    if args.config is not None:
        if args.direction is not None or args.values:
            parser.error("--config excludes direction and values")
        console.log(f"Using [green]{args.config}")
        with args.config.open() as f:
            try:
                data = json5.load(f)
            except ValueError as e:
                console.print(
                    f"[bold red]{escape(str(args.config))}[/]: "
                    f"{escape(str(e))}"
                )
                return 2
        try:
            config = BatchConfig.model_validate(data)
        except ValidationError as e:
            console.print(
                f"[bold red]{escape(str(args.config))}[/]: {escape(str(e))}"
            )
            return 2
        converted = convert(config.direction, _to_tensor(config.colors))
        console.print(_table(config, converted))
        return 0

    if args.direction is None:
        parser.error("direction or --config is required")
    values = args.values or []
    if len(values) not in (3, 4):
        parser.error("expected three components and an optional alpha")

    try:
        config = BatchConfig(
            direction=args.direction,
            colors=[tuple(values)],
            precision=args.precision,
        )
    except ValidationError as e:
        console.print(f"[bold red]invalid arguments[/]: {escape(str(e))}")
        return 2
    converted = convert(config.direction, _to_tensor(config.colors))
    row = converted[:, 0].tolist()
    console.print(
        " ".join(f"{value:.{config.precision}f}" for value in row),
        highlight=False,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
