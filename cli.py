"""Minimal CLI for laying out command block chains.

Usage examples:
  python3 cli.py place chain.txt --max 8 8 8 --json builds/chain.json --summary
  python3 cli.py place chain.txt --orientation "+x-z+y" --out builds/chain.glb
  python3 cli.py curve 0 0 0 2 2 1 --orientation east,up,south
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from config import config
from cmdlayout.chain import load_chain_from_file
from cmdlayout.chain_placer import CommandBlock
from cmdlayout.coordinate import Coordinate, Orientation
from cmdlayout.curve import space_filling_curve
from cmdlayout.io import export_layout_to_glb, layout_size, save_layout_to_json
from cmdlayout.placer import NotEnoughSpaceError, place_blocks


def _orientation(text: str) -> Orientation:
    try:
        return Orientation.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _export(blocks: List[CommandBlock], output: Path | None, json_path: Path | None, summary: bool):
    if output:
        export_layout_to_glb(blocks, str(output))

    if json_path:
        save_layout_to_json(blocks, str(json_path))

    if summary:
        print(f"Blocks: {len(blocks)} | Size: {layout_size(blocks)}")
        if config.VERBOSE:
            for index, block in enumerate(blocks):
                print(f"  {index:4d} {block.coordinate} {block.direction.name.lower():5s} {block.command}")


def _place(args) -> int:
    chain = load_chain_from_file(str(args.chain))
    min_corner = Coordinate.of(args.min) if args.min else config.DEFAULT_MIN
    max_corner = Coordinate.of(args.max) if args.max else config.DEFAULT_MAX
    orientation = args.orientation or config.DEFAULT_ORIENTATION
    try:
        blocks = place_blocks(chain, min_corner, max_corner, orientation)
    except NotEnoughSpaceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _export(blocks, args.out, args.json, args.summary)
    return 0


def _curve(args) -> int:
    orientation = args.orientation or config.DEFAULT_ORIENTATION
    curve = space_filling_curve(Coordinate.of(args.corner1), Coordinate.of(args.corner2), orientation)
    for coordinate in curve:
        print(f"{coordinate.x} {coordinate.y} {coordinate.z}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Command block chain layout")
    sub = parser.add_subparsers(dest="command", required=True)

    place = sub.add_parser("place", help="Lay out a chain file and export it to JSON/GLB")
    place.add_argument("chain", type=Path, help="Text file with one command per line")
    place.add_argument("--min", type=int, nargs=3, metavar=("X", "Y", "Z"),
                       help="Minimal corner of the bounding box (inclusive)")
    place.add_argument("--max", type=int, nargs=3, metavar=("X", "Y", "Z"),
                       help="Maximal corner of the bounding box (exclusive)")
    place.add_argument("--orientation", type=_orientation, default=None,
                       help="Primary, secondary and tertiary direction, e.g. +x+z+y")
    place.add_argument("--out", type=Path, help="Output GLB preview path")
    place.add_argument("--json", type=Path, help="Output JSON layout path")
    place.add_argument("--summary", action="store_true", help="Print block count and size")

    curve = sub.add_parser("curve", help="Print the space filling curve of a cuboid")
    curve.add_argument("corner1", type=int, nargs=3, metavar="C1")
    curve.add_argument("corner2", type=int, nargs=3, metavar="C2")
    curve.add_argument("--orientation", type=_orientation, default=None)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level="DEBUG" if config.DEBUG else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "place":
        return _place(args)
    if args.command == "curve":
        return _curve(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
