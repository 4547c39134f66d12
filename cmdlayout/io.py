import json
import logging
import os
from typing import List, Sequence

import numpy as np
import trimesh

from .chain import Command
from .chain_placer import CommandBlock
from .coordinate import Coordinate, Direction
from .geometry import create_layout_meshes

logger = logging.getLogger(__name__)


def layout_size(blocks: Sequence[CommandBlock]) -> Coordinate:
    """
    Size of the box enclosing all blocks (max - min + 1 on each axis).

    Returns Coordinate(0, 0, 0) for an empty layout.
    """
    if not blocks:
        return Coordinate()
    positions = np.array([block.coordinate.to_list() for block in blocks])
    return Coordinate.of(positions.max(axis=0) - positions.min(axis=0) + 1)


def layout_to_dict(blocks: Sequence[CommandBlock]) -> List[dict]:
    """Serializes placed blocks to plain dictionaries."""
    return [
        {
            "index": index,
            "command": str(getattr(block.command, "text", block.command)),
            "conditional": bool(getattr(block.command, "conditional", False)),
            "position": block.coordinate.to_list(),
            "facing": block.direction.name.lower(),
        }
        for index, block in enumerate(blocks)
    ]


def layout_from_dict(data: List[dict]) -> List[CommandBlock]:
    blocks = []
    for entry in sorted(data, key=lambda item: item["index"]):
        blocks.append(CommandBlock(
            command=Command(entry["command"], conditional=bool(entry.get("conditional", False))),
            coordinate=Coordinate.of(entry["position"]),
            direction=Direction.parse(entry["facing"]),
        ))
    return blocks


def save_layout_to_json(blocks: Sequence[CommandBlock], file_path: str) -> str:
    """
    Saves placed blocks to a JSON file.

    Args:
        blocks: The placed blocks, in chain order.
        file_path: The full path for the output JSON file.

    Returns:
        The path actually written (with a .json suffix).

    Raises:
        Exception: Propagates exceptions from file I/O or JSON serialization.
    """
    if not file_path.lower().endswith(".json"):
        file_path += ".json"

    export_dir = os.path.dirname(file_path)
    if export_dir:
        os.makedirs(export_dir, exist_ok=True)

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(layout_to_dict(blocks), f, indent=4)
    logger.info("Saved %d blocks to %s", len(blocks), file_path)
    return file_path


def load_layout_from_json(file_path: str) -> List[CommandBlock]:
    """
    Loads placed blocks from a JSON file written by save_layout_to_json.

    Raises:
        FileNotFoundError: If the file_path does not exist.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Layout file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    blocks = layout_from_dict(data)
    logger.info("Loaded %d blocks from %s", len(blocks), file_path)
    return blocks


def export_layout_to_glb(blocks: Sequence[CommandBlock], file_path: str) -> str:
    """
    Exports a preview of the layout to a single GLB file (binary glTF).

    Raises:
        ValueError: If there are no blocks.
        Exception: Propagates exceptions from trimesh export.
    """
    if not blocks:
        raise ValueError("Cannot export an empty layout.")

    if not file_path.lower().endswith(".glb"):
        file_path += ".glb"

    export_dir = os.path.dirname(file_path)
    if export_dir:
        os.makedirs(export_dir, exist_ok=True)

    meshes = create_layout_meshes(blocks)
    final_mesh = trimesh.util.concatenate(meshes)
    final_mesh.export(file_type='glb', file_obj=file_path)
    logger.info("Exported %d blocks to %s", len(blocks), file_path)
    return file_path
