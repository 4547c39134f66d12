from typing import List, Sequence

import numpy as np
import trimesh

from .chain import NOP, is_conditional
from .chain_placer import CommandBlock
from .coordinate import Coordinate
from .constants import (
    BLOCK_SIZE, MARKER_SIZE, MARKER_DEPTH,
    COLOR_FIRST, COLOR_CHAIN, COLOR_CONDITIONAL, COLOR_NOP, COLOR_MARKER, ColorTuple,
)


def create_block_mesh(position: np.ndarray,
                      dimensions: np.ndarray = np.array([BLOCK_SIZE, BLOCK_SIZE, BLOCK_SIZE]),
                      color: ColorTuple = COLOR_CHAIN) -> trimesh.Trimesh:
    """
    Creates a colored rectangular prism mesh centered at a specified position.

    Args:
        position: A numpy array representing the center of the prism (x, y, z).
        dimensions: A numpy array for width(X), height(Y), depth(Z).
        color: RGBA color applied to every face.

    Returns:
        A trimesh.Trimesh object representing the prism.
    """
    primitive = trimesh.primitives.Box(extents=dimensions)
    primitive.apply_translation(position)
    mesh = trimesh.Trimesh(vertices=primitive.vertices, faces=primitive.faces)
    mesh.visual.face_colors = np.tile(color, (len(mesh.faces), 1))
    return mesh


def block_color(block: CommandBlock, index: int) -> ColorTuple:
    """Preview color: the first block is the impulse block, NOP padding is gray."""
    if index == 0:
        return COLOR_FIRST
    if block.command == NOP:
        return COLOR_NOP
    if is_conditional(block.command):
        return COLOR_CONDITIONAL
    return COLOR_CHAIN


def block_center(coordinate: Coordinate) -> np.ndarray:
    # Lattice cell (x, y, z) spans [x, x+1) on every axis
    return coordinate.to_array().astype(float) + BLOCK_SIZE / 2.0


def create_facing_marker(block: CommandBlock) -> trimesh.Trimesh:
    """Small dark box on the face the block points to."""
    delta = block.direction.delta.to_array().astype(float)
    center = block_center(block.coordinate) + delta * (BLOCK_SIZE + MARKER_DEPTH) / 2.0
    dimensions = np.full(3, MARKER_SIZE)
    dimensions[np.abs(delta) > 0] = MARKER_DEPTH
    return create_block_mesh(center, dimensions=dimensions, color=COLOR_MARKER)


def create_layout_meshes(blocks: Sequence[CommandBlock]) -> List[trimesh.Trimesh]:
    """One box per placed block plus a marker showing its facing."""
    meshes = []
    for index, block in enumerate(blocks):
        meshes.append(create_block_mesh(block_center(block.coordinate),
                                        color=block_color(block, index)))
        meshes.append(create_facing_marker(block))
    return meshes
