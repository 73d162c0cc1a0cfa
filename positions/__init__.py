#!/usr/bin/python3

"""Immutable positions of chunks and blocks in named worlds.

ChunkPosition is the main type of this package. It converts to and from the
JSON object {"x": ..., "z": ..., "world": ...}, moves in compass directions
(see positions.direction) and addresses the blocks inside a chunk (see
positions.block). Chunk positions are resolved into loaded chunks through a
world registry from positions.registry.
"""

from positions.block import BlockPosition
from positions.chunk import ChunkPosition
from positions.common import (
    CHUNK_DEPTH,
    CHUNK_WIDTH,
    InvalidArgument,
    InvalidFormat,
    PositionError,
)
from positions.direction import HORIZONTAL, Direction
from positions.registry import (
    LoadedChunk,
    MemoryWorld,
    MemoryWorldRegistry,
    World,
    WorldRegistry,
)

__all__ = [
    'BlockPosition',
    'ChunkPosition',
    'CHUNK_DEPTH',
    'CHUNK_WIDTH',
    'Direction',
    'HORIZONTAL',
    'InvalidArgument',
    'InvalidFormat',
    'LoadedChunk',
    'MemoryWorld',
    'MemoryWorldRegistry',
    'PositionError',
    'World',
    'WorldRegistry',
]
