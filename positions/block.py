#!/usr/bin/python3

"""An immutable, serializable block position within a named world."""

from collections import namedtuple
from operator import index

from positions.common import (
    CHUNK_SHIFT,
    check_world,
    coerce_int,
    coerce_world,
    require_object,
    wrap_int32,
)


class BlockPosition(namedtuple('BlockPosition', 'x y z world')):
    """Absolute block coordinates (x, y, z) in the world named `world`.

    The world may be None for positions that aren't bound to a world. Two
    positions are equal when all four fields are equal, and never equal to a
    plain tuple or to a position of a different type.
    """

    __slots__ = ()

    def __new__(cls, x, y, z, world):
        return super().__new__(cls, *(wrap_int32(index(n)) for n in (x, y, z)),
                               check_world(world))

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    @classmethod
    def of(cls, x, y, z, world):
        return cls(x, y, z, world)

    @classmethod
    def deserialize(cls, node):
        """Build a BlockPosition from a decoded JSON object."""
        require_object(node)
        return cls.of(coerce_int(node, 'x'), coerce_int(node, 'y'),
                      coerce_int(node, 'z'), coerce_world(node))

    def serialize(self):
        return {'x': self.x, 'y': self.y, 'z': self.z, 'world': self.world}

    def to_chunk_position(self):
        """Return the position of the chunk containing this block."""
        from positions.chunk import ChunkPosition
        return ChunkPosition.of(self.x >> CHUNK_SHIFT, self.z >> CHUNK_SHIFT,
                                self.world)

    def __eq__(self, other):
        if not isinstance(other, BlockPosition):
            return NotImplemented
        return tuple.__eq__(self, other)

    def __ne__(self, other):
        if not isinstance(other, BlockPosition):
            return NotImplemented
        return tuple.__ne__(self, other)

    __hash__ = tuple.__hash__

    def __add__(self, other):
        return NotImplemented

    __mul__ = __rmul__ = __add__

    def __repr__(self):
        return 'BlockPosition(x={}, y={}, z={}, world={})'.format(*self)

    __str__ = __repr__
