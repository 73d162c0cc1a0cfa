#!/usr/bin/python3

"""An immutable and serializable chunk position.

A chunk is a column of CHUNK_WIDTH * CHUNK_DEPTH blocks reaching from the
bottom to the top of a world. ChunkPosition names one by its grid coordinates
(x, z) and the name of its world, and converts between chunk and block
coordinates:

>>> pos = ChunkPosition.of(1, 2, 'world')
>>> pos.get_relative(Direction.EAST)
ChunkPosition(x=2, z=2, world=world)
>>> pos.get_block(1, 64, 15)
BlockPosition(x=17, y=64, z=47, world=world)

All coordinates are signed 32-bit integers. Arithmetic that leaves that range
wraps around.

Resolving a position into a loaded chunk needs a world registry; see the
positions.registry module.
"""

import json
from collections import namedtuple
from operator import index

from positions.block import BlockPosition
from positions.common import (
    CHUNK_DEPTH,
    CHUNK_SHIFT,
    CHUNK_WIDTH,
    InvalidArgument,
    InvalidFormat,
    check_world,
    coerce_int,
    coerce_world,
    extract_bits,
    require_object,
    wrap_int32,
)
from positions.direction import Direction


class ChunkPosition(namedtuple('ChunkPosition', 'x z world')):
    """The position (x, z) of a chunk in the world named `world`.

    Create instances with the of, from_chunk, deserialize and loads class
    methods. The world may be None; two positions with a None world and the
    same coordinates are equal.

    Positions are ordered by world name first (None before any name), then
    by x and z.
    """

    __slots__ = ()

    def __new__(cls, x, z, world):
        return super().__new__(cls, wrap_int32(index(x)), wrap_int32(index(z)),
                               check_world(world))

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    @classmethod
    def of(cls, x, z, world):
        """Create a position from grid coordinates and a world name.

        Raises TypeError unless x and z are integers and world is a str or
        None.
        """
        return cls(x, z, world)

    @classmethod
    def from_chunk(cls, chunk):
        """Create the position of a live chunk handle.

        The handle must have x and z attributes and a world attribute with a
        name.
        """
        return cls.of(chunk.x, chunk.z, chunk.world.name)

    @classmethod
    def deserialize(cls, node):
        """Build a ChunkPosition from a decoded JSON object.

        The object needs "x", "z" and "world" members; anything else in it is
        ignored. Raises InvalidFormat if node isn't an object or lacks one of
        the members.
        """
        require_object(node)
        for field in cls._fields:
            if field not in node:
                raise InvalidFormat('missing field "{}"'.format(field))
        return cls.of(coerce_int(node, 'x'), coerce_int(node, 'z'),
                      coerce_world(node))

    @classmethod
    def loads(cls, text):
        """Decode a ChunkPosition from JSON text."""
        try:
            node = json.loads(text)
        except ValueError as err:
            raise InvalidFormat('invalid JSON: {}'.format(err)) from err
        return cls.deserialize(node)

    def serialize(self):
        return {'x': self.x, 'z': self.z, 'world': self.world}

    def dumps(self):
        """Encode this position as compact JSON text."""
        return json.dumps(self.serialize(), separators=(',', ':'))

    def get_relative(self, direction, distance=1):
        """Return the position `distance` chunks away in `direction`.

        Raises InvalidArgument for UP and DOWN: chunks span the world's whole
        height.
        """
        direction = Direction.parse(direction)
        if not direction.is_horizontal:
            raise InvalidArgument('invalid direction for a chunk: {}'
                                  .format(direction))
        distance = index(distance)
        return self.add(direction.mod_x * distance,
                        direction.mod_z * distance)

    def add(self, x, z):
        return ChunkPosition.of(self.x + index(x), self.z + index(z),
                                self.world)

    def subtract(self, x, z):
        return self.add(-index(x), -index(z))

    def get_block(self, x, y, z):
        """Return the absolute position of a block in this chunk.

        x and z are coordinates relative to the chunk's corner; only their
        lowest four bits are used, so 17 is the same as 1 and -1 the same as
        15.
        """
        return BlockPosition.of(
            (self.x << CHUNK_SHIFT) | extract_bits(index(x), CHUNK_SHIFT),
            y,
            (self.z << CHUNK_SHIFT) | extract_bits(index(z), CHUNK_SHIFT),
            self.world)

    def blocks(self, y):
        """Generate the positions of all blocks of this chunk at height y."""
        for x in range(CHUNK_WIDTH):
            for z in range(CHUNK_DEPTH):
                yield self.get_block(x, y, z)

    def to_chunk(self, registry):
        """Resolve this position into a chunk handle using `registry`.

        Returns None if the world isn't loaded in the registry. This may block
        while the world loads or generates the chunk; errors raised by the
        registry are passed on unchanged.
        """
        world = registry.get_world(self.world)
        if world is None:
            return None
        return world.chunk_at(self.x, self.z)

    def sort_key(self):
        return self.world is not None, self.world or '', self.x, self.z

    def __eq__(self, other):
        if not isinstance(other, ChunkPosition):
            return NotImplemented
        return tuple.__eq__(self, other)

    def __ne__(self, other):
        if not isinstance(other, ChunkPosition):
            return NotImplemented
        return tuple.__ne__(self, other)

    __hash__ = tuple.__hash__

    def __add__(self, other):
        return NotImplemented

    __mul__ = __rmul__ = __add__

    def __lt__(self, other):
        if not isinstance(other, ChunkPosition):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other):
        if not isinstance(other, ChunkPosition):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other):
        if not isinstance(other, ChunkPosition):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other):
        if not isinstance(other, ChunkPosition):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __repr__(self):
        return 'ChunkPosition(x={}, z={}, world={})'.format(*self)

    __str__ = __repr__
