#!/usr/bin/python3

"""World registries resolve world names into worlds that hand out chunks.

ChunkPosition.to_chunk takes a registry as an argument instead of reaching for
a global one. Hosts that keep their worlds elsewhere should subclass
WorldRegistry and World; MemoryWorldRegistry is a complete in-memory
implementation used by the chunkpos script and the tests.

Subclasses must override:

WorldRegistry.get_world(name):
Return the loaded world called `name`, or None if no such world is loaded.

World.chunk_at(x, z):
Return a chunk handle for the grid coordinates (x, z), loading or generating
the chunk first if necessary. This may block.
"""

from abc import ABCMeta, abstractmethod
from collections import namedtuple


LoadedChunk = namedtuple('LoadedChunk', 'x z world')


class World(metaclass=ABCMeta):
    """The base class for worlds handed out by a WorldRegistry."""

    def __init__(self, name):
        self.name = name

    @abstractmethod
    def chunk_at(self, x, z):
        """Return the chunk at the grid coordinates (x, z)."""
        return NotImplemented

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.name)


class WorldRegistry(metaclass=ABCMeta):
    """The base class for world registries."""

    @abstractmethod
    def get_world(self, name):
        """Return the loaded world called `name`, or None."""
        return NotImplemented


class MemoryWorld(World):
    """A world whose chunks are LoadedChunk tuples created on first access."""

    def __init__(self, name):
        super().__init__(name)
        self._chunks = {}

    def chunk_at(self, x, z):
        try:
            return self._chunks[(x, z)]
        except KeyError:
            chunk = self._chunks[(x, z)] = LoadedChunk(x, z, self)
            return chunk

    def is_loaded(self, x, z):
        return (x, z) in self._chunks

    def loaded_chunks(self):
        return list(self._chunks.values())


class MemoryWorldRegistry(WorldRegistry):
    """Keep MemoryWorlds in a dict, keyed by their names."""

    world_type = MemoryWorld

    def __init__(self, names=()):
        self._worlds = {}
        for name in names:
            self.load(name)

    def load(self, name):
        """Load the world called `name` and return it.

        Loading a world that is already loaded returns the existing world.
        """
        try:
            return self._worlds[name]
        except KeyError:
            world = self._worlds[name] = self.world_type(name)
            return world

    def unload(self, name):
        """Forget the world called `name`. Does nothing if it isn't loaded."""
        self._worlds.pop(name, None)

    def get_world(self, name):
        return self._worlds.get(name)

    def __contains__(self, name):
        return name in self._worlds

    def __iter__(self):
        return iter(self._worlds)

    def __len__(self):
        return len(self._worlds)
