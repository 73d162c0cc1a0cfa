#!/usr/bin/python3

"""Compass directions with unit offsets along the x, y and z axes.

North points towards negative z and east towards positive x. UP and DOWN are
the only members with a vertical component; chunk positions have no vertical
axis and reject them.
"""

from enum import Enum

from positions.common import InvalidArgument


class Direction(Enum):
    """A unit step in one of ten directions."""

    NORTH = 0, 0, -1
    EAST = 1, 0, 0
    SOUTH = 0, 0, 1
    WEST = -1, 0, 0
    UP = 0, 1, 0
    DOWN = 0, -1, 0
    NORTH_EAST = 1, 0, -1
    NORTH_WEST = -1, 0, -1
    SOUTH_EAST = 1, 0, 1
    SOUTH_WEST = -1, 0, 1

    @property
    def mod_x(self):
        return self.value[0]

    @property
    def mod_y(self):
        return self.value[1]

    @property
    def mod_z(self):
        return self.value[2]

    @property
    def is_horizontal(self):
        return self.mod_y == 0

    @property
    def opposite(self):
        return Direction((-self.mod_x, -self.mod_y, -self.mod_z))

    @classmethod
    def parse(cls, name):
        """Look up a direction by name.

        Accepts member names in any case with '-', '_' or ' ' separators
        ("north-east", "North East") and the compass abbreviations N, E, S,
        W, U, D, NE, NW, SE and SW.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper().replace('-', '_').replace(' ', '_')
        key = _ABBREVIATIONS.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise InvalidArgument('unknown direction: {!r}'
                                  .format(name)) from None

    def __str__(self):
        return self.name.lower().replace('_', '-')


_ABBREVIATIONS = {
    'N': 'NORTH', 'E': 'EAST', 'S': 'SOUTH', 'W': 'WEST', 'U': 'UP',
    'D': 'DOWN', 'NE': 'NORTH_EAST', 'NW': 'NORTH_WEST', 'SE': 'SOUTH_EAST',
    'SW': 'SOUTH_WEST',
}

HORIZONTAL = tuple(d for d in Direction if d.is_horizontal)
