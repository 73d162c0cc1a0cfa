#!/usr/bin/python3

"""Constants, integer helpers and errors shared by the positions modules."""

import re
from collections.abc import Mapping
from math import isfinite

# width: x, depth: z; (x, z) is the horizontal plane, y goes up and down
CHUNK_WIDTH, CHUNK_DEPTH = 16, 16
CHUNK_SHIFT = 4

INT32_MIN, INT32_MAX = -2**31, 2**31 - 1

_INTEGER_STRING = re.compile(r'-?[0-9]+')


class PositionError(ValueError):
    """Base class for errors raised by the positions package."""


class InvalidFormat(PositionError):
    """A serialized position could not be decoded."""


class InvalidArgument(PositionError):
    """An operation was passed an argument it cannot work with."""


def wrap_int32(n):
    """Wrap an integer into the signed 32-bit range.

    Coordinates behave like two's complement 32-bit integers, so results that
    overflow wrap around instead of raising:
    >>> wrap_int32(2**31)
    -2147483648
    """
    return (n - INT32_MIN) % 2**32 + INT32_MIN


def extract_bits(n, n_bits, offset_from_lsb=0):
    """Extract a number of bits from an integer.

    Example:
    >>> bin(extract_bits(0b1101011001111010, n_bits=5, offset_from_lsb=7))
    '0b1100'

        0b1101011001111010 -> 0b01100
              ^^^^^<- 7 ->

    The bits marked with ^ will be extracted. The offset is counted from the
    LSB, with the LSB itself having the offset 0. Negative numbers are
    treated as two's complement, so extract_bits(-1, 4) == 0b1111.
    """
    try:
        bitmask = (2**n_bits - 1) << offset_from_lsb
    except TypeError as err:
        raise ValueError(err)
    return (n & bitmask) >> offset_from_lsb


def coerce_int(node, field):
    """Read an integer field from a decoded JSON object.

    Numbers are truncated towards zero and strings of decimal digits are
    parsed, the way JSON tree libraries read an element "as int". Anything
    else, including values outside the 32-bit range, is an InvalidFormat
    error.
    """
    try:
        value = node[field]
    except KeyError:
        raise InvalidFormat('missing field "{}"'.format(field)) from None
    if isinstance(value, str) and _INTEGER_STRING.fullmatch(value):
        value = int(value)
    elif isinstance(value, float) and isfinite(value):
        value = int(value)
    elif isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFormat('field "{}" is not a number: {!r}'
                            .format(field, value))
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidFormat('field "{}" is out of range: {!r}'
                            .format(field, node[field]))
    return value


def coerce_world(node, field='world'):
    """Read a world identifier from a decoded JSON object.

    A JSON null gives None, the absent world. Numbers are turned into their
    string form.
    """
    try:
        value = node[field]
    except KeyError:
        raise InvalidFormat('missing field "{}"'.format(field)) from None
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidFormat('field "{}" is not a string: {!r}'
                        .format(field, value))


def require_object(node):
    """Raise InvalidFormat unless node is a decoded JSON object."""
    if not isinstance(node, Mapping):
        raise InvalidFormat('expected a JSON object, got {}'
                            .format(type(node).__name__))
    return node


def check_world(world):
    """Return world unchanged if it is a world name or None.

    Raises TypeError for anything else, so only strings and null end up in
    the "world" field of an encoded position.
    """
    if world is not None and not isinstance(world, str):
        raise TypeError('world must be a str or None, not {}'
                        .format(type(world).__name__))
    return world
