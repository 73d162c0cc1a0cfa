#!/usr/bin/python3

"""Work with the positions of chunks and blocks in named worlds.

The functionality of this package is provided by the positions subpackage.

The chunkpos.py script wraps the functionality of the subpackage for use on
the command line. It is also an example of how to use the package.
"""
