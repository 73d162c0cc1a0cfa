#!/usr/bin/python

"""Move chunk positions around and list the blocks inside them.

Chunk positions are read as JSON lines, one {"x": ..., "z": ..., "world": ...}
object per line.
"""

import sys
from collections import namedtuple

from positions import BlockPosition, ChunkPosition, Direction, PositionError


def horizontal_direction(name):
    """Parse a direction argument, refusing UP and DOWN."""
    direction = Direction.parse(name)
    if not direction.is_horizontal:
        raise ValueError('chunks cannot move {}'.format(direction))
    return direction


def handle_args(custom_args=None):
    """Parse and return the script's command-line arguments using argparse.

    Defaults for the -w/--world and -o/--output-file arguments may be given in
    the [options] section of the INI file passed to -d/--defaults. Arguments
    given on the command line take precedence.
    """
    from argparse import ArgumentParser
    from configparser import ConfigParser, Error as ConfigParserError
    Args = namedtuple('Args', 'command world output_file positions_file '
                              'direction distance dx dz local_x y local_z')
    parser = ArgumentParser(description='Transform chunk positions read as '
                                        'JSON lines.')
    add = parser.add_argument
    add('-w', '--world', metavar='WORLD',
        help='Replace the world of every chunk position read with WORLD.')
    add('-o', '--output-file', metavar='FILE',
        help='The file to write results to. Defaults to stdout.')
    add('-f', '--positions-file', metavar='FILE',
        help='The JSON lines file to read chunk positions from. If FILE is '
             'not given or "-", defaults to standard input.')
    add('-d', '--defaults', metavar='FILE',
        help='Read defaults for -w/--world and -o/--output-file from the '
             '[options] section of the INI file FILE.')
    commands = parser.add_subparsers(dest='command', metavar='COMMAND')
    commands.required = True

    relative = commands.add_parser(
        'relative', help='Move chunk positions in a compass direction.')
    relative.add_argument(
        'direction', type=horizontal_direction, metavar='DIRECTION',
        help='One of north, east, south, west, north-east, north-west, '
             'south-east or south-west, or an abbreviation such as NE.')
    relative.add_argument('distance', type=int, nargs='?', default=1,
                          help='How many chunks to move. Defaults to 1.')

    shift = commands.add_parser('add', help='Add offsets to chunk positions.')
    shift.add_argument('dx', type=int, help='The offset along the x axis.')
    shift.add_argument('dz', type=int, help='The offset along the z axis.')

    block = commands.add_parser(
        'block', help='Write the absolute position of one block per chunk '
                      'as CSV.')
    block.add_argument('local_x', type=int, metavar='LOCAL_X',
                       help='The x coordinate inside the chunk (0-15).')
    block.add_argument('y', type=int, metavar='Y', help='The block height.')
    block.add_argument('local_z', type=int, metavar='LOCAL_Z',
                       help='The z coordinate inside the chunk (0-15).')

    footprint = commands.add_parser(
        'footprint', help='Write the positions of all blocks of each chunk '
                          'at one height as CSV.')
    footprint.add_argument('y', type=int, metavar='Y',
                           help='The block height.')

    pargs = parser.parse_args(custom_args)

    defaults = {}
    if pargs.defaults:
        config = ConfigParser(inline_comment_prefixes=('//', '#'))
        try:
            with open(pargs.defaults, 'rt') as defaults_file:
                config.read_file(defaults_file)
        except (OSError, ConfigParserError) as err:
            parser.error('cannot read defaults from {}: {}'
                         .format(pargs.defaults, err))
        if config.has_section('options'):
            defaults = config['options']

    def fallback(*choices):
        for choice in choices:
            if choice is not None:
                return choice
        return None

    return Args(
        command=pargs.command,
        world=fallback(pargs.world, defaults.get('world')),
        output_file=fallback(pargs.output_file, defaults.get('output_file')),
        positions_file=pargs.positions_file,
        direction=getattr(pargs, 'direction', None),
        distance=getattr(pargs, 'distance', None),
        dx=getattr(pargs, 'dx', None),
        dz=getattr(pargs, 'dz', None),
        local_x=getattr(pargs, 'local_x', None),
        y=getattr(pargs, 'y', None),
        local_z=getattr(pargs, 'local_z', None),
    )


def read_positions(lines, world=None):
    """Decode chunk positions from JSON lines, skipping blank lines.

    If world is not None, it replaces the world of every position read.
    """
    for line in lines:
        if not line.strip():
            continue
        position = ChunkPosition.loads(line)
        if world is not None:
            position = ChunkPosition.of(position.x, position.z, world)
        yield position


def transform(args, positions):
    """Apply the requested command, yielding chunk or block positions."""
    for position in positions:
        if args.command == 'relative':
            yield position.get_relative(args.direction, args.distance)
        elif args.command == 'add':
            yield position.add(args.dx, args.dz)
        elif args.command == 'block':
            yield position.get_block(args.local_x, args.y, args.local_z)
        elif args.command == 'footprint':
            yield from position.blocks(args.y)


def main(custom_args=None):
    """The script's main entry point."""
    from csv import QUOTE_NONNUMERIC, DictWriter as CSVDictWriter

    args = handle_args(custom_args)
    with (open(args.positions_file, 'rt')
          if args.positions_file not in (None, '-')
          else sys.stdin) as positions_file, \
         (open(args.output_file, 'wt', newline='')
          if args.output_file is not None
          else sys.stdout) as outfile:
        results = transform(args, read_positions(positions_file, args.world))
        try:
            if args.command in ('block', 'footprint'):
                csvwriter = CSVDictWriter(outfile,
                                          fieldnames=BlockPosition._fields,
                                          quoting=QUOTE_NONNUMERIC)
                csvwriter.writeheader()
                csvwriter.writerows(map(BlockPosition._asdict, results))
            else:
                for position in results:
                    print(position.dumps(), file=outfile)
        except PositionError as err:
            print('Could not read chunk position: {}'.format(err),
                  file=sys.stderr)
            return 1
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        sys.exit(0)     # We were piped into something that crashed.
