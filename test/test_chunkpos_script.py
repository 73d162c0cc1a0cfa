#!/usr/bin/python

"""Test the chunkpos script."""

import csv
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr
from io import StringIO

import chunkpos as chunkpos_script
from positions import Direction


class ArgumentTest(unittest.TestCase):
    """Test the script's argument parsing and error checking."""

    def test_directions(self):
        """Test error checking in the DIRECTION argument."""
        with redirect_stderr(StringIO()):
            with self.assertRaises(SystemExit):
                chunkpos_script.handle_args(['relative', 'up'])
            with self.assertRaises(SystemExit):
                chunkpos_script.handle_args(['relative', 'northish'])
        args = chunkpos_script.handle_args(['relative', 'NE', '3'])
        self.assertIs(args.direction, Direction.NORTH_EAST)
        self.assertEqual(args.distance, 3)
        args = chunkpos_script.handle_args(['relative', 'south'])
        self.assertEqual(args.distance, 1)

    def test_command_required(self):
        """Test that a command has to be given."""
        with redirect_stderr(StringIO()):
            with self.assertRaises(SystemExit):
                chunkpos_script.handle_args([])
            with self.assertRaises(SystemExit):
                chunkpos_script.handle_args(['add', '1'])

    def test_defaults_file(self):
        """Test that the defaults file is used below the command line."""
        with tempfile.TemporaryDirectory() as tmpdir:
            defaults = os.path.join(tmpdir, 'defaults.ini')
            with open(defaults, 'wt') as defaults_file:
                defaults_file.write('[options]\n'
                                    'world = world_nether  // comment\n'
                                    'output_file = out.jsonl\n')
            args = chunkpos_script.handle_args(['-d', defaults, 'add', '1',
                                                '2'])
            self.assertEqual(args.world, 'world_nether')
            self.assertEqual(args.output_file, 'out.jsonl')
            args = chunkpos_script.handle_args(['-d', defaults, '-w', 'end',
                                                'add', '1', '2'])
            self.assertEqual(args.world, 'end')
        args = chunkpos_script.handle_args(['add', '1', '2'])
        self.assertIsNone(args.world)
        self.assertIsNone(args.output_file)

    def test_missing_defaults_file(self):
        """Test that an unreadable defaults file is a usage error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = os.path.join(tmpdir, 'missing.ini')
            broken = os.path.join(tmpdir, 'broken.ini')
            with open(broken, 'wt') as broken_file:
                broken_file.write('world = no section header\n')
            for defaults in (missing, broken):
                stderr = StringIO()
                with self.subTest(defaults=defaults), \
                        redirect_stderr(stderr):
                    with self.assertRaises(SystemExit) as exit_info:
                        chunkpos_script.handle_args(['-d', defaults, 'add',
                                                     '1', '2'])
                    self.assertEqual(exit_info.exception.code, 2)
                    self.assertIn(defaults, stderr.getvalue())


class MainTest(unittest.TestCase):
    """Run the script on files."""

    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.input = os.path.join(self._tmpdir.name, 'in.jsonl')
        self.output = os.path.join(self._tmpdir.name, 'out')

    def run_script(self, lines, *args):
        with open(self.input, 'wt') as infile:
            infile.write('\n'.join(lines) + '\n')
        return chunkpos_script.main(['-f', self.input, '-o', self.output,
                                     *args])

    def read_output(self):
        with open(self.output, 'rt', newline='') as outfile:
            return outfile.read()

    def test_relative(self):
        """Test moving positions read from a file."""
        status = self.run_script(['{"x": 0, "z": 0, "world": "w"}', '',
                                  '{"world": "v", "x": 5, "z": 5}'],
                                 'relative', 'north', '2')
        self.assertEqual(status, 0)
        self.assertEqual(self.read_output().splitlines(), [
            '{"x":0,"z":-2,"world":"w"}',
            '{"x":5,"z":3,"world":"v"}',
        ])

    def test_add_with_world(self):
        """Test that -w/--world replaces the world of every position."""
        status = self.run_script(['{"x": 1, "z": 1, "world": "w"}'],
                                 '-w', 'other', 'add', '-1', '10')
        self.assertEqual(status, 0)
        self.assertEqual(json.loads(self.read_output()),
                         {'x': 0, 'z': 11, 'world': 'other'})

    def test_block(self):
        """Test writing block positions as CSV."""
        status = self.run_script(['{"x": 1, "z": 2, "world": "w"}'],
                                 'block', '17', '64', '-1')
        self.assertEqual(status, 0)
        rows = list(csv.reader(StringIO(self.read_output())))
        self.assertEqual(rows, [['x', 'y', 'z', 'world'],
                                ['17', '64', '47', 'w']])

    def test_footprint(self):
        """Test writing every block of a chunk as CSV."""
        status = self.run_script(['{"x": 0, "z": 0, "world": "w"}',
                                  '{"x": 1, "z": 0, "world": "w"}'],
                                 'footprint', '3')
        self.assertEqual(status, 0)
        reader = csv.DictReader(StringIO(self.read_output()),
                                quoting=csv.QUOTE_NONNUMERIC)
        rows = list(reader)
        self.assertEqual(len(rows), 512)
        self.assertEqual({row['y'] for row in rows}, {3})
        self.assertEqual(min(row['x'] for row in rows), 0)
        self.assertEqual(max(row['x'] for row in rows), 31)

    def test_bad_input(self):
        """Test that undecodable positions make the script fail."""
        stderr = StringIO()
        with redirect_stderr(stderr):
            status = self.run_script(['{"x": 1, "z": 2}'], 'add', '1', '1')
        self.assertEqual(status, 1)
        self.assertIn('world', stderr.getvalue())


if __name__ == '__main__':
    unittest.main()
