from __future__ import annotations

import argparse
import json
import os
from typing import List, Optional, Tuple

from .board import Board, Coord
from .codec import board_to_json
from .errors import BoardError
from .render import pretty


DEFAULT_DIMENSION = 3


def _resolve_dimension(parser: argparse.ArgumentParser, value: Optional[int], env_var: str) -> int:
    """Explicit flag wins; otherwise the environment, otherwise the default."""
    if value is not None:
        return value
    raw = os.getenv(env_var)
    if raw is None or raw.strip() == '':
        return DEFAULT_DIMENSION
    try:
        return int(raw)
    except ValueError:
        parser.error(f'{env_var} must be an integer, got {raw!r}')


def _parse_coord(text: str) -> Coord:
    sep = ',' if ',' in text else ' '
    try:
        r_s, c_s = [t for t in text.split(sep) if t != '']
        return (int(r_s), int(c_s))
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected ROW,COL, got {text!r}')


def _parse_mark(text: str) -> Tuple[int, int, str]:
    parts = text.split(',', 2)
    if len(parts) != 3 or parts[2] == '':
        raise argparse.ArgumentTypeError(f'expected ROW,COL,MARK, got {text!r}')
    try:
        return (int(parts[0]), int(parts[1]), parts[2])
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected integer ROW,COL, got {text!r}')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='gridboard', description='Build a board, place marks and inspect it')
    parser.add_argument('--height', type=int, default=None,
                        help='Number of rows (default: $GRIDBOARD_HEIGHT or 3)')
    parser.add_argument('--width', type=int, default=None,
                        help='Number of columns (default: $GRIDBOARD_WIDTH or 3)')
    parser.add_argument('--mark', action='append', type=_parse_mark, default=[], metavar='ROW,COL,MARK',
                        help='Place MARK at ROW,COL; repeat to place several in order')
    parser.add_argument('--diagonals', type=_parse_coord, default=None, metavar='ROW,COL',
                        help='Show both diagonals through ROW,COL')
    parser.add_argument('--columns', action='store_true', help='Show columns as well as rows')
    parser.add_argument('--json', action='store_true', help='Print the board as JSON instead of a grid')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    height = _resolve_dimension(parser, args.height, 'GRIDBOARD_HEIGHT')
    width = _resolve_dimension(parser, args.width, 'GRIDBOARD_WIDTH')
    try:
        board = Board(height, width)
    except ValueError as e:
        parser.error(str(e))

    for r, c, mark in args.mark:
        try:
            board.set(r, c, mark)
        except BoardError as e:
            parser.error(str(e))

    # Resolve everything that can fail before printing anything.
    diagonals = None
    if args.diagonals is not None:
        try:
            diagonals = board.diagonals_at(*args.diagonals)
        except BoardError as e:
            parser.error(str(e))

    if args.json:
        obj = board_to_json(board)
        if args.columns:
            obj['columns'] = list(board.each_column())
        if diagonals is not None:
            obj['diagonals'] = {'at': list(args.diagonals), 'left': diagonals[0], 'right': diagonals[1]}
        print(json.dumps(obj))
        return 0

    print(pretty(board))
    print(f'\nEmpty cells: {board.empty_count}' + (' (full)' if board.is_full() else ''))

    if args.columns:
        print('Columns:')
        for i, column in enumerate(board.each_column()):
            print(f'  {i}: {column}')

    if diagonals is not None:
        r, c = args.diagonals
        left, right = diagonals
        print(f'Diagonals through ({r}, {c}):')
        print(f'  \\ {left}')
        print(f'  / {right}')
    return 0
