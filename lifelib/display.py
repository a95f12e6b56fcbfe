# Show game boards on a text console or in a matplotlib window.

import sys

import matplotlib.colors
import matplotlib.pyplot as plt
import numpy as np


LIVE_GLYPH = 'X'
DEAD_GLYPH = '-'
CLEAR_SCREEN = '\x1b[2J\x1b[1;1H'


def board_to_str(board):
    """ Board is indexed [x, y]. Each printed line is one row y,
    with one glyph per column x and no separators.
    """
    board = np.asarray(board, dtype=bool)
    return '\n'.join(
        ''.join(LIVE_GLYPH if board[x, y] else DEAD_GLYPH for x in range(board.shape[0]))
        for y in range(board.shape[1]))


def str_to_board(s):
    """ Convert the text from board_to_str back into a bool array indexed [x, y].
    Blank lines are ignored.
    """
    rows = [line.strip() for line in s.splitlines() if line.strip()]
    if not rows:
        raise ValueError('No board rows found.')
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError('Board rows have unequal lengths.')
    glyphs = {LIVE_GLYPH: True, DEAD_GLYPH: False}
    try:
        arr = [[glyphs[c] for c in row] for row in rows]
    except KeyError as e:
        raise ValueError('Unknown glyph {} in board.'.format(e)) from None
    return np.array(arr, dtype=bool).T


class ConsoleDisplay:

    def __init__(self, stream = None, clear = True):
        self._stream = sys.stdout if stream is None else stream
        self._clear = clear


    def show(self, board, title = None):
        parts = []
        if self._clear:
            parts.append(CLEAR_SCREEN)
        if title:
            parts.append(title + '\n')
        parts.append(board_to_str(board) + '\n')
        self._stream.write(''.join(parts))
        self._stream.flush()


    def close(self):
        pass


class PlotDisplay:

    def __init__(self, rest = 0.1, color_dead = 'white', color_live = 'black'):
        self._rest = rest
        self._cmap = matplotlib.colors.ListedColormap([color_dead, color_live])
        self._norm = matplotlib.colors.BoundaryNorm([-0.5, 0.5, 1.5], self._cmap.N, clip=True)
        self._im = None


    def show(self, board, title = None):
        # imshow draws rows first, so transpose the [x, y] board.
        data = np.asarray(board, dtype=float).T
        if self._im is None:
            plt.ion()
            plt.axis('off')
            self._im = plt.imshow(data, interpolation='nearest', cmap=self._cmap, norm=self._norm)
        else:
            self._im.set_data(data)
        plt.title(title or 'Game of Life')
        plt.pause(self._rest)


    def close(self):
        if self._im is not None:
            plt.close(self._im.figure)
            self._im = None
