# Bounded Moore neighborhoods of a fixed size game board.

import numbers


class InvalidDimension(ValueError):
    pass


class GridTopology:

    def __init__(self, width, height):
        for name, value in (('width', width), ('height', height)):
            if (not isinstance(value, numbers.Integral) or isinstance(value, bool)
                    or value <= 0):
                raise InvalidDimension(
                    'Board {} must be a positive integer, got {!r}.'.format(name, value))
        self._width = int(width)
        self._height = int(height)
        self._moore_offsets = [(i, j) for i in [-1, 0, 1] for j in [-1, 0, 1] if (i != 0 or j != 0)]
        # self._neighbors[x][y] is the frozenset of in-bounds positions
        # around (x, y). There is no wraparound at the board edges.
        self._neighbors = [[self._scan(x, y) for y in range(self._height)]
                           for x in range(self._width)]


    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def size(self):
        return self._width * self._height


    def coords(self):
        """ All positions of the board, x-major: (0, 0), (0, 1), ... """
        for x in range(self._width):
            for y in range(self._height):
                yield (x, y)


    def neighbors_of(self, coord):
        x, y = coord
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError('Position {} is outside a {}x{} board.'.format(
                coord, self._width, self._height))
        return self._neighbors[x][y]


    def _scan(self, x, y):
        return frozenset((x + dx, y + dy) for dx, dy in self._moore_offsets
                         if 0 <= x + dx < self._width and 0 <= y + dy < self._height)
