# Implementation of Conway's Game of Life on a bounded board.

import enum
import logging
import random

import numpy as np

from .topology import GridTopology, InvalidDimension


logger = logging.getLogger(__name__)


class Cell(enum.IntEnum):
    DEAD = 0
    LIVE = 1


class LifeEngine:

    def __init__(self, width, height, random_source = random):
        """ random_source supplies uniform draws in [0, 1) via random().
        Use random.Random(seed) for a reproducible board.
        """
        self.topology = GridTopology(width, height)
        self.generation = 0
        self.is_still = False
        cells = np.zeros((width, height), dtype=bool)
        for x, y in self.topology.coords():
            cells[x, y] = random_source.random() > 0.5
        self._cells = cells
        logger.info('New {}x{} board with {} live cells.'.format(
            width, height, self.population()))


    @classmethod
    def from_board(cls, board):
        """ board is a 2D array-like indexed [x][y]; truthy entries are live. """
        cells = np.array(board, dtype=bool)
        if cells.ndim != 2 or cells.size == 0:
            raise InvalidDimension(
                'Board must be a non-empty 2D array, got shape {}.'.format(cells.shape))
        engine = cls.__new__(cls)
        engine.topology = GridTopology(*cells.shape)
        engine.generation = 0
        engine.is_still = False
        engine._cells = cells
        return engine


    @property
    def width(self):
        return self.topology.width

    @property
    def height(self):
        return self.topology.height


    def step(self):
        curr = self._cells
        new_cells = np.zeros_like(curr)
        for x, y in self.topology.coords():
            lives = sum(1 for nx, ny in self.topology.neighbors_of((x, y)) if curr[nx, ny])
            new_cells[x, y] = self._next_state(curr[x, y], lives)
        self.is_still = bool(np.array_equal(curr, new_cells))
        self._cells = new_cells
        self.generation += 1
        logger.debug('Generation {} has {} live cells.'.format(
            self.generation, self.population()))
        if self.is_still:
            logger.info('Board is still at generation {}.'.format(self.generation))


    @staticmethod
    def _next_state(live, lives):
        if lives < 2:
            return False
        if lives == 2:
            return live
        if lives == 3:
            return True
        return False


    def run(self, iterations = 1):
        """ Step up to iterations times, stopping early once the board is still.
        Return the snapshot after the last step.
        """
        for j in range(iterations):
            self.step()
            if self.is_still:
                break
        return self.snapshot()


    def snapshot(self):
        board = self._cells.copy()
        board.flags.writeable = False
        return board


    def cell(self, x, y):
        return Cell.LIVE if self._cells[x, y] else Cell.DEAD


    def population(self):
        return int(np.count_nonzero(self._cells))


def new_engine(width, height, seed = None):
    source = random if seed is None else random.Random(seed)
    return LifeEngine(width, height, source)
