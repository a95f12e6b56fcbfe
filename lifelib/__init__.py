# Conway's Game of Life on a bounded grid, rendered to a text console.

from .conwaylife import Cell, InvalidDimension, LifeEngine, new_engine
from .topology import GridTopology
