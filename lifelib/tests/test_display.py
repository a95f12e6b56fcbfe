import io
import unittest
import warnings

import matplotlib
matplotlib.use('Agg')
import numpy as np

from lifelib.display import (CLEAR_SCREEN, ConsoleDisplay, PlotDisplay,
                             board_to_str, str_to_board)


class TestBoardText(unittest.TestCase):

    def test_board_to_str(self):
        board = np.zeros((4, 3), dtype=bool)
        board[1, 0] = True
        board[2, 1] = True
        board[0, 2] = board[1, 2] = board[2, 2] = True
        self.assertEqual('-X--\n--X-\nXXX-', board_to_str(board))

    def test_str_to_board(self):
        board = str_to_board('\n-X--\n--X-\n\nXXX-\n')
        self.assertEqual((4, 3), board.shape)
        self.assertTrue(board[1, 0])
        self.assertTrue(board[2, 1])
        self.assertFalse(board[3, 2])
        self.assertEqual(5, np.count_nonzero(board))

    def test_bad_text(self):
        with self.assertRaises(ValueError):
            str_to_board('')
        with self.assertRaises(ValueError):
            str_to_board('XX\nX')
        with self.assertRaises(ValueError):
            str_to_board('X0\n--')


class TestConsoleDisplay(unittest.TestCase):

    def test_show_plain(self):
        out = io.StringIO()
        ConsoleDisplay(stream=out, clear=False).show(str_to_board('X-\n-X'))
        self.assertEqual('X-\n-X\n', out.getvalue())

    def test_show_clears_and_titles(self):
        out = io.StringIO()
        ConsoleDisplay(stream=out).show(str_to_board('X-\n-X'), 'Generation 4')
        self.assertEqual(CLEAR_SCREEN + 'Generation 4\nX-\n-X\n', out.getvalue())


class TestPlotDisplay(unittest.TestCase):

    def test_show_updates_image(self):
        display = PlotDisplay(rest=0.001)
        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            display.show(str_to_board('X-\n--\n--'))
            display.show(str_to_board('--\n--\n-X'), 'Generation 1')
        data = np.asarray(display._im.get_array())
        self.assertEqual((3, 2), data.shape)
        self.assertEqual(1.0, data[2, 1])
        self.assertEqual(0.0, data[0, 0])
        display.close()


if __name__ == "__main__":
    unittest.main()
