# Run Conway's Game of Life in the terminal until interrupted.

# BEGIN USER SETTINGS

board_width = 20
board_height = 20
frame_ms = 500            # Pause between two generations
rand_seed = None          # Set an integer to replay the same board
max_generations = None    # None runs until Ctrl-C
use_plot = False          # If True, draw in a matplotlib window instead
log_dir = None            # If None, log to stderr

# END USER SETTINGS


import logging
import time
from lifelib.conwaylife import new_engine
from lifelib.display import ConsoleDisplay, PlotDisplay
from lifelib.logutil import init_game_log, timing


def run_generations(engine, display, generations = None, frame_ms = 500, sleep = time.sleep):
    """ Render, step and wait, generations times or forever if None.
    Return the number of generations stepped.
    """
    done = 0
    while generations is None or done < generations:
        display.show(engine.snapshot(),
                     'Generation {}  Population {}'.format(engine.generation, engine.population()))
        engine.step()
        done += 1
        sleep(frame_ms / 1000)
    return done


def main():
    init_game_log('Terminal game of life', lvl = logging.INFO, top_dir = log_dir)
    engine = new_engine(board_width, board_height, seed = rand_seed)
    display = PlotDisplay(rest = frame_ms / 1000) if use_plot else ConsoleDisplay()
    # PlotDisplay already pauses while it draws.
    sleep = (lambda sec: None) if use_plot else time.sleep
    timing()
    try:
        run_generations(engine, display, max_generations, frame_ms, sleep)
    except KeyboardInterrupt:
        pass
    finally:
        display.close()
    logging.critical('Stopped after {} generations with {} live cells in {}.'.format(
        engine.generation, engine.population(), timing()))


if __name__ == "__main__":
    main()
