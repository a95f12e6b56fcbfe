# Simple logging util.

import logging
import pathlib
import time


def init_game_log(title, lvl = logging.INFO, top_dir = None):
    # top_dir is where gamelife.log goes. Without it, log to stderr.
    if top_dir:
        pathlib.Path(top_dir).mkdir(parents=True, exist_ok=True)
        log_path = str(pathlib.Path(top_dir) / 'gamelife.log')
    else:
        log_path = None
    logging.basicConfig(
        filename = log_path,
        level = lvl,
        format = '%(asctime)s | %(levelname)s | %(message)s')
    msg = 'Game of life [{}] started logging at {}.'.format(
        title, log_path or 'stderr')
    logging.critical(msg)
    return log_path


prev_t = time.time()

def timing():
    global prev_t
    t = time.time()
    t_sec = round(t - prev_t)
    (t_min, t_sec) = divmod(t_sec, 60)
    (t_hour, t_min) = divmod(t_min, 60)
    prev_t = t
    return '{}:{}:{}'.format(t_hour, t_min, t_sec)
