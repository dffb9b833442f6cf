"""
Default settings for termclock.

Command line options are laid over a copy of CONFIG by load_config().
"""

import copy
import os

from .modes import MODE_NAMES

KEY_ESC = 27
KEY_TAB = 9

CONFIG = {
    'size': 'quadrant',
    # Poll timeout in milliseconds; also the slowest redraw rate
    'interval_ms': 250,
    'mouse': True,
    'keys': {
        'quit': (ord('q'), ord('Q'), KEY_ESC),
        'advance': (KEY_TAB, ord(' ')),
        'digital': (ord('a'), ord('A'), ord('d'), ord('D')),
    },
    'colors': {
        'second': 'muted',
        'minute': 'default',
        'hour': 'accent',
    },
    'hint': ' exit: <q> or <Esc> ',
    'log_file': None,
    'verbosity': 0,
}


def default_size():
    """Size from TERMCLOCK_SIZE when it names a valid mode."""
    size = os.environ.get('TERMCLOCK_SIZE', '').strip().lower()
    return size if size in MODE_NAMES else CONFIG['size']


def load_config(args=None):
    """Return a copy of CONFIG with parsed command line options applied."""
    config = copy.deepcopy(CONFIG)
    config['size'] = default_size()
    if args is None:
        return config

    if getattr(args, 'size', None):
        config['size'] = args.size
    if getattr(args, 'interval', None) is not None:
        config['interval_ms'] = max(10, args.interval)
    if getattr(args, 'no_mouse', False):
        config['mouse'] = False
    if getattr(args, 'log_file', None):
        config['log_file'] = args.log_file
    config['verbosity'] = getattr(args, 'verbose', 0) or 0
    return config
