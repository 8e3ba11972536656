import atexit
import time
from io import TextIOWrapper
from typing import Optional

import config

Logger: Optional[TextIOWrapper] = None


def open_log():
    global Logger
    if Logger is None:
        Logger = open(config.log_path, 'a')
        atexit.register(close_log)
    return Logger


def close_log():
    global Logger
    if Logger is not None:
        Logger.close()
        Logger = None


def logwrite(s):
    if not config.logging:
        return
    if not isinstance(s, str):
        s = str(s)
    out = open_log()
    out.write(f'{time.strftime("%H:%M:%S")} {s}\n')
    out.flush()
