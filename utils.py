import itertools
import threading
from wcwidth import wcswidth, wcwidth


def ctrl(key):
    return chr(ord(key) - ord('A') + 1)


def display_width(text: str) -> int:
    w = wcswidth(text)
    # Non-printable characters make wcswidth give up
    if w < 0:
        return len(text)
    return w


def clip_to_width(text: str, width: int):
    used = 0
    end = 0
    for c in text:
        w = max(0, wcwidth(c) or 0)
        if used + w > width:
            break
        used += w
        end += 1
    return text[0:end], used


def fit_text(text, width):
    if len(text) > width:
        return text[0:width]
    if len(text) < width:
        return text + ' ' * (width - len(text))
    return text


def call_by_name(obj, func_name, *args):
    if hasattr(obj, func_name):
        f = getattr(obj, func_name)
        f(*args)
        return True
    return False


_id_counter = itertools.count()
_id_lock = threading.Lock()


def next_component_id() -> int:
    with _id_lock:
        return next(_id_counter)
