#!/usr/bin/env python3
import os
import sys
import traceback
from typing import List, Optional
import config
import logger
from data_types import KeyEvent, ListOptions, SelectInfo
from screen import Screen
from widgets.list_controller import ListCallbacks, ListController


class AppCallbacks(ListCallbacks):
    def __init__(self, app):
        self._app = app

    def select(self, component_id: int, index: int, content: List[str], select_info: SelectInfo):
        text = self._app.focus.selected_content()
        if text is not None:
            self._app.selected = text
        logger.logwrite(f'list {component_id}: {select_info.key_name} -> {index}')

    def get_focus(self):
        self._app.cursor(False)

    def render(self):
        self._app.render()


class Application(Screen):
    def __init__(self):
        super().__init__()
        self.focus: Optional[ListController] = None
        self.selected: Optional[str] = None
        self.terminating = False

    def show(self, lines: List[str], label: str):
        options = ListOptions(self.width(), self.height() - 1, 0, 0, label)
        self.focus = ListController(lines, AppCallbacks(self), options)
        self.focus.focus()

    def render(self):
        if self.focus is None:
            return
        self.focus.surface.render()
        self.draw_status_bar()
        self.refresh()

    def draw_status_bar(self):
        lst = self.focus
        total = len(lst.content)
        pos = min(lst.list_index + 1, total)
        text = f' {pos}/{total}  loaded {lst.loaded_items()}  ^C copy  ^Q quit'
        self.move((0, self.height() - 1))
        self.write(text[0:self.width() - 1].ljust(self.width() - 1), 0)

    def process_input(self):
        if self.terminating:
            return False
        key = self.getkey()
        if key is None:
            return True
        name = config.key_name(key)
        if name == 'quit':
            self.terminating = True
            return False
        if self.focus is not None:
            self.focus.on_keypress(key, KeyEvent(name))
        return True


def read_lines(path: str) -> List[str]:
    if path and path != '-':
        with open(path, errors='replace') as f:
            return f.read().splitlines()
    lines = sys.stdin.read().splitlines()
    # Keyboard input comes from the terminal once stdin is consumed
    tty = os.open('/dev/tty', os.O_RDONLY)
    os.dup2(tty, 0)
    os.close(tty)
    return lines


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else '-'
    if path == '-' and sys.stdin.isatty():
        sys.stderr.write('usage: termlist FILE\n       command | termlist\n')
        return 2
    try:
        lines = read_lines(path)
    except OSError as e:
        sys.stderr.write(f'termlist: {e}\n')
        return 1
    app = Application()
    config.app = app
    error_report = ''
    try:
        app.show(lines, path if path != '-' else 'stdin')
        app.render()
        while app.process_input():
            app.render()
    except Exception:
        error_report = traceback.format_exc()
    app.close()
    if error_report:
        print(error_report)
        return 1
    if app.selected is not None:
        print(app.selected)
    return 0


if __name__ == '__main__':
    sys.exit(main())
