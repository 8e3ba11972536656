from typing import List, Tuple, Union
from color import Color
from config import get_app
from data_types import ListOptions
from utils import clip_to_width, fit_text
from window import Window

Segment = Tuple[str, int]


class Row:
    # A sequence of (text, color) segments

    def __init__(self, *segments: Union[str, Segment]):
        self.segments: List[Segment] = [(s, Color.TEXT) if isinstance(s, str) else s for s in segments]

    @property
    def text(self) -> str:
        return ''.join(s for s, _ in self.segments)

    def __str__(self):
        return self.text

    def __repr__(self):
        return f'Row({self.text!r})'


class ViewportSurface:
    # Written to by a list controller, never read back

    def push_item(self, row: Row):
        raise NotImplementedError

    def replace_item(self, index: int, row: Row):
        raise NotImplementedError

    def pop_item(self):
        raise NotImplementedError

    def clear_items(self):
        raise NotImplementedError

    def select(self, index: int):
        raise NotImplementedError

    def focus(self):
        pass

    def set_border_focus(self, state: bool):
        pass


class ListSurface(ViewportSurface):
    def __init__(self, win: Window):
        self._window = win
        self.items: List[Row] = []
        self.offset = 0
        self.cur = 0

    @staticmethod
    def from_options(options: ListOptions):
        return ListSurface(Window.from_options(options))

    def get_window(self) -> Window:
        return self._window

    def push_item(self, row: Row):
        self.items.append(row)

    def replace_item(self, index: int, row: Row):
        if 0 <= index < len(self.items):
            self.items[index] = row

    def pop_item(self):
        if self.items:
            self.items.pop()
        self.cur = min(self.cur, max(0, len(self.items) - 1))

    def clear_items(self):
        self.items = []
        self.offset = 0
        self.cur = 0

    def select(self, index: int):
        self.cur = index
        self.scroll()

    def focus(self):
        app = get_app()
        if app is not None:
            app.cursor(False)

    def set_border_focus(self, state: bool):
        self._window.set_focused(state)

    def scroll(self):
        h = max(1, self._window.height())
        y = self.cur - self.offset
        if y < 0:
            self.offset = self.cur
        elif y >= h:
            self.offset = self.cur - h + 1

    def render(self):
        self._window.render()
        w = self._window.width()
        for y in range(self._window.height()):
            i = y + self.offset
            self._window.set_cursor(0, y)
            if i >= len(self.items):
                self._window.text(' ' * w, Color.TEXT)
                continue
            selected = i == self.cur
            used = 0
            for text, color in self.items[i].segments:
                if used >= w:
                    break
                text, columns = clip_to_width(text, w - used)
                self._window.text(text, Color.SELECTED if selected else color)
                used += columns
            if used < w:
                self._window.text(fit_text('', w - used), Color.SELECTED if selected else Color.TEXT)
