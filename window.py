from geom import Rect, Point
from config import get_app
from color import Color
from data_types import ListOptions


class Window:
    def __init__(self, rect: Rect):
        self.rect = rect
        self._border = self.rect.height() > 2
        self._focused = False
        self._title = ''

    @staticmethod
    def from_options(options: ListOptions):
        win = Window(Rect(options.left, options.top, options.width, options.height))
        win.set_title(options.label)
        return win

    def is_border(self) -> bool:
        return self._border

    def disable_border(self):
        self._border = False

    def set_focused(self, state: bool):
        self._focused = state

    def is_focused(self) -> bool:
        return self._focused

    def border_color(self) -> int:
        return Color.BORDER_HIGHLIGHT if self._focused else Color.BORDER

    def set_title(self, title: str):
        self._title = title

    def get_title(self) -> str:
        return self._title

    def set_rect(self, rect: Rect):
        self.rect = rect

    def get_rect(self) -> Rect:
        return self.rect

    def width(self) -> int:
        w = self.rect.width()
        return w - 2 if self._border else w

    def height(self) -> int:
        h = self.rect.height()
        return h - 2 if self._border else h

    def set_cursor(self, *args):
        p = Point(*args)
        if self._border:
            p = p + Point(1, 1)
        get_app().move(self.rect.pos + p)

    @staticmethod
    def text(s: str, color: int):
        get_app().write(s, color)

    def render(self):
        if self._border:
            color = self.border_color()
            get_app().draw_frame(self.rect, color)
            if self._title:
                get_app().draw_frame_text(self.rect.pos + Point(1, 0), self._title, color)
