import os
from geom import Rect, Point
from color import default_pairs

os.environ.setdefault('ESCDELAY', '25')
import curses


class Screen:
    def __init__(self):
        self._scr = curses.initscr()
        curses.flushinp()
        curses.noecho()
        curses.raw()
        self._scr.keypad(True)
        my, mx = self._scr.getmaxyx()
        self._rect = Rect(0, 0, mx, my)
        self._attrs = {}
        curses.start_color()
        try:
            curses.use_default_colors()
        except curses.error:
            pass
        for pair, (fg, bg, attr) in default_pairs.items():
            try:
                curses.init_pair(pair, fg, bg)
            except curses.error:
                curses.init_pair(pair, fg, curses.COLOR_BLACK)
            self._attrs[pair] = curses.color_pair(pair) | attr
        self._box = '┌─┐││└─┘'

    def width(self):
        return self._rect.width()

    def height(self):
        return self._rect.height()

    def move(self, pos):
        if not isinstance(pos, Point):
            pos = Point(pos)
        if self._rect.is_point_inside(pos):
            self._scr.move(pos.y, pos.x)
            return True
        return False

    @staticmethod
    def cursor(state):
        try:
            curses.curs_set(1 if state else 0)
        except curses.error:
            pass

    def write(self, text, color):
        try:
            self._scr.addstr(text, self._attrs.get(color, 0))
        except curses.error:
            # Writing the bottom right cell moves the cursor off screen
            pass

    def draw_frame(self, rect: Rect, color: int):
        box = self._box
        self.move(rect.pos)
        self.write(box[0] + box[1] * (rect.width() - 2) + box[2], color)
        for y in range(rect.pos.y + 1, rect.bottom() - 1):
            self.move(Point(rect.pos.x, y))
            self.write(box[3], color)
            self.move(Point(rect.right() - 1, y))
            self.write(box[4], color)
        self.move(Point(rect.pos.x, rect.bottom() - 1))
        self.write(box[5] + box[6] * (rect.width() - 2) + box[7], color)

    def draw_frame_text(self, pos: Point, text: str, color: int):
        self.move(pos)
        self.write(f' {text} ', color)

    def refresh(self):
        self._scr.refresh()

    def getkey(self):
        try:
            return self._scr.getkey()
        except curses.error:
            return None
        except KeyboardInterrupt:
            return chr(3)

    def close(self):
        curses.noraw()
        self._scr.keypad(False)
        curses.echo()
        curses.endwin()
        self._scr = None
