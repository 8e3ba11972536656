import config
from color import Color
from data_types import ListOptions
from utils import display_width
from widgets.list_controller import ListController
from widgets.surface import ListSurface, Row


def make_surface(height=7):
    return ListSurface.from_options(ListOptions(width=30, height=height, left=2, top=1, label='heap'))


def test_window_from_options():
    surface = make_surface()
    win = surface.get_window()
    assert win.get_title() == 'heap'
    assert win.get_rect().pos.x == 2
    assert win.get_rect().pos.y == 1
    assert win.width() == 28
    assert win.height() == 5


def test_row_segments():
    row = Row(('...', Color.DIM), 'tail')
    assert row.text == '...tail'
    assert row.segments == [('...', Color.DIM), ('tail', Color.TEXT)]


def test_item_operations():
    surface = make_surface()
    for text in ('a', 'b', 'c'):
        surface.push_item(Row(text))
    surface.replace_item(1, Row('B'))
    surface.replace_item(9, Row('ignored'))
    surface.select(2)
    surface.pop_item()
    assert [str(row) for row in surface.items] == ['a', 'B']
    assert surface.cur == 1
    surface.clear_items()
    assert surface.items == []
    assert surface.cur == 0


def test_selection_stays_visible():
    surface = make_surface(height=5)
    for i in range(20):
        surface.push_item(Row(str(i)))
    surface.select(10)
    assert surface.offset == 8
    surface.select(3)
    assert surface.offset == 3
    surface.select(4)
    assert surface.offset == 3


def test_border_focus_follows_controller():
    surface = make_surface()
    lst = ListController(['x'], surface=surface)
    lst.focus()
    assert surface.get_window().is_focused()
    assert surface.get_window().border_color() == Color.BORDER_HIGHLIGHT
    lst.lose_focus()
    assert surface.get_window().border_color() == Color.BORDER


def test_controller_builds_surface_from_options():
    lst = ListController(['one', 'two'], options=ListOptions(40, 10, 0, 0, 'objects'))
    assert isinstance(lst.surface, ListSurface)
    assert [str(row) for row in lst.surface.items] == ['one', 'two']
    assert lst.surface.get_window().get_title() == 'objects'


class ScreenRecorder:
    def __init__(self):
        self.y = None
        self.lines = {}

    def move(self, pos):
        self.y = pos.y
        self.lines.setdefault(self.y, '')

    def write(self, text, color):
        self.lines[self.y] += text

    def draw_frame(self, rect, color):
        pass

    def draw_frame_text(self, pos, text, color):
        pass


def test_render_clips_by_columns(monkeypatch):
    screen = ScreenRecorder()
    monkeypatch.setattr(config, 'app', screen)
    surface = ListSurface.from_options(ListOptions(width=8, height=4))
    surface.push_item(Row('日本語日本語日本語'))
    surface.push_item(Row(('...', Color.DIM), 'abcdefghij'))
    surface.render()
    assert screen.lines[1] == '日本語'
    assert screen.lines[2] == '...abc'
    assert all(display_width(line) <= 6 for line in screen.lines.values())


def test_render_pads_short_rows(monkeypatch):
    screen = ScreenRecorder()
    monkeypatch.setattr(config, 'app', screen)
    surface = ListSurface.from_options(ListOptions(width=8, height=4))
    surface.push_item(Row('日本'))
    surface.render()
    assert screen.lines[1] == '日本  '
    assert screen.lines[2] == ' ' * 6
