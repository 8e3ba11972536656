import curses


class Color:
    TEXT = 1
    SELECTED = 2
    BORDER = 3
    BORDER_HIGHLIGHT = 4
    DIM = 5
    INVERSE = 6


# (foreground, background, extra attributes)
default_pairs = {
    Color.TEXT: (curses.COLOR_WHITE, -1, 0),
    Color.SELECTED: (curses.COLOR_WHITE, curses.COLOR_BLACK, curses.A_BOLD | curses.A_REVERSE),
    Color.BORDER: (curses.COLOR_WHITE, -1, curses.A_DIM),
    Color.BORDER_HIGHLIGHT: (curses.COLOR_WHITE, -1, curses.A_BOLD),
    Color.DIM: (curses.COLOR_WHITE, -1, curses.A_DIM),
    Color.INVERSE: (curses.COLOR_WHITE, -1, curses.A_REVERSE),
}
