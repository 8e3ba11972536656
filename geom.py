class Point:
    def __init__(self, *args):
        if len(args) == 2:
            self.x, self.y = args
        elif len(args) == 1 and isinstance(args[0], Point):
            self.x = args[0].x
            self.y = args[0].y
        elif len(args) == 1 and isinstance(args[0], tuple):
            self.x, self.y = args[0]
        else:
            raise TypeError(f"Invalid point init: {args}")

    def __add__(self, p):
        if not isinstance(p, Point):
            p = Point(p)
        return Point(self.x + p.x, self.y + p.y)


class Rect:
    def __init__(self, x, y, w, h):
        self.pos = Point(x, y)
        self.size = Point(w, h)

    def width(self):
        return self.size.x

    def height(self):
        return self.size.y

    def right(self):
        return self.pos.x + self.size.x

    def bottom(self):
        return self.pos.y + self.size.y

    def is_point_inside(self, p):
        if not isinstance(p, Point):
            p = Point(p)
        return self.pos.x <= p.x < self.right() and self.pos.y <= p.y < self.bottom()
