class Bird:
    def __init__(self, x, r, y=260.0):
        self.x = float(x)
        self.r = float(r)
        self.y = float(y)
        self.vy = 0.0
        self.tilt = 0.0
        self.alive = True

        # run-scoped counters
        self.perfect_passes = 0
        self.last_pass_perfect = False

    def reset(self, y):
        self.y = float(y)
        self.vy = 0.0
        self.tilt = 0.0
        self.alive = True
        self.perfect_passes = 0
        self.last_pass_perfect = False


class PipePair:
    __slots__ = ("x", "top_h", "gap", "w", "passed")

    def __init__(self, x, top_h, gap, w):
        self.x = float(x)
        self.top_h = float(top_h)
        self.gap = float(gap)
        self.w = float(w)
        self.passed = False

    @property
    def bottom_y(self):
        return self.top_h + self.gap

    @property
    def right(self):
        return self.x + self.w

    @property
    def gap_mid(self):
        return self.top_h + self.gap / 2

    def is_offscreen(self, margin):
        return self.right < -margin

    def __repr__(self):
        return (f"PipePair(x={self.x:.1f}, top_h={self.top_h:.1f}, "
                f"gap={self.gap:.1f}, w={self.w:.1f}, passed={self.passed})")
