import random


def clamp(n, lo, hi):
    return max(lo, min(hi, n))


def circle_rect_overlap(rx, ry, rw, rh, cx, cy, r):
    # nearest point of the rect to the circle center
    px = clamp(cx, rx, rx + rw)
    py = clamp(cy, ry, ry + rh)

    dx = cx - px
    dy = cy - py
    return dx*dx + dy*dy <= r*r


def range_random(lo, hi, rng=None):
    """Uniform value in [lo, hi). Uses the module-level generator unless rng is given."""
    rng = rng or random
    return lo + rng.random() * (hi - lo)
