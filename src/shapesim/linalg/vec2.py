import math


class Vec2:
    def __init__(self, x=0.0, y=0.0):
        self.x, self.y = float(x), float(y)

    def mag(self):
        return math.sqrt(self.x**2 + self.y**2)

    def norm(self):
        mag = self.mag()
        if mag > 0:
            return Vec2(
                self.x / mag,
                self.y / mag,
            )
        return self

    def distance_to(self, other):
        return (other - self).mag()

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Vec2({self.x!r}, {self.y!r})"

    def clamp(self, low, high):
        # Per-axis bounds; low wins if the range is inverted.
        return Vec2(
            max(low.x, min(high.x, self.x)),
            max(low.y, min(high.y, self.y)),
        )

    def to_tuple(self):
        return (self.x, self.y)

    @classmethod
    def random_in(cls, low, high, rng):
        return cls(
            low.x + rng() * (high.x - low.x),
            low.y + rng() * (high.y - low.y),
        )
