from dataclasses import dataclass


@dataclass(frozen=True)
class Colour:
    """A pixel colour as three channel ratios in [0.0, 1.0]."""
    r: float
    g: float
    b: float

    def to_255(self):
        # 255.999 keeps a ratio of 1.0 at 255 after truncation
        return int(255.999 * self.r), int(255.999 * self.g), int(255.999 * self.b)

    def ppm_row(self):
        return "%d %d %d" % self.to_255()
