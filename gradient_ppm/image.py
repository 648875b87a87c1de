import sys

import numpy as np

from gradient_ppm.colour import Colour

IMAGE_WIDTH = 256
IMAGE_HEIGHT = 256
MAX_VAL = 255


def pixel_colour(i, j, width=IMAGE_WIDTH, height=IMAGE_HEIGHT):
    """Colour of the pixel at column i, row j."""
    return Colour(i / (width - 1), j / (height - 1), 0.0)


def generate_gradient(width=IMAGE_WIDTH, height=IMAGE_HEIGHT):
    """
    Build the gradient image as a (height, width, 3) uint8 array.

    Red grows from left to right, green from top to bottom, blue stays at 0.
    """
    r = np.arange(width) / (width - 1)
    g = np.arange(height) / (height - 1)
    img = np.zeros((height, width, 3), dtype=np.uint8)
    # astype truncates toward zero, same as int()
    img[:, :, 0] = (255.999 * r).astype(np.uint8)[np.newaxis, :]
    img[:, :, 1] = (255.999 * g).astype(np.uint8)[:, np.newaxis]
    return img


def write_ppm_image(f, img, max_val=MAX_VAL, log=None):
    """
    Write an image as a PPM (P3) file, one pixel per line.

    Args:
        f: Text stream to write to.
        img: Array of shape (height, width, 3).
        max_val (int): Maximum color value written in the header.
        log: Optional text stream for progress messages.
    """
    height, width = img.shape[:2]
    f.write(f"P3\n{width} {height}\n{max_val}\n")
    for y in range(height):
        if log is not None:
            print(f"\rScanlines remaining: {height - y} ", end="", file=log, flush=True)
        rows = (" ".join(map(str, px)) for px in img[y].tolist())
        f.write("\n".join(rows) + "\n")
    if log is not None:
        print("\rDone.                    ", file=log)


def main():
    img = generate_gradient(IMAGE_WIDTH, IMAGE_HEIGHT)
    write_ppm_image(sys.stdout, img, MAX_VAL, log=sys.stderr)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
