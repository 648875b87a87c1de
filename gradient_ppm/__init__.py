from gradient_ppm.colour import Colour
from gradient_ppm.image import (
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    MAX_VAL,
    generate_gradient,
    pixel_colour,
    write_ppm_image,
)

__all__ = [
    "Colour",
    "IMAGE_HEIGHT",
    "IMAGE_WIDTH",
    "MAX_VAL",
    "generate_gradient",
    "pixel_colour",
    "write_ppm_image",
]
