import numpy as np
import pytest
from PIL import Image

RAMP = " .:-=+*#%@"


class FakeRenderer:
    """Stands in for AAlib: one sampled pixel per character, brighter means denser."""

    instances: list["FakeRenderer"] = []

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.entered = False
        self.closed = False
        self.images = []
        FakeRenderer.instances.append(self)

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, *exc):
        self.closed = True

    @property
    def virtual_size(self):
        return (self.width, self.height)

    def render(self, image):
        self.images.append(image)
        values = np.asarray(image)
        return "".join(RAMP[int(v) * len(RAMP) // 256] for v in values.flat)


@pytest.fixture
def fake_renderer():
    FakeRenderer.instances = []
    return FakeRenderer


@pytest.fixture
def image_file(tmp_path):
    """Write an image to disk and return its path."""

    def make(image, name="image.png"):
        path = tmp_path / name
        image.save(path)
        return path

    return make


@pytest.fixture
def half_and_half():
    """White left half, black right half."""
    width, height = 20, 10
    img = Image.new("RGB", (width, height), (0, 0, 0))
    pixels = img.load()
    for y in range(height):
        for x in range(width // 2):
            pixels[x, y] = (255, 255, 255)
    return img
