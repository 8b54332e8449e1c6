from __future__ import annotations

from typing import Callable, Protocol

from PIL import Image


class Renderer(Protocol):
    """Turns a grayscale image into one printable character per text cell.

    Renderers are context managers: native resources are acquired on entry and
    released on exit.
    """

    width: int
    height: int

    @property
    def virtual_size(self) -> tuple[int, int]:
        """Pixel size of the image ``render`` expects."""
        ...

    def render(self, image: Image.Image) -> str:
        """Render an "L" image of ``virtual_size`` to ``width * height`` characters, row-major."""
        ...

    def __enter__(self) -> Renderer: ...

    def __exit__(self, *exc) -> None: ...


RendererFactory = Callable[[int, int], Renderer]
