import logging

from PIL import Image

from i2a.errors import RenderInitError

logger = logging.getLogger(__name__)


class AalibRenderer:
    """Renderer backed by AAlib's in-memory text driver."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._screen = None

    def __enter__(self) -> "AalibRenderer":
        try:
            import aalib
        except (ImportError, OSError) as e:
            raise RenderInitError(f"couldn't load AAlib: {e}") from e
        try:
            self._screen = aalib.AsciiScreen(width=self.width, height=self.height)
        except Exception as e:
            raise RenderInitError(f"couldn't initialize AAlib for {self.width}x{self.height}") from e
        logger.debug("AAlib screen %dx%d, virtual size %s", self.width, self.height, self.virtual_size)
        return self

    def __exit__(self, *exc) -> None:
        # Dropping the last reference closes the AAlib context
        self._screen = None

    @property
    def virtual_size(self) -> tuple[int, int]:
        if self._screen is None:
            raise RenderInitError("AAlib screen is not initialized")
        width, height = self._screen.virtual_size
        return (int(width), int(height))

    def render(self, image: Image.Image) -> str:
        if self._screen is None:
            raise RenderInitError("AAlib screen is not initialized")
        self._screen.put_image((0, 0), image.convert("L"))
        text = "".join(self._screen.render().splitlines())
        if len(text) != self.width * self.height:
            raise RenderInitError(
                f"AAlib produced {len(text)} characters, expected {self.width * self.height}"
            )
        return text
