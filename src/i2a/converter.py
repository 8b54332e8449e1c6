import logging
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Iterator

from PIL import Image, ImageFilter

from i2a.aa import AalibRenderer
from i2a.config import Config
from i2a.engine import RendererFactory
from i2a.errors import DecodeError
from i2a.luminance import aa_colors
from i2a.matrix import TextMatrix
from i2a.planner import plan_size

logger = logging.getLogger(__name__)


@contextmanager
def open_image(path: str | Path) -> Iterator[Image.Image]:
    """Decode an image file, closing it on exit."""
    try:
        image = Image.open(path)
    except (OSError, Image.DecompressionBombError) as e:
        raise DecodeError(path) from e
    try:
        try:
            image.load()
        except (OSError, Image.DecompressionBombError) as e:
            raise DecodeError(path) from e
        if image.width == 0 or image.height == 0:
            raise DecodeError(path, "empty image")
        yield image
    finally:
        image.close()


def resize_image(image: Image.Image, size: tuple[int, int], blur: float = 1.0) -> Image.Image:
    """Lanczos-resample to exactly ``size``.

    ``blur`` scales the filter window: values above 1 soften the result by a
    Gaussian of ``blur - 1`` target pixels, 1 and below leave it unchanged.
    """
    image = image.convert("RGBA")
    if blur > 1:
        radius = (blur - 1) * image.width / size[0]
        image = image.filter(ImageFilter.GaussianBlur(radius))
    return image.resize(size, Image.LANCZOS)


def render_image(
    image: Image.Image,
    config: Config,
    renderer_factory: RendererFactory = AalibRenderer,
) -> TextMatrix:
    target = plan_size(
        image.width,
        image.height,
        config.max_width,
        config.max_height,
        config.term_width_mul,
    )
    with renderer_factory(target.width, target.height) as renderer:
        vwidth, vheight = renderer.virtual_size
        logger.debug("Sampling %dx%d pixels for %dx%d characters", vwidth, vheight, target.width, target.height)
        scaled = resize_image(image, (vwidth, vheight), config.blur)
        gray = Image.fromarray(aa_colors(scaled, invert=config.invert))
        text = renderer.render(gray)

    matrix = TextMatrix.from_text(target.width, target.height, text)
    if config.optimize:
        matrix.optimize()
    return matrix


def convert(config: Config, renderer_factory: RendererFactory = AalibRenderer) -> TextMatrix:
    """Read ``config.file`` and render it to a text matrix."""
    with ExitStack() as stack:
        image = stack.enter_context(open_image(config.file))
        logger.info("Loaded %s (%dx%d, %s)", config.file, image.width, image.height, image.mode)
        return render_image(image, config, renderer_factory)
