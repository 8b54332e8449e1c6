import logging
import math
from typing import NamedTuple

logger = logging.getLogger(__name__)


class ResizeTarget(NamedTuple):
    width: int
    height: int


def _round(value: float) -> int:
    """Round half up, clamped to at least one pixel."""
    return max(1, math.floor(value + 0.5))


def plan_size(
    source_width: int,
    source_height: int,
    max_width: int = 0,
    max_height: int = 0,
    width_multiplier: float = 1.0,
) -> ResizeTarget:
    """Fit the source into the bounds keeping its aspect ratio, then widen for the terminal.

    A bound of 0 means unbounded. The multiplier is applied after fitting so the
    result may be wider than ``max_width``: the bound limits sampling, not columns.
    """
    if source_width <= 0 or source_height <= 0:
        raise ValueError(f"Image must not be empty: {source_width}x{source_height}")

    mw = max_width if max_width > 0 else source_width
    mh = max_height if max_height > 0 else source_height
    ratio = source_width / source_height

    if mw / ratio > mh:
        width, height = _round(mh * ratio), mh
    else:
        width, height = mw, _round(mw / ratio)

    target = ResizeTarget(_round(width * width_multiplier), height)
    logger.debug(
        "Planned %dx%d -> %dx%d (bounds %dx%d, multiplier %g)",
        source_width,
        source_height,
        target.width,
        target.height,
        max_width,
        max_height,
        width_multiplier,
    )
    return target
