from dataclasses import dataclass
from pathlib import Path

DEFAULT_TERM_WIDTH_MUL = 1.8
DEFAULT_BLUR = 0.01


@dataclass(frozen=True)
class Config:
    file: str | Path
    invert: bool = False
    optimize: bool = False
    max_width: int = 0  # 0 = source width
    max_height: int = 0  # 0 = source height
    term_width_mul: float = DEFAULT_TERM_WIDTH_MUL
    blur: float = DEFAULT_BLUR
    info: bool = False
