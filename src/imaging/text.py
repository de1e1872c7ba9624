"""Grid label drawing - font lookup, outlined text, background boxes."""

import logging
import math
from functools import lru_cache

from PIL import ImageDraw, ImageFont

from domain.models import LabelStyle
from shared.constants import GRID_FONT_PATH

logger = logging.getLogger(__name__)

# Отступ подложки вокруг текста (px)
LABEL_BG_PADDING_PX = 3

_SYSTEM_FONTS = (
    # Windows
    'arialbd.ttf',
    'arial.ttf',
    'segoeui.ttf',
    # Linux (абсолютные пути: truetype() не ищет по системным каталогам)
    '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
    '/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf',
    '/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf',
    # macOS
    '/System/Library/Fonts/Helvetica.ttc',
    '/Library/Fonts/Arial.ttf',
)

GridFont = ImageFont.FreeTypeFont | ImageFont.ImageFont


@lru_cache(maxsize=16)
def load_grid_font(font_size: int) -> GridFont:
    """
    Scalable font for grid labels.

    ``GRID_FONT_PATH`` wins when set; otherwise the first system font that
    loads. Pillow's built-in font is the last resort.
    """
    candidates = ((GRID_FONT_PATH,) if GRID_FONT_PATH else ()) + _SYSTEM_FONTS
    for name in candidates:
        try:
            return ImageFont.truetype(name, font_size)
        except OSError:
            logger.debug('Шрифт %s не найден', name)
    logger.warning(
        'Масштабируемый шрифт не найден, используется встроенный (%d px)', font_size
    )
    return ImageFont.load_default(font_size)


def label_box(
    draw: ImageDraw.ImageDraw,
    xy: tuple[float, float],
    text: str,
    font: GridFont,
    style: LabelStyle,
    img_size: tuple[int, int],
) -> tuple[int, int, int, int] | None:
    """
    Background rectangle of a label clipped to the image.

    Returns ``None`` when nothing of it is left inside the image.
    """
    left, top, right, bottom = draw.textbbox(
        xy,
        text,
        font=font,
        anchor=style.anchor,
        stroke_width=style.outline_width_px,
    )
    w, h = img_size
    box = (
        max(0, math.floor(left - LABEL_BG_PADDING_PX)),
        max(0, math.floor(top - LABEL_BG_PADDING_PX)),
        min(w, math.ceil(right + LABEL_BG_PADDING_PX)),
        min(h, math.ceil(bottom + LABEL_BG_PADDING_PX)),
    )
    if box[2] <= box[0] or box[3] <= box[1]:
        return None
    return box


def draw_grid_label(
    draw: ImageDraw.ImageDraw,
    xy: tuple[float, float],
    text: str,
    style: LabelStyle,
    img_size: tuple[int, int],
) -> None:
    """Draw one label: optional background, then stroked text."""
    font = load_grid_font(style.font_size_px)
    if style.background is not None:
        box = label_box(draw, xy, text, font, style, img_size)
        if box is not None:
            draw.rectangle(box, fill=style.background)
    draw.text(
        xy,
        text,
        font=font,
        fill=style.color,
        anchor=style.anchor,
        stroke_width=style.outline_width_px,
        stroke_fill=style.outline_color,
    )
