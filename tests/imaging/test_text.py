"""Tests for grid label drawing helpers."""

from PIL import Image, ImageDraw

from domain.models import LabelStyle
from imaging.text import draw_grid_label, label_box, load_grid_font
from shared.constants import CANVAS_BG_COLOR


def _canvas(size=(120, 60)):
    img = Image.new('RGB', size, CANVAS_BG_COLOR)
    return img, ImageDraw.Draw(img)


class TestLoadGridFont:
    """Tests for load_grid_font."""

    def test_cached(self):
        """Same size returns the same font object."""
        assert load_grid_font(14) is load_grid_font(14)

    def test_usable_for_bbox(self):
        """Loaded font measures text."""
        _, draw = _canvas()
        left, top, right, bottom = draw.textbbox(
            (10, 10), '31U', font=load_grid_font(14)
        )
        assert right > left
        assert bottom > top


class TestLabelBox:
    """Tests for label_box."""

    def test_inside_image(self):
        """Box surrounds the anchor point."""
        _, draw = _canvas()
        style = LabelStyle(anchor='mm')
        box = label_box(draw, (60, 30), '12', load_grid_font(12), style, (120, 60))
        assert box is not None
        left, top, right, bottom = box
        assert 0 <= left < 60 < right <= 120
        assert 0 <= top < 30 < bottom <= 60

    def test_clipped_to_image(self):
        """Box is cut at the image border."""
        _, draw = _canvas()
        style = LabelStyle(anchor='mm')
        box = label_box(draw, (0, 0), '12', load_grid_font(12), style, (120, 60))
        assert box[0] == 0
        assert box[1] == 0

    def test_outside_image(self):
        """Label entirely off the image has no box."""
        _, draw = _canvas()
        style = LabelStyle(anchor='lt')
        box = label_box(draw, (500, 500), '12', load_grid_font(12), style, (120, 60))
        assert box is None


class TestDrawGridLabel:
    """Tests for draw_grid_label."""

    def test_background_drawn(self):
        """Background colour appears under the label."""
        img, draw = _canvas()
        style = LabelStyle(anchor='mm', background=(255, 255, 0))
        draw_grid_label(draw, (60, 30), '31U', style, img.size)
        colors = {c for _, c in img.getcolors(maxcolors=120 * 60)}
        assert (255, 255, 0) in colors

    def test_text_drawn_without_background(self):
        """Text is drawn when no background is set."""
        img, draw = _canvas()
        style = LabelStyle(anchor='mm', color=(0, 0, 255), outline_width_px=0)
        draw_grid_label(draw, (60, 30), '88', style, img.size)
        assert len(img.getcolors(maxcolors=120 * 60)) > 1
