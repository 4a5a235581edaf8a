"""Convert raster images into styled pixels.

Each cell shows two vertical image pixels using the upper half block
(``▀``): the foreground is the top pixel and the background the bottom one,
both in 24-bit color.

Example:
    from clige.imaging import load_text

    logo = load_text("logo.png", width=40)
    canvas.append(logo)
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from PIL import Image, ImageEnhance, ImageFilter

from clige.core.color import Color
from clige.core.constants import LOWER_HALF, UPPER_HALF
from clige.core.pixel import Pixel
from clige.core.style import Style
from clige.elements.text import Text

RGB = tuple[int, int, int]


def _scale(img: Image.Image, width: int, max_height: int | None) -> Image.Image:
    """Downscale to ``width`` columns, keeping aspect and fitting ``max_height`` cells."""
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")
    aspect_ratio = img.height / img.width
    new_width = width
    new_height = max(1, int(width * aspect_ratio))

    # Two image rows per cell
    if max_height is not None and (new_height + 1) // 2 > max_height:
        new_height = max(1, max_height * 2)
        new_width = max(1, int(new_height / aspect_ratio))

    return img.resize((new_width, new_height), Image.Resampling.LANCZOS)


def _cell(top: RGB | None, bottom: RGB | None) -> Pixel:
    """Pixel for a pair of image pixels; None marks a transparent pixel."""
    if bottom is None:
        return Pixel() if top is None else Pixel(UPPER_HALF, Style.fg(Color.rgb(*top)))
    if top is None:
        return Pixel(LOWER_HALF, Style.fg(Color.rgb(*bottom)))
    return Pixel(UPPER_HALF, Style(Color.rgb(*top), Color.rgb(*bottom)))


def image_to_pixels(
    img: Image.Image,
    width: int,
    *,
    max_height: int | None = None,
    sharpen: bool = True,
    color_boost: float = 1.5,
    contrast_boost: float = 1.2,
    transparent: bool = False,
    alpha_threshold: int = 128,
) -> list[list[Pixel]]:
    """
    Convert an image to rows of half-block pixels.

    Args:
        img: Source image (any mode Pillow can convert to RGB/RGBA)
        width: Target width in cells
        max_height: Optional limit on the number of rows returned
        sharpen: Apply unsharp mask to restore crispness after downscale
        color_boost: Saturation multiplier
        contrast_boost: Contrast multiplier
        transparent: Treat pixels with alpha below ``alpha_threshold`` as
            the terminal default background
        alpha_threshold: Alpha cut-off used when ``transparent`` is set

    Returns:
        A list of rows, each ``width`` pixels long (narrower when the
        height limit forced a smaller scale).
    """
    has_alpha = transparent and img.mode in ("RGBA", "LA", "PA")
    img = img.convert("RGBA" if has_alpha else "RGB")
    img = _scale(img, width, max_height)

    if sharpen:
        img = img.filter(ImageFilter.UnsharpMask(radius=1.0, percent=200, threshold=5))
    # Enhancers do not accept RGBA; apply them to the color bands only
    if color_boost != 1.0 or contrast_boost != 1.0:
        alpha = img.getchannel("A") if has_alpha else None
        rgb = img.convert("RGB")
        if color_boost != 1.0:
            rgb = ImageEnhance.Color(rgb).enhance(color_boost)
        if contrast_boost != 1.0:
            rgb = ImageEnhance.Contrast(rgb).enhance(contrast_boost)
        if alpha is not None:
            rgb.putalpha(alpha)
        img = rgb

    source = img.load()

    def sample(x: int, y: int) -> RGB | None:
        if y >= img.height:
            return None
        value = source[x, y]
        if has_alpha:
            r, g, b, a = value
            return None if a < alpha_threshold else (r, g, b)
        r, g, b = value[:3]
        return (r, g, b)

    return [
        [_cell(sample(x, y), sample(x, y + 1)) for x in range(img.width)]
        for y in range(0, img.height, 2)
    ]


def load_text(
    path: Union[str, Path],
    width: int,
    position: tuple[int, int] = (0, 0),
    **kwargs,
) -> Text:
    """
    Load an image file as a Text view, one wrapped row per cell row.

    Keyword arguments are passed to ``image_to_pixels``.
    """
    with Image.open(Path(path)) as img:
        rows = image_to_pixels(img, width, **kwargs)
    if not rows:
        return Text([], 1, *position)
    pixels = [pixel for row in rows for pixel in row]
    return Text(pixels, len(rows[0]), *position)
