"""Page sizes and the fit-and-center placement of an image on a page."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

# Page sizes in PDF points (1/72 inch).
LETTER: tuple[float, float] = (612.0, 792.0)
A4: tuple[float, float] = (595.28, 841.89)
LEGAL: tuple[float, float] = (612.0, 1008.0)

DEFAULT_PAGE_SIZE = LETTER

PAGE_SIZES: dict[str, tuple[float, float]] = {
    "letter": LETTER,
    "a4": A4,
    "legal": LEGAL,
}


@dataclass(frozen=True)
class Placement:
    """Where and how large an image is drawn on its page."""

    page_width: float
    page_height: float
    scale: float
    width: float
    height: float
    x: float
    y: float


def fit_image(
    image_width: float,
    image_height: float,
    page_size: tuple[float, float] = DEFAULT_PAGE_SIZE,
) -> Placement:
    """Scale an image uniformly to fit the page and center it.

    The scale factor is the smaller of the two axis ratios, so the image
    fills the page along its binding axis and keeps its aspect ratio.

    Args:
        image_width: Intrinsic image width at unit scale.
        image_height: Intrinsic image height at unit scale.
        page_size: ``(width, height)`` of the page in points.

    Returns:
        The :class:`Placement` of the image on the page.

    Raises:
        ValueError: If any image or page side is not positive.
    """
    page_width, page_height = page_size
    if image_width <= 0 or image_height <= 0:
        raise ValueError(
            f"Image dimensions must be positive, got {image_width}x{image_height}"
        )
    if page_width <= 0 or page_height <= 0:
        raise ValueError(
            f"Page dimensions must be positive, got {page_width}x{page_height}"
        )

    width_ratio = page_width / image_width
    height_ratio = page_height / image_height
    scale = min(width_ratio, height_ratio)

    # The binding side equals the page side exactly; the other never overshoots.
    if width_ratio <= height_ratio:
        width = page_width
        height = min(image_height * scale, page_height)
    else:
        width = min(image_width * scale, page_width)
        height = page_height

    return Placement(
        page_width=page_width,
        page_height=page_height,
        scale=scale,
        width=width,
        height=height,
        x=(page_width - width) / 2,
        y=(page_height - height) / 2,
    )


def layout_for(
    page_size: tuple[float, float],
) -> Callable[[int, int, object], tuple[float, float, float, float]]:
    """Build an img2pdf ``layout_fun`` that places images with :func:`fit_image`.

    img2pdf calls ``layout_fun(imgwidthpx, imgheightpx, ndpi)`` and expects
    ``(pagewidth, pageheight, imgwidth, imgheight)`` in points; it centers
    the image on the page itself. Pixel sizes are used as the intrinsic
    size, so the image resolution metadata does not affect placement.
    """

    def layout_fun(
        imgwidthpx: int, imgheightpx: int, ndpi: object
    ) -> tuple[float, float, float, float]:
        placement = fit_image(imgwidthpx, imgheightpx, page_size)
        return (
            placement.page_width,
            placement.page_height,
            placement.width,
            placement.height,
        )

    return layout_fun
