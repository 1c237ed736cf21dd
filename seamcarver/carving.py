"""
Seam carver: owns a picture and its energy field and shrinks them one
seam at a time.

Horizontal seams are handled by transposing both grids, running the
vertical-seam code, and transposing back.
"""

import logging
from contextlib import contextmanager
from typing import Optional, Tuple

import torch

from .energy import BORDER_ENERGY, dual_gradient_energy, energy_at
from .picture import Picture
from .seam import SeamLike, dp_seam, remove_seam, transposed, validate_seam

logger = logging.getLogger(__name__)

ORDERS = ('vertical-first', 'horizontal-first', 'alternate')


class SeamCarver:
    """
    Content-aware shrinking of a single picture.

    The picture (3, H, W) and energy field (H, W) are always replaced
    together, and only _remove_seam replaces them. Every public method
    leaves both in the original orientation.
    """

    def __init__(self, picture: Picture, border_energy: float = BORDER_ENERGY):
        if picture is None:
            raise ValueError("Picture must not be None")

        self._pixels = picture.to_tensor()
        self._border_energy = border_energy
        self._energy = dual_gradient_energy(self._pixels, border_energy)
        self._transposed = False

        logger.debug("SeamCarver created for %dx%d picture", self.width, self.height)

    @property
    def width(self) -> int:
        return self._pixels.shape[2]

    @property
    def height(self) -> int:
        return self._pixels.shape[1]

    def picture(self) -> Picture:
        """Independent copy of the current picture."""
        return Picture.from_tensor(self._pixels)

    def energy(self, x: int, y: int) -> float:
        """Energy of the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(
                f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} picture")
        return self._energy[y, x].item()

    def energy_map(self) -> torch.Tensor:
        """Copy of the current energy field (H, W)."""
        return self._energy.clone()

    def find_vertical_seam(self) -> torch.Tensor:
        """Column index per row (H,) of the minimum-energy vertical seam."""
        return dp_seam(self._energy)

    def find_horizontal_seam(self) -> torch.Tensor:
        """Row index per column (W,) of the minimum-energy horizontal seam."""
        # A vertical seam of the transposed grid, read back in the original
        # orientation, is a horizontal seam with the same indices
        with self._horizontal():
            return dp_seam(self._energy)

    def remove_vertical_seam(self, seam: SeamLike):
        seam = validate_seam(seam, self.height, self.width)
        if self.width <= 1:
            raise ValueError("Cannot remove a vertical seam from a picture of width 1")
        self._remove_seam(seam)

    def remove_horizontal_seam(self, seam: SeamLike):
        seam = validate_seam(seam, self.width, self.height)
        if self.height <= 1:
            raise ValueError("Cannot remove a horizontal seam from a picture of height 1")
        with self._horizontal():
            self._remove_seam(seam)

    def _remove_seam(self, seam: torch.Tensor):
        """Remove a validated vertical seam from both grids."""
        pixels = remove_seam(self._pixels, seam)
        energy = remove_seam(self._energy, seam)
        H, W = energy.shape

        # Only the pixels that now border the removed one have new neighbours
        rows = torch.arange(H)
        has_left = seam > 0
        has_right = seam < W
        xs = torch.cat([seam[has_left] - 1, seam[has_right]])
        ys = torch.cat([rows[has_left], rows[has_right]])
        energy[ys, xs] = energy_at(pixels, xs, ys, self._border_energy)

        self._pixels, self._energy = pixels, energy
        logger.debug("Removed seam, picture is now %dx%d (transposed=%s)",
                     W, H, self._transposed)

    def _transpose(self):
        self._pixels = transposed(self._pixels)
        self._energy = transposed(self._energy)
        self._transposed = not self._transposed

    @contextmanager
    def _horizontal(self):
        """Work on the transposed grids, restoring orientation on exit."""
        assert not self._transposed, "Grids are already transposed"
        self._transpose()
        try:
            yield
        finally:
            self._transpose()


def carve_picture(picture: Picture, width: Optional[int] = None,
                  height: Optional[int] = None,
                  order: str = 'vertical-first') -> Picture:
    """
    Shrink a picture to the target size by removing seams.

    Args:
        picture: Picture to carve (left unchanged)
        width: Target width, 1 <= width <= picture.width (None keeps it)
        height: Target height, 1 <= height <= picture.height (None keeps it)
        order: 'vertical-first', 'horizontal-first' or 'alternate'

    Returns:
        Carved picture
    """
    if picture is None:
        raise ValueError("Picture must not be None")
    if order not in ORDERS:
        raise ValueError(f"Invalid order: {order!r}. Must be one of {ORDERS}.")

    width = picture.width if width is None else width
    height = picture.height if height is None else height
    if not 1 <= width <= picture.width:
        raise ValueError(f"Target width {width} must be in [1, {picture.width}]")
    if not 1 <= height <= picture.height:
        raise ValueError(f"Target height {height} must be in [1, {picture.height}]")

    carver = SeamCarver(picture)

    def carve_vertical():
        carver.remove_vertical_seam(carver.find_vertical_seam())

    def carve_horizontal():
        carver.remove_horizontal_seam(carver.find_horizontal_seam())

    if order == 'alternate':
        while carver.width > width or carver.height > height:
            if carver.width > width:
                carve_vertical()
            if carver.height > height:
                carve_horizontal()
    else:
        steps = [(carve_vertical, lambda: carver.width > width),
                 (carve_horizontal, lambda: carver.height > height)]
        if order == 'horizontal-first':
            steps.reverse()
        for carve, remaining in steps:
            while remaining():
                carve()

    logger.debug("Carved %dx%d picture to %dx%d",
                 picture.width, picture.height, carver.width, carver.height)
    return carver.picture()


def draw_seam(picture: Picture, seam: SeamLike, direction: str = 'vertical',
              color: Tuple[int, int, int] = (255, 0, 0)) -> Picture:
    """Copy of the picture with the seam painted in the given colour."""
    img_vis = picture.copy()

    if direction == 'vertical':
        seam = validate_seam(seam, picture.height, picture.width)
        for y, x in enumerate(seam.tolist()):
            img_vis.set(x, y, color)
    elif direction == 'horizontal':
        seam = validate_seam(seam, picture.width, picture.height)
        for x, y in enumerate(seam.tolist()):
            img_vis.set(x, y, color)
    else:
        raise ValueError(f"Invalid direction: {direction}")

    return img_vis
