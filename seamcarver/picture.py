"""
Picture: a mutable RGB pixel grid.

Pixels are stored as a uint8 tensor (3, H, W) and addressed by (x, y),
column first. Reading and writing image files is left to Pillow.
"""

import numpy as np
import torch
from PIL import Image
from typing import Tuple


class Picture:
    """
    A width x height grid of RGB pixels.

    Pictures own their storage: constructors and accessors copy, so two
    Picture objects never share a tensor.
    """

    def __init__(self, width: int, height: int):
        """Create a black picture."""
        if width < 1 or height < 1:
            raise ValueError(f"Picture must be at least 1x1, got {width}x{height}")
        self._pixels = torch.zeros(3, height, width, dtype=torch.uint8)

    @classmethod
    def from_tensor(cls, pixels: torch.Tensor) -> 'Picture':
        """
        Build a picture from a (3, H, W) tensor.

        Float tensors are taken to be in [0, 1] (the usual torch image
        convention) and are scaled to 0-255; integer tensors are used as is.
        """
        if pixels is None:
            raise ValueError("Pixels must not be None")
        if pixels.dim() != 3 or pixels.shape[0] != 3:
            raise ValueError(f"Expected a (3, H, W) tensor, got shape {tuple(pixels.shape)}")

        if pixels.dtype.is_floating_point:
            pixels = (pixels * 255).round()
        pixels = pixels.clamp(0, 255).to(torch.uint8)

        _, H, W = pixels.shape
        picture = cls(W, H)
        picture._pixels = pixels.clone().contiguous()
        return picture

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Picture':
        """Build a picture from an (H, W, 3) uint8 array."""
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) array, got shape {array.shape}")
        return cls.from_tensor(torch.from_numpy(np.ascontiguousarray(array)).permute(2, 0, 1))

    @classmethod
    def open(cls, path: str) -> 'Picture':
        """Load an image file as RGB."""
        img = Image.open(path).convert('RGB')
        return cls.from_array(np.array(img, dtype=np.uint8))

    def save(self, path: str):
        """Save picture to an image file; the format follows the extension."""
        Image.fromarray(self.to_array()).save(path)

    def to_array(self) -> np.ndarray:
        """Copy of the pixels as an (H, W, 3) uint8 array."""
        return self._pixels.permute(1, 2, 0).numpy().copy()

    def to_tensor(self) -> torch.Tensor:
        """Copy of the pixels as a (3, H, W) uint8 tensor."""
        return self._pixels.clone()

    @property
    def width(self) -> int:
        return self._pixels.shape[2]

    @property
    def height(self) -> int:
        return self._pixels.shape[1]

    def _check_coordinates(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(
                f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} picture")

    def get(self, x: int, y: int) -> Tuple[int, int, int]:
        """RGB colour of the pixel at column x, row y."""
        self._check_coordinates(x, y)
        r, g, b = self._pixels[:, y, x].tolist()
        return r, g, b

    def set(self, x: int, y: int, rgb: Tuple[int, int, int]):
        """Set the pixel at column x, row y."""
        self._check_coordinates(x, y)
        if len(rgb) != 3 or any(not 0 <= c <= 255 for c in rgb):
            raise ValueError(f"Colour must be three channels in [0, 255], got {rgb}")
        self._pixels[:, y, x] = torch.tensor(rgb, dtype=torch.uint8)

    def copy(self) -> 'Picture':
        return Picture.from_tensor(self._pixels)

    def __eq__(self, other):
        if not isinstance(other, Picture):
            return NotImplemented
        return torch.equal(self._pixels, other._pixels)

    def __repr__(self):
        return f"Picture(width={self.width}, height={self.height})"
