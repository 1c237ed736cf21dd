"""
Content-aware image resizing by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .picture import Picture
from .energy import BORDER_ENERGY, dual_gradient_energy, energy_at, pixel_energy
from .seam import dp_seam, validate_seam, remove_seam, transposed
from .carving import SeamCarver, carve_picture, draw_seam

__all__ = [
    'Picture',
    'BORDER_ENERGY',
    'dual_gradient_energy',
    'energy_at',
    'pixel_energy',
    'dp_seam',
    'validate_seam',
    'remove_seam',
    'transposed',
    'SeamCarver',
    'carve_picture',
    'draw_seam',
]
