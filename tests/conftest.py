"""Shared test fixtures for the seam carver test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarver.picture import Picture


@pytest.fixture
def random_picture():
    """Reproducible 12x9 picture of random colours."""
    torch.manual_seed(42)
    return Picture.from_tensor(torch.randint(0, 256, (3, 9, 12), dtype=torch.uint8))


def make_uniform_picture(W, H, rgb=(120, 60, 200)):
    """Solid-colour picture."""
    pixels = torch.tensor(rgb, dtype=torch.uint8).view(3, 1, 1).expand(3, H, W)
    return Picture.from_tensor(pixels)


def make_striped_picture(W, H, stripe_col, rgb=(255, 255, 255)):
    """Black picture with a single coloured column."""
    pixels = torch.zeros(3, H, W, dtype=torch.uint8)
    pixels[:, :, stripe_col] = torch.tensor(rgb, dtype=torch.uint8).view(3, 1)
    return Picture.from_tensor(pixels)


def make_picture_from_rows(rows):
    """Picture from nested lists rows[y][x] = (r, g, b)."""
    pixels = torch.tensor(rows, dtype=torch.uint8).permute(2, 0, 1)
    return Picture.from_tensor(pixels)
