"""Tests for the Picture pixel buffer."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from seamcarver.picture import Picture


class TestConstruction:
    def test_black_picture(self):
        picture = Picture(4, 3)
        assert (picture.width, picture.height) == (4, 3)
        assert picture.get(3, 2) == (0, 0, 0)

    @pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 1)])
    def test_empty_raises(self, width, height):
        with pytest.raises(ValueError):
            Picture(width, height)

    def test_from_uint8_tensor(self):
        pixels = torch.randint(0, 256, (3, 5, 7), dtype=torch.uint8)
        picture = Picture.from_tensor(pixels)
        assert (picture.width, picture.height) == (7, 5)
        assert torch.equal(picture.to_tensor(), pixels)

    def test_from_float_tensor_scales(self):
        """Float tensors follow the [0, 1] torch image convention."""
        pixels = torch.zeros(3, 2, 2)
        pixels[0, 0, 0] = 1.0
        pixels[1, 1, 1] = 0.5
        picture = Picture.from_tensor(pixels)
        assert picture.get(0, 0) == (255, 0, 0)
        assert picture.get(1, 1) == (0, 128, 0)

    @pytest.mark.parametrize("shape", [(5, 7), (4, 5, 7), (1, 3, 5, 7)])
    def test_bad_tensor_shape_raises(self, shape):
        with pytest.raises(ValueError):
            Picture.from_tensor(torch.zeros(shape, dtype=torch.uint8))

    def test_from_array(self):
        array = np.zeros((2, 3, 3), dtype=np.uint8)
        array[1, 2] = [10, 20, 30]
        picture = Picture.from_array(array)
        assert (picture.width, picture.height) == (3, 2)
        assert picture.get(2, 1) == (10, 20, 30)
        assert np.array_equal(picture.to_array(), array)

    def test_from_array_bad_shape_raises(self):
        with pytest.raises(ValueError):
            Picture.from_array(np.zeros((2, 3), dtype=np.uint8))


class TestPixelAccess:
    def test_set_then_get(self):
        picture = Picture(3, 3)
        picture.set(2, 1, (200, 100, 50))
        assert picture.get(2, 1) == (200, 100, 50)
        assert picture.get(1, 2) == (0, 0, 0)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
    def test_out_of_range_raises(self, x, y):
        picture = Picture(3, 2)
        with pytest.raises(ValueError):
            picture.get(x, y)
        with pytest.raises(ValueError):
            picture.set(x, y, (0, 0, 0))

    @pytest.mark.parametrize("rgb", [(0, 0), (0, 0, 256), (-1, 0, 0)])
    def test_bad_colour_raises(self, rgb):
        with pytest.raises(ValueError):
            Picture(2, 2).set(0, 0, rgb)


class TestCopies:
    def test_copy_is_independent(self, random_picture):
        copy = random_picture.copy()
        assert copy == random_picture
        r, g, b = copy.get(0, 0)
        copy.set(0, 0, (255 - r, g, b))
        assert copy != random_picture

    def test_to_tensor_is_independent(self, random_picture):
        pixels = random_picture.to_tensor()
        pixels.zero_()
        assert random_picture.to_tensor().any()

    def test_from_tensor_does_not_alias(self):
        pixels = torch.zeros(3, 2, 2, dtype=torch.uint8)
        picture = Picture.from_tensor(pixels)
        pixels.fill_(7)
        assert picture.get(0, 0) == (0, 0, 0)


class TestFiles:
    def test_png_roundtrip(self, random_picture, tmp_path):
        path = str(tmp_path / "picture.png")
        random_picture.save(path)
        assert Picture.open(path) == random_picture

    def test_open_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            Picture.open(str(tmp_path / "missing.png"))
