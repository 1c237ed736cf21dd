"""
Seam computation and removal.

Seams are found with the dynamic program over the pixel grid (a shortest
path through a DAG laid out in row-major order). Only vertical seams are
computed directly; horizontal seams reuse the same code on a transposed grid.
"""

import torch
from typing import Sequence, Union

SeamLike = Union[torch.Tensor, Sequence[int]]


def dp_seam(energy: torch.Tensor) -> torch.Tensor:
    """
    Find the minimum-energy vertical seam by dynamic programming.

    dist[y, x] is the cheapest cost of reaching pixel (x, y) from the top
    row, where stepping off a pixel costs that pixel's energy. Each row
    relaxes its three successors (x-1, x, x+1) in the row below.

    Ties go to the lowest source column during relaxation and to the
    leftmost minimum on the bottom row.

    Args:
        energy: Energy map (H, W)

    Returns:
        Seam indices (H,) with one column index per row
    """
    H, W = energy.shape
    energy = energy.to(torch.float64)
    inf = torch.full((1,), float('inf'), dtype=torch.float64)
    cols = torch.arange(W)

    dist = torch.full((H, W), float('inf'), dtype=torch.float64)
    dist[0] = 0.0
    parent = torch.zeros(H, W, dtype=torch.long)

    for y in range(H - 1):
        cost = dist[y] + energy[y]

        # Candidates for each target column k in row y + 1, in the order
        # the sources are visited: k-1, k, k+1
        from_left = torch.cat([inf, cost[:-1]])
        from_right = torch.cat([cost[1:], inf])
        options = torch.stack([from_left, cost, from_right])

        offset = torch.argmin(options, dim=0)
        best = options.gather(0, offset.unsqueeze(0)).squeeze(0)

        # An infinite candidate never improves on the initial +inf, so those
        # cells keep parent 0 rather than pointing at the padding column
        reached = torch.isfinite(best)
        dist[y + 1] = best
        parent[y + 1] = torch.where(reached, cols + offset - 1, torch.zeros_like(cols))

    seam = torch.zeros(H, dtype=torch.long)
    seam[H - 1] = torch.argmin(dist[H - 1])
    for y in range(H - 1, 0, -1):
        seam[y - 1] = parent[y, seam[y]]

    return seam


def validate_seam(seam: SeamLike, length: int, bound: int) -> torch.Tensor:
    """
    Check that a seam has the right length, stays in range and is connected.

    Args:
        seam: Seam indices, as a tensor or a sequence of ints
        length: Required number of entries
        bound: Entries must lie in [0, bound)

    Returns:
        The seam as a long tensor
    """
    if seam is None:
        raise ValueError("Seam must not be None")

    try:
        seam = torch.as_tensor(seam)
    except (TypeError, RuntimeError, OverflowError) as e:
        raise ValueError(f"Seam must be a sequence of integers, got {seam!r}") from e
    if seam.dim() != 1:
        raise ValueError(f"Seam must be one-dimensional, got shape {tuple(seam.shape)}")
    if seam.shape[0] != length:
        raise ValueError(f"Seam has length {seam.shape[0]}, expected {length}")
    if seam.dtype.is_floating_point or seam.dtype == torch.bool or seam.is_complex():
        raise ValueError(f"Seam entries must be integers, got {seam.dtype}")

    seam = seam.to(torch.long)
    out_of_range = (seam < 0) | (seam >= bound)
    if out_of_range.any():
        i = int(torch.nonzero(out_of_range)[0])
        raise ValueError(f"Seam entry {i} is {int(seam[i])}, outside [0, {bound})")

    if length > 1:
        jumps = torch.abs(seam[1:] - seam[:-1])
        if jumps.max() > 1:
            i = int(torch.nonzero(jumps > 1)[0]) + 1
            raise ValueError(
                f"Seam entries {i - 1} and {i} differ by {int(jumps[i - 1])}; "
                f"consecutive entries may differ by at most 1")

    return seam


def remove_seam(grid: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from a grid.

    The seam is assumed to be valid (see validate_seam).

    Args:
        grid: Image tensor (C, H, W) or energy map (H, W)
        seam: Column index per row (H,)

    Returns:
        New grid with one column removed, (C, H, W-1) or (H, W-1)
    """
    H, W = grid.shape[-2:]
    carved = torch.empty(*grid.shape[:-1], W - 1, dtype=grid.dtype)

    # Remove one pixel from each row
    for i in range(H):
        col = int(seam[i])
        carved[..., i, :col] = grid[..., i, :col]
        carved[..., i, col:] = grid[..., i, col + 1:]

    return carved


def transposed(grid: torch.Tensor) -> torch.Tensor:
    """Swap rows and columns of an image (C, H, W) or energy map (H, W)."""
    return grid.transpose(-2, -1).contiguous()
