"""
Seam location and removal.

A vertical seam holds one column index per row; adjacent rows differ by at
most one column. Seams are located by backtracking through a cost table
(see cost.py) from the cheapest cell of the bottom row.

Ties are always broken towards the left: the leftmost minimum of the bottom
row, and left over centre over right while backtracking. Any deterministic
rule would give a valid seam; this one keeps results reproducible.
"""

import torch


def find_end_point(cost: torch.Tensor) -> int:
    """Column of the cheapest bottom-row cell (leftmost on ties)."""
    # argmin returns the first minimal index
    return int(torch.argmin(cost[-1]).item())


def find_seam(cost: torch.Tensor) -> torch.Tensor:
    """
    Find the minimum-cost vertical seam in a cost table.

    Args:
        cost: Cost table (H, W) from build_cost_table / repair_cost_table

    Returns:
        Seam indices (H,) with column index per row
    """
    H, W = cost.shape
    seam = torch.zeros(H, dtype=torch.long, device=cost.device)

    col = find_end_point(cost)
    seam[H - 1] = col

    for i in range(H - 1, 0, -1):
        left = max(0, col - 1)
        right = min(W - 1, col + 1)
        above = cost[i - 1, left:right + 1]
        col = left + int(torch.argmin(above).item())
        seam[i - 1] = col

    return seam


def seam_energy(field: torch.Tensor, seam: torch.Tensor) -> float:
    """Total energy of the field pixels along a seam."""
    rows = torch.arange(field.shape[0], device=field.device)
    return field[rows, seam.to(field.device)].sum().item()


def remove_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from an image, energy field or cost table.

    Args:
        image: Tensor (C, H, W) or (H, W)
        seam: Seam indices (H,)

    Returns:
        New tensor with one column removed, same dtype and device
    """
    if image.dim() == 2:
        image = image.unsqueeze(0)
        squeeze_output = True
    elif image.dim() == 3:
        squeeze_output = False
    else:
        raise ValueError(f"Expected a (C, H, W) or (H, W) tensor, got shape {tuple(image.shape)}")

    C, H, W = image.shape

    if seam.dim() != 1 or seam.shape[0] != H:
        raise ValueError(f"Seam shape {tuple(seam.shape)} does not match height {H}")
    if H > 0 and (seam.min().item() < 0 or seam.max().item() >= W):
        raise ValueError(f"Seam indices must lie in [0, {W}), got "
                         f"[{seam.min().item()}, {seam.max().item()}]")

    carved = torch.empty(C, H, W - 1, dtype=image.dtype, device=image.device)

    for i in range(H):
        col = seam[i].item()
        carved[:, i, :col] = image[:, i, :col]
        carved[:, i, col:] = image[:, i, col + 1:]

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved
