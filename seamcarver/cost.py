"""
Cumulative cost table for vertical seams.

cost[0, c] is the energy of the top row; every cell below adds its own energy
to the cheapest of the (up to) three cells above it:

    cost[i, j] = E(i, j) + min(cost[i-1, j-1], cost[i-1, j], cost[i-1, j+1])

After a seam is removed only a wedge below the seam's top pixel can change,
so the table is repaired in place instead of being rebuilt.
"""

import torch
import torch.nn.functional as F


def _check_field(field: torch.Tensor):
    if field.dim() != 2:
        raise ValueError(f"Energy field must be 2D (H, W), got shape {tuple(field.shape)}")
    H, W = field.shape
    if H == 0 or W == 0:
        raise ValueError(f"Energy field must be non-empty, got shape {tuple(field.shape)}")


def _row_costs(field_row: torch.Tensor, prev_costs: torch.Tensor,
               begin: int, end: int) -> torch.Tensor:
    """Costs for columns [begin, end] of a row, given the completed row above."""
    W = prev_costs.shape[0]
    n = end - begin + 1

    # Columns begin-1 .. end+1 of the row above; +inf stands in for the
    # missing neighbour where the window touches a border
    above = prev_costs[max(0, begin - 1):min(W, end + 2)]
    above = F.pad(above, (1 if begin == 0 else 0, 1 if end == W - 1 else 0),
                  value=float('inf'))

    best = torch.minimum(above[0:n], above[1:n + 1])
    best = torch.minimum(best, above[2:n + 2])
    return field_row[begin:end + 1] + best


def repair_window(removed: int, width: int):
    """
    First repaired row's column window [begin, end] after a seam removal.

    Args:
        removed: Column the seam occupied in row 0, before removal
        width: Width after removal

    Returns:
        (begin, end), inclusive
    """
    if removed == 0:
        return 0, 0
    if removed >= width:
        # the old last column is gone, its left neighbour is now the border
        return width - 1, width - 1
    return removed - 1, removed


def build_cost_table(field: torch.Tensor) -> torch.Tensor:
    """
    Build the full cost table for an energy field.

    Args:
        field: Non-negative energy map (H, W). Integer maps are promoted
               to the default float dtype.

    Returns:
        Cost table (H, W), same dtype and device as the (float) field
    """
    _check_field(field)
    if not field.is_floating_point():
        field = field.to(torch.get_default_dtype())

    H, W = field.shape
    cost = torch.empty_like(field)
    cost[0] = field[0]

    for i in range(1, H):
        cost[i] = _row_costs(field[i], cost[i - 1], 0, W - 1)

    return cost


def repair_cost_table(field: torch.Tensor, cost: torch.Tensor,
                      seam: torch.Tensor) -> torch.Tensor:
    """
    Repair a cost table after a seam has been removed from it.

    Both `field` and `cost` must already have the seam removed. `seam` holds
    the removed columns in the numbering from before the removal. Only the
    wedge that starts beside seam[0] and widens by one column per row is
    recomputed; every other cell is unaffected by the removal. The result is
    identical to build_cost_table(field).

    Args:
        field: Energy map with the seam removed (H, W)
        cost: Cost table with the seam removed (H, W), modified in place
        seam: Removed seam (H,)

    Returns:
        The repaired cost table (the same tensor as `cost`)
    """
    _check_field(field)
    if cost.shape != field.shape:
        raise ValueError(f"Cost table shape {tuple(cost.shape)} does not match "
                         f"energy field shape {tuple(field.shape)}")
    H, W = field.shape
    if seam.shape[0] != H:
        raise ValueError(f"Seam length {seam.shape[0]} does not match height {H}")

    begin, end = repair_window(int(seam[0].item()), W)

    for i in range(1, H):
        cost[i, begin:end + 1] = _row_costs(field[i], cost[i - 1], begin, end)
        begin = max(0, begin - 1)
        end = min(W - 1, end + 1)

    return cost
