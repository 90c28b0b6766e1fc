"""
High-level carving functions that drive the seam removal loop.
"""

import logging

import torch
from typing import Optional
from .energy import gradient_magnitude_energy
from .cost import build_cost_table, repair_cost_table
from .seam import find_seam, remove_seam, seam_energy
from .image_io import rotate_image

logger = logging.getLogger(__name__)


class CarvingCancelled(RuntimeError):
    """Raised when a cancellation token is set between two seams."""


def validate_carve_args(width: int, n_seams: int):
    """Reject degenerate images and seam counts outside [0, width)."""
    if width <= 0:
        raise ValueError("The image must be at least one column wide")
    if n_seams < 0:
        raise ValueError(f"The number of seams cannot be negative, got {n_seams}")
    if n_seams >= width:
        raise ValueError(f"The number of seams to remove ({n_seams}) must be smaller "
                         f"than the image width ({width})")


def carve(image: torch.Tensor, n_seams: int,
          energy: Optional[torch.Tensor] = None,
          incremental: bool = True,
          cancel=None) -> torch.Tensor:
    """
    Remove n_seams vertical seams from an image.

    The cost table is built once. After each seam is removed from the
    image, energy field and cost table, only the part of the table the
    removal invalidated is recomputed.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        n_seams: Number of seams to remove, 0 <= n_seams < W
        energy: Energy map (H, W); defaults to gradient_magnitude_energy(image)
        incremental: Repair the cost table after each seam (True) or
                     rebuild it from scratch (False). Results are identical.
        cancel: Optional token with is_set(), checked before each seam

    Returns:
        Carved image (C, H, W - n_seams) or (H, W - n_seams)
    """
    if image.dim() not in (2, 3):
        raise ValueError(f"Expected a (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")

    H, W = image.shape[-2:]
    if H <= 0:
        raise ValueError("The image must be at least one row high")
    validate_carve_args(W, n_seams)

    if energy is not None:
        if tuple(energy.shape) != (H, W):
            raise ValueError(f"Energy shape {tuple(energy.shape)} does not match "
                             f"image size {(H, W)}")
        if torch.isnan(energy).any():
            raise ValueError("Energy values must not be NaN")
        if (energy < 0).any():
            raise ValueError("Energy values must be non-negative")

    if n_seams == 0:
        return image.clone()

    field = energy if energy is not None else gradient_magnitude_energy(image)
    if not field.is_floating_point():
        field = field.float()
    cost = build_cost_table(field)
    carved = image
    seam = None

    for i in range(n_seams):
        if cancel is not None and cancel.is_set():
            raise CarvingCancelled(f"Carving cancelled after {i}/{n_seams} seams")

        if seam is not None:
            field = remove_seam(field, seam)
            cost = remove_seam(cost, seam)
            if incremental:
                repair_cost_table(field, cost, seam)
            else:
                cost = build_cost_table(field)

        seam = find_seam(cost)
        carved = remove_seam(carved, seam)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Removed seam %d/%d (end column %d, energy %.4f), width %d",
                         i + 1, n_seams, seam[-1].item(), seam_energy(field, seam),
                         carved.shape[-1])

    return carved


def carve_image(image: torch.Tensor, n_seams: int, direction: str = 'vertical',
                energy: Optional[torch.Tensor] = None, incremental: bool = True,
                cancel=None) -> torch.Tensor:
    """
    Seam carving in either direction.

    Horizontal seams are removed by rotating the image a quarter turn
    counter-clockwise, removing vertical seams and rotating back.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        n_seams: Number of seams to remove
        direction: 'vertical' (narrower) or 'horizontal' (shorter)
        energy: Optional energy map (H, W) in the image's orientation
        incremental: See carve()
        cancel: See carve()

    Returns:
        Carved image
    """
    if direction == 'vertical':
        return carve(image, n_seams, energy=energy, incremental=incremental, cancel=cancel)

    elif direction == 'horizontal':
        rotated = rotate_image(image, clockwise=False)
        if energy is not None:
            energy = rotate_image(energy, clockwise=False)
        carved = carve(rotated, n_seams, energy=energy, incremental=incremental, cancel=cancel)
        return rotate_image(carved, clockwise=True)

    else:
        raise ValueError(f"Invalid direction: {direction}")
