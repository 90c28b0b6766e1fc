"""
Basic seam carving example.

Removes columns (and then rows) from an image, and saves a copy of the
input with the first seam drawn in red.

    python examples/basic_seam_carving.py photo.jpg 100
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import time

import torch

from seamcarver import (gradient_magnitude_energy, build_cost_table, find_seam,
                        carve_image, load_image, save_image)


def visualize_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """Paint a vertical seam red on a uint8 RGB image."""
    img_vis = image.clone()
    red = torch.tensor([255, 0, 0], dtype=image.dtype, device=image.device)
    for i, col in enumerate(seam.tolist()):
        img_vis[:3, i, col] = red[:img_vis.shape[0]]
    return img_vis


def main():
    if len(sys.argv) < 3:
        print(f"usage: {sys.argv[0]} IMAGE N_SEAMS")
        return 1

    path, n_seams = sys.argv[1], int(sys.argv[2])
    stem, ext = os.path.splitext(path)

    print("Loading image...")
    image = load_image(path)
    C, H, W = image.shape
    print(f"Image shape: {C} x {H} x {W}")

    # Locate the first seam
    energy = gradient_magnitude_energy(image)
    seam = find_seam(build_cost_table(energy))
    save_image(visualize_seam(image, seam), f"{stem}_seam{ext}")

    for direction in ('vertical', 'horizontal'):
        for incremental in (True, False):
            start = time.perf_counter()
            carved = carve_image(image, n_seams, direction=direction, incremental=incremental)
            elapsed = (time.perf_counter() - start) * 1000
            mode = 'incremental' if incremental else 'full rebuild'
            print(f"  {direction:10s} {mode:12s} {tuple(carved.shape)} in {elapsed:.0f}ms")
        save_image(carved, f"{stem}_{direction}{ext}")

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
