"""Shared test helpers for the seamcarver test suite."""

import itertools
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


@pytest.fixture
def rgb_image():
    """Seeded random 3x20x30 uint8 image."""
    g = torch.Generator().manual_seed(7)
    return torch.randint(0, 256, (3, 20, 30), dtype=torch.uint8, generator=g)


def make_gradient_image(H, W, channels=3):
    """Horizontal gradient: dark left, bright right."""
    grad = torch.linspace(0, 1, W).unsqueeze(0).expand(H, W)
    if channels > 0:
        return grad.unsqueeze(0).expand(channels, H, W).clone()
    return grad


def random_seam(H, W, generator):
    """A random connected vertical seam, clamped to [0, W)."""
    seam = torch.zeros(H, dtype=torch.long)
    col = int(torch.randint(0, W, (1,), generator=generator).item())
    seam[0] = col
    for i in range(1, H):
        step = int(torch.randint(-1, 2, (1,), generator=generator).item())
        col = min(W - 1, max(0, col + step))
        seam[i] = col
    return seam


def brute_force_bottom_row(field):
    """Cheapest monotone path ending at each bottom-row column, by enumeration."""
    H, W = field.shape
    best = [float('inf')] * W
    for start in range(W):
        for steps in itertools.product((-1, 0, 1), repeat=H - 1):
            cols = [start]
            for s in steps:
                cols.append(cols[-1] + s)
            if min(cols) < 0 or max(cols) >= W:
                continue
            total = sum(field[i, c].item() for i, c in enumerate(cols))
            best[cols[-1]] = min(best[cols[-1]], total)
    return best
