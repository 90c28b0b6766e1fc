"""
Content-aware image narrowing by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007, with an incrementally repaired cost table.
"""

__version__ = "0.1.0"

from .energy import gradient_magnitude_energy, to_grayscale
from .cost import build_cost_table, repair_cost_table, repair_window
from .seam import find_end_point, find_seam, seam_energy, remove_seam
from .carving import carve, carve_image, validate_carve_args, CarvingCancelled
from .image_io import load_image, save_image, rotate_image, output_path

__all__ = [
    'gradient_magnitude_energy',
    'to_grayscale',
    'build_cost_table',
    'repair_cost_table',
    'repair_window',
    'find_end_point',
    'find_seam',
    'seam_energy',
    'remove_seam',
    'carve',
    'carve_image',
    'validate_carve_args',
    'CarvingCancelled',
    'load_image',
    'save_image',
    'rotate_image',
    'output_path',
]
