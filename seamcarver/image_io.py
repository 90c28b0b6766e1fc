"""
Image loading, saving and rotation helpers.

Images are uint8 tensors laid out (C, H, W), the same layout the carving
functions use. Pillow errors are not caught here.
"""

from pathlib import Path
from typing import Union

import numpy as np
import torch
from PIL import Image

KEPT_MODES = ('L', 'LA', 'RGB', 'RGBA')


def load_image(path: Union[str, Path]) -> torch.Tensor:
    """
    Load an image file as a uint8 tensor (C, H, W).

    L, LA, RGB and RGBA images keep their channels. Other modes (P, 1,
    I;16, CMYK, ...) are converted to RGBA if they carry transparency and
    to RGB otherwise, and save_image writes them back in that converted
    mode, not the original one.
    """
    with Image.open(path) as img:
        if img.mode not in KEPT_MODES:
            has_alpha = 'A' in img.getbands() or 'transparency' in img.info
            img = img.convert('RGBA' if has_alpha else 'RGB')
        img_array = np.array(img, dtype=np.uint8)

    if img_array.ndim == 2:
        img_array = img_array[:, :, np.newaxis]
    return torch.from_numpy(img_array).permute(2, 0, 1).contiguous()


def save_image(tensor: torch.Tensor, path: Union[str, Path]):
    """
    Save a (C, H, W) or (H, W) tensor as an image.

    Float tensors are taken to be in [0, 1]. The file format follows the
    path suffix.
    """
    if tensor.dim() == 2:
        tensor = tensor.unsqueeze(0)

    img_array = tensor.detach().permute(1, 2, 0).cpu().numpy()
    if tensor.is_floating_point():
        img_array = (img_array * 255).clip(0, 255)
    img_array = img_array.astype(np.uint8)

    if img_array.shape[2] == 1:
        img_array = img_array[:, :, 0]

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(img_array).save(path)


def rotate_image(image: torch.Tensor, clockwise: bool) -> torch.Tensor:
    """Rotate the last two axes of an image by exactly 90 degrees."""
    return torch.rot90(image, k=-1 if clockwise else 1, dims=(-2, -1))


def output_path(path: Union[str, Path]) -> Path:
    """Default result path: out_<name> next to the input."""
    path = Path(path)
    return path.with_name('out_' + path.name)
