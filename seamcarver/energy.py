"""
Energy function for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

For images, we use gradient magnitude (Avidan & Shamir 2007).
"""

import torch
import torch.nn.functional as F


def to_grayscale(image: torch.Tensor) -> torch.Tensor:
    """
    Collapse an image to a single float channel.

    Args:
        image: Image tensor (C, H, W) or (H, W), any dtype

    Returns:
        Grayscale image (H, W) as float
    """
    if not image.is_floating_point():
        image = image.float()

    if image.dim() == 2:
        return image
    if image.dim() != 3:
        raise ValueError(f"Expected a (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")

    C = image.shape[0]
    if C >= 3:
        # RGB or RGBA: luma of the colour channels, alpha ignored
        return 0.299 * image[0] + 0.587 * image[1] + 0.114 * image[2]
    # grayscale, or grayscale + alpha
    return image[0]


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute gradient magnitude energy for an image.

    Uses L1 norm of image gradients:
    E_I(i,j) = ||∂/∂x I(i,j)|| + ||∂/∂y I(i,j)||

    This is the standard energy function from Avidan & Shamir 2007.

    Args:
        image: Image tensor (C, H, W) or grayscale (H, W)

    Returns:
        Non-negative energy map (H, W)
    """
    gray = to_grayscale(image)

    # Compute gradients using Sobel filters
    sobel_x = torch.tensor([[-1, 0, 1],
                           [-2, 0, 2],
                           [-1, 0, 1]], dtype=gray.dtype, device=gray.device)
    sobel_x = sobel_x.view(1, 1, 3, 3)

    sobel_y = torch.tensor([[-1, -2, -1],
                           [ 0,  0,  0],
                           [ 1,  2,  1]], dtype=gray.dtype, device=gray.device)
    sobel_y = sobel_y.view(1, 1, 3, 3)

    # (1, 1, H, W) for conv2d
    gray = gray.unsqueeze(0).unsqueeze(0)

    grad_x = F.conv2d(gray, sobel_x, padding=1)
    grad_y = F.conv2d(gray, sobel_y, padding=1)

    energy = torch.abs(grad_x) + torch.abs(grad_y)

    # Index instead of squeeze so 1-row / 1-column images keep their shape
    return energy[0, 0]
