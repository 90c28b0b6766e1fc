"""Tests for the gradient energy function."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarver.energy import gradient_magnitude_energy, to_grayscale


class TestGradientMagnitudeEnergy:
    def test_uniform_interior_is_zero(self):
        """A solid-color image should have zero energy in the interior."""
        image = torch.ones(3, 20, 20) * 0.5
        energy = gradient_magnitude_energy(image)
        assert energy[2:-2, 2:-2].max() < 1e-5

    def test_vertical_edge_has_horizontal_energy(self):
        """An image with a single vertical edge should have energy along that edge."""
        image = torch.zeros(1, 20, 20)
        image[:, :, 10:] = 1.0
        energy = gradient_magnitude_energy(image)
        edge_energy = energy[2:-2, 9:12].mean()
        bg_energy = energy[2:-2, 2:7].mean()
        assert edge_energy > 10 * bg_energy

    def test_horizontal_edge_has_vertical_energy(self):
        """An image with a horizontal edge should have energy along that edge."""
        image = torch.zeros(1, 20, 20)
        image[:, 10:, :] = 1.0
        energy = gradient_magnitude_energy(image)
        edge_energy = energy[9:12, 2:-2].mean()
        bg_energy = energy[2:7, 2:-2].mean()
        assert edge_energy > 10 * bg_energy

    def test_output_shape_matches_input(self):
        """Energy map should have same spatial dimensions as input."""
        image = torch.rand(3, 32, 48)
        energy = gradient_magnitude_energy(image)
        assert energy.shape == (32, 48)

    def test_grayscale_input(self):
        """Should work with 2D grayscale input."""
        image = torch.rand(20, 20)
        energy = gradient_magnitude_energy(image)
        assert energy.shape == (20, 20)

    @pytest.mark.parametrize("shape", [(3, 1, 12), (3, 12, 1), (1, 1, 1)])
    def test_thin_images_keep_shape(self, shape):
        energy = gradient_magnitude_energy(torch.rand(*shape))
        assert energy.shape == shape[1:]

    def test_uint8_input(self):
        image = torch.randint(0, 256, (3, 10, 10), dtype=torch.uint8)
        energy = gradient_magnitude_energy(image)
        assert energy.is_floating_point()
        assert energy.shape == (10, 10)

    def test_alpha_channel_ignored(self):
        torch.manual_seed(3)
        rgb = torch.rand(3, 12, 12)
        rgba = torch.cat([rgb, torch.rand(1, 12, 12)])
        assert torch.equal(gradient_magnitude_energy(rgba), gradient_magnitude_energy(rgb))

    def test_energy_nonnegative(self):
        """Energy should always be non-negative (L1 norm of gradients)."""
        torch.manual_seed(42)
        image = torch.rand(3, 30, 30)
        energy = gradient_magnitude_energy(image)
        assert (energy >= 0).all()

    def test_deterministic(self):
        torch.manual_seed(5)
        image = torch.rand(3, 16, 16)
        assert torch.equal(gradient_magnitude_energy(image), gradient_magnitude_energy(image))


class TestToGrayscale:
    def test_luma_weights(self):
        image = torch.zeros(3, 1, 1)
        image[1] = 1.0
        assert abs(to_grayscale(image).item() - 0.587) < 1e-6

    def test_grayscale_alpha_uses_first_channel(self):
        image = torch.stack([torch.full((2, 2), 0.25), torch.ones(2, 2)])
        assert torch.equal(to_grayscale(image), torch.full((2, 2), 0.25))

    def test_bad_rank_rejected(self):
        with pytest.raises(ValueError):
            to_grayscale(torch.rand(1, 1, 4, 4))
