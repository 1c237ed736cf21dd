"""
Basic seam carving example.

Shows the energy map, the first vertical and horizontal seams, and the
result of shrinking the picture, side by side.

    python basic_seam_carving.py [image] [n_seams]

Without an image a synthetic scene is generated.
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import matplotlib.pyplot as plt

from seamcarver import Picture, SeamCarver, carve_picture, draw_seam


def make_demo_picture(H=120, W=180):
    """Sky gradient, flat ground and a red disc: lots of low-energy space."""
    y = torch.linspace(0, 1, H).view(H, 1).expand(H, W)
    pixels = torch.stack([0.3 + 0.2 * y, 0.5 + 0.3 * y, torch.ones(H, W) * 0.9])

    pixels[:, 2 * H // 3:, :] = torch.tensor([0.35, 0.6, 0.25]).view(3, 1, 1)

    yy, xx = torch.meshgrid(torch.arange(H), torch.arange(W), indexing='ij')
    disc = (xx - W // 3) ** 2 + (yy - H // 2) ** 2 < (H // 6) ** 2
    pixels[:, disc] = torch.tensor([0.85, 0.15, 0.1]).view(3, 1)
    return Picture.from_tensor(pixels)


def main():
    if len(sys.argv) > 1:
        print(f"Loading {sys.argv[1]}...")
        picture = Picture.open(sys.argv[1])
    else:
        print("Generating demo picture...")
        picture = make_demo_picture()
    n_seams = int(sys.argv[2]) if len(sys.argv) > 2 else picture.width // 3
    print(f"Picture size: {picture.width} x {picture.height}")

    print("Computing energy and first seams...")
    carver = SeamCarver(picture)
    energy = carver.energy_map()
    with_seams = draw_seam(picture, carver.find_vertical_seam())
    with_seams = draw_seam(with_seams, carver.find_horizontal_seam(),
                           direction='horizontal', color=(0, 255, 0))

    print(f"Removing {n_seams} vertical seams...")
    carved = carve_picture(picture, width=picture.width - n_seams)

    fig, axes = plt.subplots(1, 4, figsize=(16, 4))
    axes[0].imshow(picture.to_array())
    axes[0].set_title('Original')
    # Border sentinel would swamp the colour scale
    axes[1].imshow(energy[1:-1, 1:-1].numpy(), cmap='gray')
    axes[1].set_title('Energy (interior)')
    axes[2].imshow(with_seams.to_array())
    axes[2].set_title('First seams')
    axes[3].imshow(carved.to_array())
    axes[3].set_title(f'Carved ({carved.width} x {carved.height})')
    for ax in axes:
        ax.axis('off')

    os.makedirs('output', exist_ok=True)
    plt.tight_layout()
    plt.savefig('output/basic_seam_carving.png', dpi=100)
    carved.save('output/carved.png')
    print("Done! Check the output/ directory for results.")


if __name__ == '__main__':
    main()
