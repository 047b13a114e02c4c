# -- Surface Display Mapping -- #

'''
Converts surface height and obstruction fields into RGBA pixels.

A renderer uploads the returned (height, width, 4) uint8 array as a
texture once per frame. Channels:

    R = 1 - obstruction         (obstacles show red)
    G = 0
    B = (h + e) / (2 * e)       (heights clamped to [-e, e])
    A = 255

A flat surface (h = 0) is therefore drawn half blue.

Sean Bowman [02/15/2026]
'''

from __future__ import annotations

import numpy as np

from interactiveWater.WaveSurface import constants as const
from interactiveWater.WaveSurface.iwave.iwaveSolver import IWaveSurface


def pixFromNormalized(values: np.ndarray | float) -> np.ndarray:
    '''Map values in [0, 1] to bytes with round-half-up: int(v * 255 + 0.5).'''
    scaled = np.asarray(values, dtype=np.float64) * 255.0 + 0.5
    return np.clip(scaled, 0.0, 255.0).astype(np.uint8)


def heightsToPixels(
    heights: np.ndarray,
    obstruction: np.ndarray,
    extents: float = const.displayExtents,
) -> np.ndarray:
    '''
    Build an RGBA image from height and obstruction arrays.

    Parameters:
    -----------
    heights : np.ndarray
        (height, width) height field
    obstruction : np.ndarray
        (height, width) obstruction mask in [0, 1]
    extents : float
        Display clamp range for heights

    Returns:
    --------
    np.ndarray : (height, width, 4) uint8 RGBA image
    '''
    if extents <= 0.0:
        raise ValueError(f'Display extents must be positive, got {extents}')

    h = np.clip(heights, -extents, extents)

    pixels = np.zeros(heights.shape + (4,), dtype=np.uint8)
    pixels[..., 0] = pixFromNormalized(1.0 - obstruction)
    pixels[..., 2] = pixFromNormalized((h + extents) / (extents * 2.0))
    pixels[..., 3] = 255

    return pixels


def renderSurface(surface: IWaveSurface, extents: float = const.displayExtents) -> np.ndarray:
    '''RGBA image of a surface's current height and obstruction.'''
    return heightsToPixels(surface.currentGrid, surface.obstruction, extents)
