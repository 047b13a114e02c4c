# -- Grid Indexing -- #

'''
Index helpers for row-major height-field grids.

Cells are stored row-major: linear index = x + y * width, with x
varying fastest. Two lookups are provided:

- getIdx: bounds-checked, returns invalidIndex outside the grid
- getReflectedIdx: mirror-folds coordinates back into the grid and
  always resolves to a valid index (used only by the convolution)

Mirror convention (per axis of size n):
    c < 0   ->  -c              (mirror at 0, edge not repeated)
    c >= n  ->  2n - c - 1      (mirror at n - 1, edge repeated)

Sean Bowman [02/14/2026]
'''

from __future__ import annotations

import numpy as np

from interactiveWater.WaveSurface import constants as const


def getIdx(x: int, y: int, width: int, height: int) -> int:
    '''
    Linear index of cell (x, y), or invalidIndex when out of range.

    Parameters:
    -----------
    x, y : int
        Cell coordinates
    width, height : int
        Grid dimensions

    Returns:
    --------
    int : x + y * width, or const.invalidIndex
    '''
    if x < 0 or x >= width or y < 0 or y >= height:
        return const.invalidIndex

    return x + y * width


def reflectCoordinate(c: int, n: int) -> int:
    '''
    Fold a coordinate into [0, n) by mirroring at the grid edges.

    Folding repeats until the coordinate is in range, so offsets
    larger than the grid itself (kernel radius > n) still resolve.
    '''
    while c < 0 or c >= n:
        c = abs(c)
        if c >= n:
            c = 2 * n - c - 1

    return c


def getReflectedIdx(x: int, y: int, width: int, height: int) -> int:
    '''Linear index of (x, y) after mirror-folding into the grid.'''
    return reflectCoordinate(x, width) + reflectCoordinate(y, height) * width


def reflectedAxisIndices(n: int, radius: int) -> np.ndarray:
    '''
    Reflected indices for coordinates -radius .. n - 1 + radius.

    Entry i holds reflectCoordinate(i - radius, n), so a padded copy
    of a field along this axis is field[reflectedAxisIndices(n, p)].

    Parameters:
    -----------
    n : int
        Axis length
    radius : int
        Padding on each side

    Returns:
    --------
    np.ndarray : Integer index array of length n + 2 * radius
    '''
    return np.array(
        [reflectCoordinate(c, n) for c in range(-radius, n + radius)],
        dtype=np.intp,
    )


def reflectPad(field: np.ndarray, radius: int) -> np.ndarray:
    '''
    Pad a (height, width) field by radius cells using mirror folding.

    Returns a new (height + 2r, width + 2r) array where padded[j, i]
    equals field at the reflected coordinate (i - r, j - r).
    '''
    rows = reflectedAxisIndices(field.shape[0], radius)
    cols = reflectedAxisIndices(field.shape[1], radius)
    return field[np.ix_(rows, cols)]
