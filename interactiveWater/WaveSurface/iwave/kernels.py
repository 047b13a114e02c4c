# -- iWave Derivative Kernel -- #

'''
Radial convolution kernel for the iWave vertical derivative operator.

The iWave method replaces the dispersion operator sqrt(-laplacian)
with a convolution over a small square stencil. The stencil value at
offset (k, l) depends only on r = sqrt(k^2 + l^2):

    G(r) = (1 / G0) * integral  q^2 * exp(-sigma * q^2) * J0(q * r)  dq

evaluated by fixed-step quadrature (q_i = i * dq, i = 1..N), where
J0 is the zeroth-order Bessel function of the first kind and G0 is
the same sum at r = 0. Normalizing by G0 makes the center tap 1.0.

Quadrature constants (N = 10000, dq = 0.001, sigma = 1) are taken
from the paper and kept as-is; the kernel shape is sensitive to them.

References:
-----------
Tessendorf (2004) -- Interactive Water Surfaces

Sean Bowman [02/14/2026]
'''

from __future__ import annotations

import numpy as np
from scipy.special import j0

from interactiveWater.WaveSurface import constants as const


######################################################################
# -- Quadrature -- #
######################################################################

def quadratureWeights(
    nSteps: int = const.kernelQuadratureSteps,
    dq: float = const.kernelQuadratureStep,
    sigma: float = const.kernelSigma,
) -> tuple[np.ndarray, np.ndarray]:
    '''
    Sample points and Gaussian weights for the kernel quadrature.

    Parameters:
    -----------
    nSteps : int
        Number of quadrature steps N
    dq : float
        Step size
    sigma : float
        Gaussian factor in exp(-sigma * q^2)

    Returns:
    --------
    tuple[np.ndarray, np.ndarray] : (q_i, q_i^2 * exp(-sigma * q_i^2))
    '''
    q = dq * np.arange(1, nSteps + 1, dtype=np.float64)
    q2 = q * q
    return q, q2 * np.exp(-sigma * q2)


def radialKernelValues(
    radii: np.ndarray,
    nSteps: int = const.kernelQuadratureSteps,
    dq: float = const.kernelQuadratureStep,
    sigma: float = const.kernelSigma,
) -> np.ndarray:
    '''
    Unnormalized quadrature sums G(r) * G0 for each radius.

    Parameters:
    -----------
    radii : np.ndarray
        1D array of radial distances (in cells)

    Returns:
    --------
    np.ndarray : Quadrature sum per radius
    '''
    q, weights = quadratureWeights(nSteps, dq, sigma)
    radii = np.asarray(radii, dtype=np.float64)

    # One row of Bessel samples per radius
    bessel = j0(np.outer(radii, q))
    return np.sum(weights[np.newaxis, :] * bessel, axis=1)


######################################################################
# -- Kernel Construction -- #
######################################################################

def buildDerivativeKernel(
    radius: int,
    nSteps: int = const.kernelQuadratureSteps,
    dq: float = const.kernelQuadratureStep,
    sigma: float = const.kernelSigma,
) -> np.ndarray:
    '''
    Build the (2p+1) x (2p+1) iWave derivative kernel.

    Each distinct squared radius k^2 + l^2 is integrated once and
    scattered back to every tap that shares it, so taps related by
    a mirror or a transpose get bit-identical values.

    Parameters:
    -----------
    radius : int
        Kernel radius p (>= 0)
    nSteps : int
        Number of quadrature steps N
    dq : float
        Quadrature step size
    sigma : float
        Gaussian factor

    Returns:
    --------
    np.ndarray : Kernel indexed [l + p, k + p] (row = y offset)

    Raises:
    -------
    ValueError : If radius is negative or the quadrature is empty
    '''
    if radius < 0:
        raise ValueError(f'Kernel radius must be >= 0, got {radius}')
    if nSteps <= 0 or dq <= 0.0:
        raise ValueError(
            f'Quadrature needs nSteps > 0 and dq > 0 (got nSteps={nSteps}, dq={dq})'
        )

    offsets = np.arange(-radius, radius + 1)
    kk, ll = np.meshgrid(offsets, offsets, indexing='xy')
    r2 = kk * kk + ll * ll

    uniqueR2, inverse = np.unique(r2, return_inverse=True)
    sums = radialKernelValues(np.sqrt(uniqueR2), nSteps, dq, sigma)

    # uniqueR2 is sorted, so r = 0 is always the first entry
    g0 = sums[0]
    values = sums / g0

    return values[inverse.reshape(r2.shape)]


class DerivativeKernel:
    '''
    Immutable iWave derivative kernel of radius p.

    Parameters:
    -----------
    radius : int
        Kernel radius p (>= 0); the kernel side is 2p + 1
    nSteps : int
        Number of quadrature steps
    dq : float
        Quadrature step size
    sigma : float
        Gaussian factor
    '''

    def __init__(
        self,
        radius: int = const.defaultKernelRadius,
        nSteps: int = const.kernelQuadratureSteps,
        dq: float = const.kernelQuadratureStep,
        sigma: float = const.kernelSigma,
    ) -> None:
        self._radius = int(radius)
        self._values = buildDerivativeKernel(self._radius, nSteps, dq, sigma)
        self._values.setflags(write=False)

    @property
    def radius(self) -> int:
        '''Kernel radius p.'''
        return self._radius

    @property
    def length(self) -> int:
        '''Kernel side length 2p + 1.'''
        return 2 * self._radius + 1

    @property
    def values(self) -> np.ndarray:
        '''Read-only (2p+1, 2p+1) kernel array.'''
        return self._values

    def at(self, k: int, l: int) -> float:
        '''Kernel value at offset (k, l), each in [-p, p].'''
        return float(self._values[l + self._radius, k + self._radius])

    def formatTable(self, precision: int = 4) -> str:
        '''Kernel values as a tab-separated table, one row per line.'''
        rows = []
        for row in self._values:
            rows.append('\t'.join(f'{v:.{precision}f}' for v in row))
        return '\n'.join(rows)
