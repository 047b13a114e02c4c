# -- iWave Height-Field Surface -- #

'''
CPU implementation of Tessendorf's iWave interactive water surface.

The surface owns five (height x width) fields: current height,
previous height, vertical derivative (scratch), source and
obstruction. Each frame runs three full-grid passes:

    1. Preprocess:  h += source;  h *= obstruction;  source = 0
    2. Convolve:    dv = sum_taps G[tap] * h[reflect(cell + tap)]
    3. Propagate:   damped wave equation, semi-implicit in time

The propagation step discretizes

    h'' + alpha * h' = -g * L(h)

where L is the operator approximated by the derivative kernel,
g is the acceleration term and alpha the velocity damping:

    h_new = h * (2 - alpha*dt) / (1 + alpha*dt)
          - h_prev / (1 + alpha*dt)
          - dv * g * dt^2 / (1 + alpha*dt)

The scheme is only stable for g <= (0.5/dt)^2 and alpha <= 2/dt.
The surface does not enforce this; see stability.checkStability.

References:
-----------
Tessendorf (2004) -- Interactive Water Surfaces

Sean Bowman [02/14/2026]
'''

from __future__ import annotations

import math

import numpy as np

from interactiveWater.WaveSurface import constants as const
from interactiveWater.WaveSurface.iwave.protocols import SurfaceConfig, SurfaceState
from interactiveWater.WaveSurface.iwave.kernels import DerivativeKernel
from interactiveWater.WaveSurface.iwave.gridIndexing import getIdx, reflectPad


class IWaveSurface:
    '''
    iWave height-field water surface.

    Fields are stored as (height, width) NumPy arrays, so the
    flattened (ravel) order is the row-major index x + y * width.

    Parameters:
    -----------
    width : int
        Grid width [cells], > 0
    height : int
        Grid height [cells], > 0
    kernelRadius : int
        Derivative kernel radius p, >= 0. Convolution cost is
        O(width * height * (2p + 1)^2).
    accelerationTerm : float
        Restoring acceleration coefficient g
    velocityDamping : float
        Velocity damping coefficient alpha
    '''

    def __init__(
        self,
        width: int,
        height: int,
        kernelRadius: int = const.defaultKernelRadius,
        accelerationTerm: float = const.defaultAccelerationTerm,
        velocityDamping: float = const.defaultVelocityDamping,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f'Grid dimensions must be positive, got {width} x {height}')
        if kernelRadius < 0:
            raise ValueError(f'Kernel radius must be >= 0, got {kernelRadius}')

        self._width = int(width)
        self._height = int(height)

        # Tunable between frames
        self.accelerationTerm = float(accelerationTerm)
        self.velocityDamping = float(velocityDamping)

        shape = (self._height, self._width)
        self._currentGrid = np.zeros(shape)
        self._prevGrid = np.zeros(shape)
        self._verticalDerivative = np.zeros(shape)
        self._source = np.zeros(shape)
        self._obstruction = np.ones(shape)

        self._kernel = DerivativeKernel(kernelRadius)

        self._time: float = 0.0
        self._frame: int = 0
        self._lastDelta: float = 0.0

        self.reset()

    @classmethod
    def fromConfig(cls, config: SurfaceConfig) -> IWaveSurface:
        '''Build a surface from a validated SurfaceConfig.'''
        config.validate()
        return cls(
            width=config.width,
            height=config.height,
            kernelRadius=config.kernelRadius,
            accelerationTerm=config.accelerationTerm,
            velocityDamping=config.velocityDamping,
        )

    ######################################################################
    # -- Properties -- #
    ######################################################################

    @property
    def width(self) -> int:
        '''Grid width [cells].'''
        return self._width

    @property
    def height(self) -> int:
        '''Grid height [cells].'''
        return self._height

    @property
    def nCells(self) -> int:
        '''Total number of cells.'''
        return self._width * self._height

    @property
    def kernel(self) -> DerivativeKernel:
        '''Derivative kernel used by the convolution pass.'''
        return self._kernel

    @property
    def currentGrid(self) -> np.ndarray:
        '''Height at time t, shape (height, width).'''
        return self._currentGrid

    @property
    def prevGrid(self) -> np.ndarray:
        '''Height at time t - dt, shape (height, width).'''
        return self._prevGrid

    @property
    def verticalDerivative(self) -> np.ndarray:
        '''Derivative field from the last convolution pass.'''
        return self._verticalDerivative

    @property
    def source(self) -> np.ndarray:
        '''Pending source amplitudes, consumed by the next frame.'''
        return self._source

    @property
    def obstruction(self) -> np.ndarray:
        '''Multiplicative damping mask in [0, 1].'''
        return self._obstruction

    @property
    def time(self) -> float:
        '''Accumulated simulation time since the last reset [s].'''
        return self._time

    @property
    def frame(self) -> int:
        '''Frames simulated since the last reset.'''
        return self._frame

    ######################################################################
    # -- Read Accessors -- #
    ######################################################################

    def getIdx(self, x: int, y: int) -> int:
        '''Linear index of (x, y), or const.invalidIndex outside the grid.'''
        return getIdx(x, y, self._width, self._height)

    def getHeight(self, x: int, y: int) -> float:
        '''Height at (x, y); const.outOfRangeHeight outside the grid.'''
        if self.getIdx(x, y) == const.invalidIndex:
            return const.outOfRangeHeight
        return float(self._currentGrid[y, x])

    def getObstruction(self, x: int, y: int) -> float:
        '''Obstruction at (x, y); const.outOfRangeObstruction outside the grid.'''
        if self.getIdx(x, y) == const.invalidIndex:
            return const.outOfRangeObstruction
        return float(self._obstruction[y, x])

    ######################################################################
    # -- Disturbances -- #
    ######################################################################

    def reset(self) -> None:
        '''
        Zero height, previous height, derivative and source fields,
        and clear all obstructions back to 1.
        '''
        self._currentGrid.fill(0.0)
        self._prevGrid.fill(0.0)
        self._verticalDerivative.fill(0.0)
        self._source.fill(0.0)
        self._obstruction.fill(1.0)

        self._time = 0.0
        self._frame = 0
        self._lastDelta = 0.0

    def placeSource(self, x: int, y: int, r: float, strength: float) -> None:
        '''
        Add a cone-shaped disturbance to the source field.

        Every cell at distance d < r from (x, y) receives
        (r - d) * strength. Contributions accumulate until the
        next simFrame consumes them. Cells outside the grid are
        skipped individually.

        Parameters:
        -----------
        x, y : int
            Brush center [cells]; may lie outside the grid
        r : float
            Brush radius [cells]
        strength : float
            Amplitude multiplier (sign sets crest or trough)
        '''
        x, y = int(x), int(y)
        extent = int(r + 0.5)
        if extent < 0:
            return

        xs, ys = self._brushCells(x, y, extent)
        contrib = r - np.sqrt((xs - x) ** 2 + (ys - y) ** 2)

        inside = contrib > 0.0
        self._source[ys[inside], xs[inside]] += contrib[inside] * strength

    def setObstruction(self, x: int, y: int, r: float, strength: float) -> None:
        '''
        Paint a square obstruction centered at (x, y).

        Cells within int(|r + 0.5|) of the center (Chebyshev
        distance) take min(1 - strength, current). Obstruction can
        only decrease here; reset() is the only way back to 1.
        Cells outside the grid are skipped individually.

        Parameters:
        -----------
        x, y : int
            Brush center [cells]
        r : float
            Brush half-extent [cells]
        strength : float
            0 leaves the water free, 1 blocks it completely
        '''
        x, y = int(x), int(y)
        extent = int(abs(r + 0.5))
        candidate = max(0.0, 1.0 - strength)

        xs, ys = self._brushCells(x, y, extent)
        self._obstruction[ys, xs] = np.minimum(self._obstruction[ys, xs], candidate)

    def _brushCells(self, x: int, y: int, extent: int) -> tuple[np.ndarray, np.ndarray]:
        '''
        In-grid cell coordinates of the square [x - e, x + e] x [y - e, y + e].

        Returns:
        --------
        tuple[np.ndarray, np.ndarray] : Flattened (xs, ys) integer arrays
        '''
        xRange = np.arange(max(x - extent, 0), min(x + extent, self._width - 1) + 1)
        yRange = np.arange(max(y - extent, 0), min(y + extent, self._height - 1) + 1)
        xs, ys = np.meshgrid(xRange, yRange, indexing='xy')
        return xs.ravel(), ys.ravel()

    ######################################################################
    # -- Frame Step -- #
    ######################################################################

    def simFrame(self, delta: float) -> SurfaceState:
        '''
        Advance the surface by one frame.

        Consumes and clears the source field, applies obstructions,
        recomputes the vertical derivative and integrates height.

        Parameters:
        -----------
        delta : float
            Frame time step [s], >= 0. Callers should clamp long
            frames (see stability.clampFrameDelta).

        Returns:
        --------
        SurfaceState : Diagnostics after the frame
        '''
        if delta < 0.0:
            raise ValueError(f'Frame delta must be >= 0, got {delta}')

        self._preprocess()
        self._convolve()
        self._propagate(delta)

        self._time += delta
        self._frame += 1
        self._lastDelta = delta

        return self.currentState

    def _preprocess(self) -> None:
        '''Apply pending sources and obstructions, then clear sources.'''
        self._currentGrid += self._source
        self._currentGrid *= self._obstruction
        self._source.fill(0.0)

    def _convolve(self) -> None:
        '''
        Recompute the vertical derivative from the current height.

        The height is mirror-padded by the kernel radius, then every
        tap adds a shifted window of the padded field. Taps are
        accumulated in row-major kernel order for every cell.
        '''
        p = self._kernel.radius
        kernelValues = self._kernel.values
        padded = reflectPad(self._currentGrid, p)

        h, w = self._height, self._width
        dv = self._verticalDerivative
        dv.fill(0.0)

        for dy in range(self._kernel.length):
            for dx in range(self._kernel.length):
                dv += kernelValues[dy, dx] * padded[dy:dy + h, dx:dx + w]

    def _propagate(self, delta: float) -> None:
        '''Semi-implicit damped wave update; shifts current into previous.'''
        alphaDt = self.velocityDamping * delta
        onePlusAlphaDt = 1.0 + alphaDt

        newGrid = (
            self._currentGrid * (2.0 - alphaDt) / onePlusAlphaDt
            - self._prevGrid / onePlusAlphaDt
            - self._verticalDerivative * self.accelerationTerm * delta * delta / onePlusAlphaDt
        )

        # prev <- current (pre-update), current <- new
        np.copyto(self._prevGrid, self._currentGrid)
        np.copyto(self._currentGrid, newGrid)

    ######################################################################
    # -- Diagnostics -- #
    ######################################################################

    @property
    def currentState(self) -> SurfaceState:
        '''Diagnostics snapshot of the current height field.'''
        absHeight = np.abs(self._currentGrid)
        return SurfaceState(
            time=self._time,
            frame=self._frame,
            delta=self._lastDelta,
            maxAbsHeight=float(absHeight.max()),
            meanAbsHeight=float(absHeight.mean()),
            energy=float(np.sum(self._currentGrid * self._currentGrid)),
            nObstructed=int(np.count_nonzero(self._obstruction < 1.0)),
            nCells=self.nCells,
        )

    def maxStableDelta(self) -> float:
        '''
        Largest frame delta satisfying both stability bounds
        for the current acceleration and damping.
        '''
        limits = [math.inf]
        if self.accelerationTerm > 0.0:
            limits.append(const.accelerationBoundFactor / math.sqrt(self.accelerationTerm))
        if self.velocityDamping > 0.0:
            limits.append(const.dampingBoundFactor / self.velocityDamping)
        return min(limits)
