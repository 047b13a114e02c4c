# -- iWave Surface Tests -- #

'''
Tests for the iWave surface: disturbances, frame stepping,
boundary reflection and read-back accessors.

Sean Bowman [02/16/2026]
'''

import math

import numpy as np
import pytest

from interactiveWater.WaveSurface import constants as const
from interactiveWater.WaveSurface.iwave.protocols import SurfaceConfig
from interactiveWater.WaveSurface.iwave.iwaveSolver import IWaveSurface
from interactiveWater.WaveSurface.iwave.gridIndexing import reflectCoordinate


def referenceDerivative(heights, kernel, reflect=True):
    '''Per-cell tap loop over a (height, width) field.'''
    h, w = heights.shape
    p = kernel.shape[0] // 2
    out = np.zeros_like(heights)
    for y in range(h):
        for x in range(w):
            total = 0.0
            for dy in range(kernel.shape[0]):
                for dx in range(kernel.shape[1]):
                    nx = x + dx - p
                    ny = y + dy - p
                    if reflect:
                        total += kernel[dy, dx] * heights[reflectCoordinate(ny, h), reflectCoordinate(nx, w)]
                    elif 0 <= nx < w and 0 <= ny < h:
                        total += kernel[dy, dx] * heights[ny, nx]
            out[y, x] = total
    return out


@pytest.fixture
def surface():
    return IWaveSurface(16, 16, kernelRadius=2)


######################################################################
# -- Construction -- #
######################################################################

@pytest.mark.parametrize('width, height, radius', [(0, 4, 1), (4, 0, 1), (-3, 4, 1), (4, 4, -1)])
def testInvalidConstructionRejected(width, height, radius):
    with pytest.raises(ValueError):
        IWaveSurface(width, height, kernelRadius=radius)


def testFieldsAllocatedAndClean(surface):
    for grid in (surface.currentGrid, surface.prevGrid, surface.verticalDerivative, surface.source):
        assert grid.shape == (16, 16)
        assert np.all(grid == 0.0)
    assert np.all(surface.obstruction == 1.0)
    assert surface.kernel.length == 5


def testFromConfig():
    config = SurfaceConfig(width=10, height=6, kernelRadius=1, accelerationTerm=5.0, velocityDamping=0.5)
    surface = IWaveSurface.fromConfig(config)

    assert (surface.width, surface.height) == (10, 6)
    assert surface.currentGrid.shape == (6, 10)
    assert surface.accelerationTerm == 5.0
    assert surface.velocityDamping == 0.5


######################################################################
# -- Read Accessors -- #
######################################################################

def testOutOfRangeSentinels(surface):
    for x, y in [(-1, 0), (0, -1), (16, 0), (0, 16)]:
        assert surface.getHeight(x, y) == const.outOfRangeHeight
        assert surface.getObstruction(x, y) == const.outOfRangeObstruction
        assert surface.getIdx(x, y) == const.invalidIndex


def testAccessorsReadRowMajorFields(surface):
    surface.currentGrid[3, 7] = 2.5
    surface.setObstruction(7, 3, 0.0, 0.25)

    assert surface.getHeight(7, 3) == 2.5
    assert surface.getObstruction(7, 3) == 0.75
    assert surface.getIdx(7, 3) == 7 + 3 * 16
    assert surface.currentGrid.ravel()[surface.getIdx(7, 3)] == 2.5


######################################################################
# -- Disturbances -- #
######################################################################

def testPlaceSourceCone(surface):
    surface.placeSource(8, 8, 3.0, 1.0)

    assert surface.source[8, 8] == 3.0
    assert surface.source[8, 9] == 2.0
    assert surface.source[9, 9] == pytest.approx(3.0 - math.sqrt(2.0))
    # distance == r contributes nothing
    assert surface.source[8, 11] == 0.0
    assert np.count_nonzero(surface.source) == 25


def testPlaceSourceAccumulates(surface):
    surface.placeSource(8, 8, 2.0, 1.0)
    surface.placeSource(8, 8, 2.0, 0.5)

    assert surface.source[8, 8] == pytest.approx(3.0)


def testPlaceSourceSkipsOutOfRangeCellsIndividually(surface):
    surface.placeSource(0, 0, 3.0, 1.0)

    assert surface.source[0, 0] == 3.0
    assert surface.source[0, 1] == 2.0
    assert surface.source[1, 0] == 2.0
    assert surface.source[1, 1] == pytest.approx(3.0 - math.sqrt(2.0))


def testPlaceSourceFullyOutsideIsNoop(surface):
    surface.placeSource(-20, 40, 3.0, 1.0)
    assert np.all(surface.source == 0.0)


def testSetObstructionSquareExtent(surface):
    # extent int(1.5) = 1 -> 3 x 3 square
    surface.setObstruction(5, 5, 1.0, 0.5)

    assert np.all(surface.obstruction[4:7, 4:7] == 0.5)
    assert np.count_nonzero(surface.obstruction < 1.0) == 9


def testSetObstructionIsMonotonic(surface):
    surface.setObstruction(5, 5, 1.0, 0.5)
    surface.setObstruction(5, 5, 1.0, 0.2)
    assert surface.getObstruction(5, 5) == 0.5

    surface.setObstruction(5, 5, 1.0, 0.9)
    assert surface.getObstruction(5, 5) == pytest.approx(0.1)

    surface.simFrame(1.0 / 30.0)
    assert surface.getObstruction(5, 5) == pytest.approx(0.1)

    surface.reset()
    assert surface.getObstruction(5, 5) == 1.0


def testSetObstructionAtCornerSkipsCellsIndividually(surface):
    surface.setObstruction(0, 0, 1.0, 1.0)

    assert np.all(surface.obstruction[0:2, 0:2] == 0.0)
    assert np.count_nonzero(surface.obstruction < 1.0) == 4


def testResetIsIdempotent(surface):
    surface.placeSource(8, 8, 3.0, 1.0)
    surface.setObstruction(2, 2, 1.0, 1.0)
    surface.simFrame(1.0 / 30.0)
    surface.placeSource(4, 4, 2.0, -1.0)

    surface.reset()
    once = [g.copy() for g in (surface.currentGrid, surface.prevGrid, surface.source, surface.obstruction)]
    surface.reset()
    twice = [surface.currentGrid, surface.prevGrid, surface.source, surface.obstruction]

    for a, b in zip(once, twice):
        assert np.array_equal(a, b)
    for x in range(16):
        for y in range(16):
            assert surface.getHeight(x, y) == 0.0
            assert surface.getObstruction(x, y) == 1.0
    assert surface.frame == 0
    assert surface.time == 0.0


######################################################################
# -- Frame Step -- #
######################################################################

def testSourceConsumedEveryFrame(surface):
    surface.placeSource(3, 3, 2.0, 1.0)
    surface.placeSource(12, 10, 4.0, -2.0)
    surface.simFrame(1.0 / 30.0)

    assert np.all(surface.source == 0.0)


def testNullUpdateOnCleanGrid():
    surface = IWaveSurface(12, 10, kernelRadius=2, accelerationTerm=0.0, velocityDamping=0.0)
    surface.simFrame(0.05)

    assert np.all(surface.currentGrid == 0.0)
    assert np.all(surface.prevGrid == 0.0)


def testNullUpdateKeepsSteadyField():
    '''With zero coefficients and h == h_prev the height does not move.'''
    surface = IWaveSurface(12, 10, kernelRadius=2, accelerationTerm=0.0, velocityDamping=0.0)
    field = np.random.default_rng(7).normal(size=(10, 12))
    surface.currentGrid[...] = field
    surface.prevGrid[...] = field

    surface.simFrame(0.05)

    assert np.array_equal(surface.currentGrid, field)
    assert np.array_equal(surface.prevGrid, field)


def testPropagationMatchesUpdateFormula():
    surface = IWaveSurface(10, 8, kernelRadius=2, accelerationTerm=30.0, velocityDamping=2.0)
    rng = np.random.default_rng(3)
    surface.currentGrid[...] = rng.normal(size=(8, 10))
    surface.prevGrid[...] = rng.normal(size=(8, 10))
    surface.setObstruction(4, 4, 0.0, 0.5)
    surface.placeSource(2, 2, 2.0, 1.0)

    h = (surface.currentGrid + surface.source) * surface.obstruction
    prev = surface.prevGrid.copy()
    delta = 1.0 / 30.0

    surface.simFrame(delta)

    derivative = referenceDerivative(h, surface.kernel.values)
    alphaDt = 2.0 * delta
    expected = (
        h * (2.0 - alphaDt) / (1.0 + alphaDt)
        - prev / (1.0 + alphaDt)
        - derivative * 30.0 * delta * delta / (1.0 + alphaDt)
    )

    assert np.allclose(surface.verticalDerivative, derivative, rtol=1e-12, atol=1e-12)
    assert np.allclose(surface.currentGrid, expected, rtol=1e-12, atol=1e-12)
    assert np.array_equal(surface.prevGrid, h)


def testEndToEndDrop():
    surface = IWaveSurface(16, 16, kernelRadius=2)
    surface.placeSource(8, 8, 3, 1.0)
    surface.simFrame(1.0 / 30.0)

    assert np.all(surface.source == 0.0)
    assert surface.getHeight(8, 8) != 0.0
    assert surface.getHeight(8, 8) > 0.0

    surface.reset()
    assert surface.getHeight(8, 8) == 0.0
    assert surface.getObstruction(8, 8) == 1.0


def testNegativeDropGivesTrough():
    surface = IWaveSurface(16, 16, kernelRadius=2)
    surface.placeSource(8, 8, 3, -1.0)
    surface.simFrame(1.0 / 30.0)

    assert surface.getHeight(8, 8) < 0.0


def testCornerSourceUsesReflectedSamples():
    surface = IWaveSurface(16, 16, kernelRadius=2)
    surface.placeSource(0, 0, 2.0, 1.0)
    heights = surface.source.copy()

    surface.simFrame(1.0 / 30.0)

    reflected = referenceDerivative(heights, surface.kernel.values, reflect=True)
    zeroPadded = referenceDerivative(heights, surface.kernel.values, reflect=False)

    assert np.all(np.isfinite(surface.currentGrid))
    assert np.allclose(surface.verticalDerivative, reflected, rtol=1e-12, atol=1e-12)
    assert not np.isclose(surface.verticalDerivative[0, 0], zeroPadded[0, 0])


def testKernelLargerThanGridStaysInRange():
    surface = IWaveSurface(3, 2, kernelRadius=4)
    surface.placeSource(1, 1, 1.5, 1.0)
    heights = surface.source.copy()

    surface.simFrame(1.0 / 30.0)

    assert np.allclose(surface.verticalDerivative, referenceDerivative(heights, surface.kernel.values))


def testObstructionBlocksHeight(surface):
    surface.setObstruction(8, 8, 1.0, 1.0)
    surface.placeSource(8, 8, 3.0, 1.0)
    surface.simFrame(1.0 / 30.0)

    # Blocked cells are zeroed before propagation
    assert np.all(surface.prevGrid[7:10, 7:10] == 0.0)


def testDeterminism():
    def run():
        surface = IWaveSurface(16, 12, kernelRadius=2)
        surface.setObstruction(4, 6, 1.0, 0.7)
        for frame in range(5):
            surface.placeSource(3 + frame, 5, 2.5, 1.0)
            surface.simFrame(1.0 / 30.0)
        return surface

    a, b = run(), run()
    assert np.array_equal(a.kernel.values, b.kernel.values)
    assert np.array_equal(a.currentGrid, b.currentGrid)
    assert np.array_equal(a.prevGrid, b.prevGrid)


def testNegativeDeltaRejected(surface):
    with pytest.raises(ValueError):
        surface.simFrame(-0.01)


def testStateTracksFramesAndTime(surface):
    surface.placeSource(8, 8, 3.0, 1.0)
    for _ in range(3):
        state = surface.simFrame(0.02)

    assert state.frame == 3
    assert state.time == pytest.approx(0.06)
    assert state.delta == 0.02
    assert state.maxAbsHeight == pytest.approx(np.abs(surface.currentGrid).max())
    assert state.energy == pytest.approx(np.sum(surface.currentGrid ** 2))
    assert state.nCells == 256
    assert not state.isDiverging


def testMaxStableDelta():
    surface = IWaveSurface(4, 4, kernelRadius=0, accelerationTerm=20.0, velocityDamping=1.0)
    assert surface.maxStableDelta() == pytest.approx(0.5 / math.sqrt(20.0))

    surface.accelerationTerm = 0.0
    surface.velocityDamping = 0.0
    assert surface.maxStableDelta() == math.inf
