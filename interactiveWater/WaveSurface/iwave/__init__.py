# -- iWave Engine Package -- #

'''
Core iWave height-field engine.

Provides the derivative kernel, grid indexing, the CPU surface
implementation and stability helpers.

Sean Bowman [02/14/2026]
'''

from interactiveWater.WaveSurface.iwave.protocols import SurfaceConfig, SurfaceState, BrushStroke
from interactiveWater.WaveSurface.iwave.kernels import DerivativeKernel, buildDerivativeKernel
from interactiveWater.WaveSurface.iwave.iwaveSolver import IWaveSurface
from interactiveWater.WaveSurface.iwave.stability import StabilityReport, checkStability, clampFrameDelta
