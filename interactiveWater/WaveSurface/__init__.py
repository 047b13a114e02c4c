# -- WaveSurface Package -- #

'''
Interactive height-field water surface using Tessendorf's iWave method.

A precomputed radial derivative kernel plus a damped wave integrator
give real-time ripples that can be disturbed and obstructed with a
brush, for interactive demos and computational engineering education.

Sean Bowman [02/14/2026]
'''

__version__ = '0.1.0'

from interactiveWater.WaveSurface.iwave.iwaveSolver import IWaveSurface
from interactiveWater.WaveSurface.iwave.protocols import SurfaceConfig, SurfaceState
from interactiveWater.WaveSurface.runner import WaveSurfaceRunner
from interactiveWater.WaveSurface.export.frameExporter import FrameExporter
