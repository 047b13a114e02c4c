# -- Simulation Scenarios Package -- #

'''
Pre-configured scenarios for the iWave surface.

Each scenario provides a configured surface, pre-painted
obstructions and a schedule of brush strokes.

Sean Bowman [02/15/2026]
'''

from interactiveWater.WaveSurface.scenarios.rippleDrop import RippleDropConfig, createRippleDrop
from interactiveWater.WaveSurface.scenarios.doubleSlit import DoubleSlitConfig, createDoubleSlit
from interactiveWater.WaveSurface.scenarios.registry import createScenario
