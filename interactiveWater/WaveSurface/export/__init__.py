# -- Export Package -- #

'''
Data export utilities for iWave surface runs.

Exports frame data as JSON and maps fields to RGBA display pixels.

Sean Bowman [02/15/2026]
'''

from interactiveWater.WaveSurface.export.frameExporter import FrameExporter
from interactiveWater.WaveSurface.export.surfaceDisplay import heightsToPixels, renderSurface
