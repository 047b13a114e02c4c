# -- Visualization Subpackage -- #

'''
Plotly-based views of iWave height fields and run diagnostics.
'''

from interactiveWater.WaveSurface.visualization.surfacePlots import (
    plotHeightField,
    plotSurface3D,
    plotDisplayImage,
    plotDiagnostics,
)
