# -- Surface Visualizations -- #

'''
Plotly-based plots of iWave height fields and run diagnostics.

Sean Bowman [02/16/2026]
'''

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from interactiveWater.WaveSurface import constants as const
from interactiveWater.WaveSurface.visualization import theme
from interactiveWater.WaveSurface.iwave.iwaveSolver import IWaveSurface
from interactiveWater.WaveSurface.export.surfaceDisplay import renderSurface


def plotHeightField(
    surface: IWaveSurface,
    extents: float = const.displayExtents,
    title: str | None = None,
) -> go.Figure:
    '''
    Heatmap of the current height field with obstructions outlined.

    Parameters:
    -----------
    surface : IWaveSurface
        Surface to plot
    extents : float
        Symmetric color range [-extents, extents]
    title : str | None
        Figure title (defaults to frame and time)

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    fig = go.Figure()

    fig.add_trace(go.Heatmap(
        z=surface.currentGrid,
        zmin=-extents,
        zmax=extents,
        colorscale=theme.HEIGHT_COLORSCALE,
        colorbar=dict(title='Height'),
        name='Height',
    ))

    # Outline obstructed regions
    if np.any(surface.obstruction < 1.0):
        fig.add_trace(go.Contour(
            z=surface.obstruction,
            contours=dict(start=0.5, end=0.5, size=1.0, coloring='lines'),
            line=dict(color=theme.ORANGE, width=2),
            showscale=False,
            name='Obstruction',
        ))

    state = surface.currentState
    fig.update_layout(
        title=title or f'Height Field (frame {state.frame}, t = {state.time:.2f} s)',
        xaxis_title='x (cells)',
        yaxis_title='y (cells)',
        template=theme.TEMPLATE,
        yaxis=dict(scaleanchor='x', autorange='reversed'),
        height=500,
    )

    return fig


def plotSurface3D(surface: IWaveSurface, heightScale: float = 1.0) -> go.Figure:
    '''
    3D surface plot of the current height field.

    Parameters:
    -----------
    surface : IWaveSurface
        Surface to plot
    heightScale : float
        Vertical exaggeration factor

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    xs = np.arange(surface.width)
    ys = np.arange(surface.height)

    fig = go.Figure(go.Surface(
        x=xs,
        y=ys,
        z=surface.currentGrid * heightScale,
        surfacecolor=surface.currentGrid,
        colorscale=theme.HEIGHT_COLORSCALE,
        cmid=0.0,
        showscale=False,
    ))

    fig.update_layout(
        title='Water Surface',
        template=theme.TEMPLATE,
        scene=dict(
            xaxis_title='x (cells)',
            yaxis_title='y (cells)',
            zaxis_title='Height',
            aspectmode='manual',
            aspectratio=dict(x=1.0, y=surface.height / surface.width, z=0.3),
        ),
        height=600,
    )

    return fig


def plotDisplayImage(surface: IWaveSurface, extents: float = const.displayExtents) -> go.Figure:
    '''The RGBA display image a renderer would upload for this frame.'''
    fig = go.Figure(go.Image(z=renderSurface(surface, extents)))
    fig.update_layout(
        title='Display Texture',
        template=theme.TEMPLATE,
        height=450,
    )
    return fig


def plotDiagnostics(diagnostics: dict[str, list[float]]) -> go.Figure:
    '''
    Time series of max |h|, mean |h| and energy over a run.

    Parameters:
    -----------
    diagnostics : dict[str, list[float]]
        FrameExporter.diagnostics ('times', 'maxAbsHeight',
        'meanAbsHeight', 'energy')

    Returns:
    --------
    go.Figure : Plotly figure with 2 stacked subplots
    '''
    times = diagnostics['times']

    fig = make_subplots(
        rows=2, cols=1, shared_xaxes=True,
        subplot_titles=('Height Magnitude', 'Energy Proxy sum(h^2)'),
    )

    fig.add_trace(
        go.Scatter(x=times, y=diagnostics['maxAbsHeight'], mode='lines',
                   name='max |h|', line=dict(color=theme.RED, width=2)),
        row=1, col=1,
    )
    fig.add_trace(
        go.Scatter(x=times, y=diagnostics['meanAbsHeight'], mode='lines',
                   name='mean |h|', line=dict(color=theme.BLUE, width=2)),
        row=1, col=1,
    )
    fig.add_trace(
        go.Scatter(x=times, y=diagnostics['energy'], mode='lines',
                   name='energy', line=dict(color=theme.GREEN, width=2)),
        row=2, col=1,
    )

    fig.update_xaxes(title_text='Time (s)', row=2, col=1)
    fig.update_layout(
        title='Run Diagnostics',
        template=theme.TEMPLATE,
        height=600,
    )

    return fig
