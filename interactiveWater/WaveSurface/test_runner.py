# -- Runner Integration Test -- #

'''
Integration tests for the WaveSurface runner, CLI parser and plots.

Sean Bowman [02/16/2026]
'''

import json
import os

import plotly.graph_objects as go

from interactiveWater.WaveSurface.runner import WaveSurfaceRunner, buildParser
from interactiveWater.WaveSurface.scenarios.rippleDrop import RippleDropConfig, createRippleDrop
from interactiveWater.WaveSurface.visualization.surfacePlots import (
    plotHeightField,
    plotSurface3D,
    plotDisplayImage,
    plotDiagnostics,
)


def tinyRipple(**overrides):
    options = dict(
        width=24,
        height=20,
        kernelRadius=2,
        drops=[(0, 12, 10), (3, 5, 5)],
        dropRadius=3.0,
        pillarRadius=1.0,
        endTime=0.2,
        outputInterval=0.05,
    )
    options.update(overrides)
    return createRippleDrop(RippleDropConfig(**options))


def testRunScenarioExportsFrames(tmp_path, capsys):
    runner = WaveSurfaceRunner()
    results = runner.runScenario(tinyRipple(), doExport=True, exportDir=str(tmp_path))

    finalState = results['finalState']
    assert finalState.frame >= 6
    assert finalState.maxAbsHeight > 0.0
    assert not finalState.isDiverging
    assert results['stability'].isStable
    assert results['nFrames'] >= 3
    assert os.path.exists(results['exportPath'])

    output = capsys.readouterr().out
    assert 'SIMULATION SUMMARY' in output
    assert 'DERIVATIVE KERNEL' in output


def testRunScenarioWarnsWhenUnstable(tmp_path, capsys):
    scenario = tinyRipple(accelerationTerm=1000.0, endTime=0.1)
    results = WaveSurfaceRunner().runScenario(scenario, doExport=False, exportDir=str(tmp_path))

    assert not results['stability'].isStable
    assert results['exportPath'] is None
    assert 'WARNING' in capsys.readouterr().out


def testRunFromConfig(tmp_path):
    configPath = tmp_path / 'pond.json'
    configPath.write_text(json.dumps({
        'grid': {'width': 20, 'height': 16},
        'iwave': {'kernelRadius': 1},
        'simulation': {'endTime': 0.1, 'outputInterval': 0.05},
        'drops': {'radius': 2.0, 'schedule': [[0, 10, 8]]},
    }))

    results = WaveSurfaceRunner().runFromConfig(str(configPath), doExport=False, exportDir=str(tmp_path))

    assert results['finalState'].nCells == 320
    assert results['finalState'].maxAbsHeight > 0.0


def testRunWritesPlots(tmp_path):
    results = WaveSurfaceRunner().runScenario(
        tinyRipple(endTime=0.1), doExport=False, exportDir=str(tmp_path), doPlot=True,
    )

    assert len(results['plotPaths']) == 3
    assert all(os.path.exists(p) for p in results['plotPaths'])


def testParserDefaults():
    args = buildParser().parse_args([])

    assert args.scenario == 'ripple'
    assert args.preset == 'small'
    assert not args.no_export
    assert args.config is None


def testFigures():
    scenario = tinyRipple()
    surface = scenario.surface
    for stroke in scenario.strokes:
        stroke.applyTo(surface)
    surface.simFrame(scenario.config.frameDelta)

    heightFig = plotHeightField(surface)
    assert isinstance(heightFig, go.Figure)
    # Heatmap plus obstruction outline
    assert len(heightFig.data) == 2

    assert isinstance(plotSurface3D(surface), go.Figure)
    assert isinstance(plotDisplayImage(surface), go.Figure)

    diagnostics = {'times': [0.0, 0.1], 'maxAbsHeight': [0.0, 1.0], 'meanAbsHeight': [0.0, 0.1], 'energy': [0.0, 2.0]}
    assert len(plotDiagnostics(diagnostics).data) == 3
