# -- Wave Surface Runner -- #

'''
Command-line entry point for running iWave surface simulations.

Builds a scenario, steps the surface at a fixed frame rate while
replaying its brush strokes, displays progress, and optionally
exports frame data and Plotly figures.

Usage:
    python -m interactiveWater.WaveSurface.runner                       # Small ripple pond
    python -m interactiveWater.WaveSurface.runner --scenario doubleSlit
    python -m interactiveWater.WaveSurface.runner --preset standard --plot
    python -m interactiveWater.WaveSurface.runner --config configs/pond_default.json
    python -m interactiveWater.WaveSurface.runner --no-export

Sean Bowman [02/16/2026]
'''

from __future__ import annotations

import argparse
import json
import os
import time as timeModule

from interactiveWater.WaveSurface.iwave.protocols import ScenarioSetup, SurfaceState
from interactiveWater.WaveSurface.iwave.stability import checkStability
from interactiveWater.WaveSurface.scenarios.rippleDrop import RippleDropConfig, createRippleDrop
from interactiveWater.WaveSurface.scenarios.registry import SCENARIO_NAMES, PRESET_NAMES, createScenario
from interactiveWater.WaveSurface.export.frameExporter import FrameExporter


#--------------------------------------------------------------------#
# -- CLI Argument Parser -- #
#--------------------------------------------------------------------#

def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        description='WaveSurface -- iWave interactive water surface simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--config', type=str, default=None,
        help='Path to JSON configuration file (ripple scenario)',
    )
    parser.add_argument(
        '--scenario', type=str, default='ripple',
        choices=list(SCENARIO_NAMES),
        help='Simulation scenario type (default: ripple)',
    )
    parser.add_argument(
        '--preset', type=str, default='small',
        choices=list(PRESET_NAMES),
        help='Scenario preset (default: small)',
    )
    parser.add_argument(
        '--no-export', action='store_true',
        help='Skip frame data export',
    )
    parser.add_argument(
        '--plot', action='store_true',
        help='Write Plotly HTML figures of the final frame',
    )
    parser.add_argument(
        '--output-dir', type=str, default='interactiveWater/WaveSurface/output',
        help='Output directory for exported frames (default: WaveSurface/output)',
    )

    return parser


#--------------------------------------------------------------------#
# -- Runner Class -- #
#--------------------------------------------------------------------#

class WaveSurfaceRunner:
    '''
    Runs an iWave scenario and stores results.

    Handles the full pipeline: stability check, frame loop with
    brush replay and progress reporting, optional export and plots.
    '''

    def __init__(self) -> None:
        self._exporter: FrameExporter = FrameExporter()

    @property
    def exporter(self) -> FrameExporter:
        '''Frame exporter holding the recorded frames.'''
        return self._exporter

    def runFromConfig(
        self,
        configPath: str,
        doExport: bool = True,
        exportDir: str = 'interactiveWater/WaveSurface/output',
        doPlot: bool = False,
    ) -> dict:
        '''
        Run a ripple drop scenario from a JSON configuration file.

        Parameters:
        -----------
        configPath : str
            Path to the JSON configuration file
        doExport : bool
            Whether to export frame data
        exportDir : str
            Output directory for frame export
        doPlot : bool
            Whether to write Plotly figures

        Returns:
        --------
        dict : Simulation results summary
        '''
        with open(configPath, 'r') as f:
            data = json.load(f)

        scenario = createRippleDrop(RippleDropConfig.fromDict(data))
        return self.runScenario(scenario, doExport=doExport, exportDir=exportDir, doPlot=doPlot)

    def runScenario(
        self,
        scenario: ScenarioSetup,
        doExport: bool = True,
        exportDir: str = 'interactiveWater/WaveSurface/output',
        doPlot: bool = False,
    ) -> dict:
        '''
        Run a prepared scenario to its end time.

        Parameters:
        -----------
        scenario : ScenarioSetup
            Configured surface and brush schedule
        doExport : bool
            Whether to export frame data
        exportDir : str
            Output directory for frame export
        doPlot : bool
            Whether to write Plotly figures

        Returns:
        --------
        dict : Simulation results summary
        '''
        config = scenario.config
        surface = scenario.surface
        schedule = scenario.strokesByFrame()

        print()
        print('=' * 62)
        print(f'  WAVESURFACE -- iWAVE {scenario.name.upper()} SIMULATION')
        print('=' * 62)
        print()

        #--------------------------------------------------------------------#
        # Scenario Setup
        #--------------------------------------------------------------------#
        print('-' * 62)
        print('  SCENARIO SETUP')
        print('-' * 62)
        print(f'  Grid:              {config.width:5d} x {config.height:<5d} cells')
        print(f'  Kernel Radius:     {config.kernelRadius:8d}')
        print(f'  Kernel Size:       {config.kernelLength:5d} x {config.kernelLength:<5d}')
        print(f'  Acceleration:      {config.accelerationTerm:8.2f}')
        print(f'  Damping:           {config.velocityDamping:8.2f}')
        print(f'  Frame Delta:       {config.frameDelta:8.4f} s')
        print(f'  Brush Strokes:     {len(scenario.strokes):8d}')
        print(f'  Obstructed Cells:  {surface.currentState.nObstructed:8d}')
        print(f'  End Time:          {config.endTime:8.2f} s')
        print()

        #--------------------------------------------------------------------#
        # Kernel and Stability
        #--------------------------------------------------------------------#
        print('-' * 62)
        print('  DERIVATIVE KERNEL')
        print('-' * 62)
        for line in surface.kernel.formatTable().splitlines():
            print(f'  {line}')
        print()

        report = checkStability(config.accelerationTerm, config.velocityDamping, config.frameDelta)
        print(f'  Max Acceleration:  {report.maxAccelerationTerm:8.2f}')
        print(f'  Max Damping:       {report.maxVelocityDamping:8.2f}')
        if report.isStable:
            print('  Stability:         OK')
        else:
            for message in report.messages:
                print(f'  WARNING: {message}')
        print()

        self._exporter.addFrame(surface.currentState, surface)

        #--------------------------------------------------------------------#
        # Simulation Loop
        #--------------------------------------------------------------------#
        print('-' * 62)
        print('  RUNNING SIMULATION')
        print('-' * 62)
        print()
        print(f'  {"Time":>8}  {"Frame":>8}  {"Max|h|":>10}  {"Mean|h|":>10}  {"Energy":>12}')
        print(f'  {"(s)":>8}  {"":>8}  {"":>10}  {"":>10}  {"sum(h^2)":>12}')
        print('  ' + '-' * 56)

        wallClockStart = timeModule.time()
        nextOutputTime = config.outputInterval
        printInterval = max(0.1, config.endTime / 20.0)
        nextPrintTime = printInterval
        state: SurfaceState = surface.currentState

        while surface.time < config.endTime:
            for stroke in schedule.get(surface.frame, []):
                stroke.applyTo(surface)

            state = surface.simFrame(config.frameDelta)

            if state.isDiverging:
                print(f'  Surface diverged at frame {state.frame}; stopping.')
                break

            if surface.time >= nextOutputTime:
                self._exporter.addFrame(state, surface)
                nextOutputTime += config.outputInterval

            if surface.time >= nextPrintTime:
                print(
                    f'  {state.time:8.4f}  {state.frame:8d}  {state.maxAbsHeight:10.4f}  '
                    f'{state.meanAbsHeight:10.5f}  {state.energy:12.4f}'
                )
                nextPrintTime += printInterval

        wallClockSeconds = timeModule.time() - wallClockStart

        finalState = surface.currentState
        self._exporter.addFrame(finalState, surface)

        print()
        print('  Simulation complete.')
        print(f'  Total frames:      {finalState.frame:8d}')
        print(f'  Wall-clock time:   {wallClockSeconds:8.1f} s')
        if wallClockSeconds > 0.0:
            print(f'  Frames per second: {finalState.frame / wallClockSeconds:8.1f}')
        print(f'  Frames recorded:   {self._exporter.nFrames:8d}')
        print()

        #--------------------------------------------------------------------#
        # Export
        #--------------------------------------------------------------------#
        exportPath = None
        if doExport:
            print('-' * 62)
            print('  EXPORTING FRAME DATA')
            print('-' * 62)

            exportPath = self._exporter.export(
                config=config,
                outputDir=exportDir,
                scenarioName=scenario.name,
            )
            print(f'  Exported to: {exportPath}')
            print()

        plotPaths: list[str] = []
        if doPlot:
            plotPaths = self._writePlots(scenario, exportDir)

        #--------------------------------------------------------------------#
        # Summary
        #--------------------------------------------------------------------#
        print('=' * 62)
        print('  SIMULATION SUMMARY')
        print('=' * 62)
        print(f'  Final Max |h|:     {finalState.maxAbsHeight:10.6f}')
        print(f'  Final Mean |h|:    {finalState.meanAbsHeight:10.6f}')
        print(f'  Final RMS h:       {finalState.rmsHeight:10.6f}')
        print(f'  Final Energy:      {finalState.energy:10.6f}')
        print('=' * 62)
        print()

        return {
            'finalState': finalState,
            'wallClockSeconds': wallClockSeconds,
            'nFrames': self._exporter.nFrames,
            'exportPath': exportPath,
            'plotPaths': plotPaths,
            'stability': report,
        }

    def _writePlots(self, scenario: ScenarioSetup, outputDir: str) -> list[str]:
        '''Write final-frame and diagnostics figures as HTML.'''
        from interactiveWater.WaveSurface.visualization.surfacePlots import (
            plotHeightField,
            plotSurface3D,
            plotDiagnostics,
        )

        print('-' * 62)
        print('  WRITING FIGURES')
        print('-' * 62)

        os.makedirs(outputDir, exist_ok=True)
        figures = {
            'heightField': plotHeightField(scenario.surface),
            'surface3D': plotSurface3D(scenario.surface),
            'diagnostics': plotDiagnostics(self._exporter.diagnostics),
        }

        paths = []
        for name, fig in figures.items():
            path = os.path.join(outputDir, f'waveSurface_{scenario.name}_{name}.html')
            fig.write_html(path)
            paths.append(path)
            print(f'  {path}')
        print()

        return paths


#--------------------------------------------------------------------#
# -- CLI Entry Point -- #
#--------------------------------------------------------------------#

def main() -> None:
    '''CLI entry point.'''
    parser = buildParser()
    args = parser.parse_args()

    runner = WaveSurfaceRunner()

    if args.config:
        runner.runFromConfig(
            args.config,
            doExport=not args.no_export,
            exportDir=args.output_dir,
            doPlot=args.plot,
        )
    else:
        scenario = createScenario(args.scenario, args.preset)
        runner.runScenario(
            scenario,
            doExport=not args.no_export,
            exportDir=args.output_dir,
            doPlot=args.plot,
        )


if __name__ == '__main__':
    main()
