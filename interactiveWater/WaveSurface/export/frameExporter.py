# -- Surface Frame Exporter -- #

'''
Exports iWave surface frames as JSON for visualization.

Collects height-field snapshots during a run and writes them to a
single JSON file that an external viewer can play back.

Sean Bowman [02/15/2026]
'''

from __future__ import annotations

import json
import os
from datetime import datetime

import numpy as np

from interactiveWater.WaveSurface.iwave.protocols import SurfaceConfig, SurfaceState
from interactiveWater.WaveSurface.iwave.iwaveSolver import IWaveSurface


class FrameExporter:
    '''
    Collects and exports surface frame data as JSON.

    Usage:
        exporter = FrameExporter()
        # During simulation loop:
        exporter.addFrame(state, surface)
        # After simulation:
        exporter.export(config, outputDir='output')

    Output JSON format:
    {
        "meta": { "type": "iwaveSurface", "width": 160, "height": 90, ... },
        "config": { "kernelRadius": 6, "accelerationTerm": 20.0, ... },
        "kernel": [[...], ...],
        "obstruction": [[...], ...],
        "frames": [
            { "time": 0.0, "frame": 0, "heights": [[...], ...] },
            ...
        ],
        "diagnostics": {
            "times": [...], "maxAbsHeight": [...], "meanAbsHeight": [...], "energy": [...]
        }
    }

    Parameters:
    -----------
    precision : int
        Decimal places kept for exported heights
    '''

    def __init__(self, precision: int = 5) -> None:
        self._precision = precision
        self._frames: list[dict] = []
        self._kernel: list | None = None
        self._obstruction: list | None = None
        self._diagnostics: dict[str, list[float]] = {
            'times': [],
            'maxAbsHeight': [],
            'meanAbsHeight': [],
            'energy': [],
        }

    @property
    def nFrames(self) -> int:
        '''Number of collected frames.'''
        return len(self._frames)

    @property
    def frames(self) -> list[dict]:
        '''Collected frame records.'''
        return self._frames

    @property
    def diagnostics(self) -> dict[str, list[float]]:
        '''Diagnostic time series, one entry per frame.'''
        return self._diagnostics

    def addFrame(self, state: SurfaceState, surface: IWaveSurface) -> None:
        '''
        Record a surface frame.

        The latest obstruction mask and the kernel are kept once,
        not per frame.

        Parameters:
        -----------
        state : SurfaceState
            Diagnostics for the frame
        surface : IWaveSurface
            Surface to snapshot
        '''
        frame = {
            'time': round(state.time, 6),
            'frame': state.frame,
            'heights': np.round(surface.currentGrid, self._precision).tolist(),
        }
        self._frames.append(frame)

        self._obstruction = np.round(surface.obstruction, 4).tolist()
        if self._kernel is None:
            self._kernel = np.round(surface.kernel.values, 8).tolist()

        self._diagnostics['times'].append(round(state.time, 6))
        self._diagnostics['maxAbsHeight'].append(round(state.maxAbsHeight, 6))
        self._diagnostics['meanAbsHeight'].append(round(state.meanAbsHeight, 6))
        self._diagnostics['energy'].append(round(state.energy, 6))

    def export(
        self,
        config: SurfaceConfig,
        outputDir: str = 'interactiveWater/WaveSurface/output',
        scenarioName: str = 'ripple',
    ) -> str:
        '''
        Write all collected frames to a JSON file.

        Parameters:
        -----------
        config : SurfaceConfig
            Surface configuration for metadata
        outputDir : str
            Output directory path
        scenarioName : str
            Scenario name for the filename

        Returns:
        --------
        str : Path to the exported JSON file
        '''
        os.makedirs(outputDir, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        filename = f'waveSurface_{scenarioName}_{timestamp}.json'
        filepath = os.path.join(outputDir, filename)

        output = {
            'meta': {
                'type': 'iwaveSurface',
                'width': config.width,
                'height': config.height,
                'nFrames': len(self._frames),
                'created': datetime.now().isoformat(),
            },
            'config': {
                'kernelRadius': config.kernelRadius,
                'accelerationTerm': config.accelerationTerm,
                'velocityDamping': config.velocityDamping,
                'frameDelta': config.frameDelta,
                'endTime': config.endTime,
            },
            'kernel': self._kernel,
            'obstruction': self._obstruction,
            'frames': self._frames,
            'diagnostics': self._diagnostics,
        }

        with open(filepath, 'w') as f:
            json.dump(output, f, indent=None, separators=(',', ':'))

        return filepath
