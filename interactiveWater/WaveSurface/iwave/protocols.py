# -- iWave Surface Protocols -- #

'''
Configuration, state dataclasses and the surface simulation protocol.

Defines SurfaceConfig (grid size, kernel radius, propagation
coefficients, timing), SurfaceState (per-frame diagnostics),
BrushStroke (a scheduled source/obstruction paint) and the
SurfaceSim protocol every height-field surface must satisfy.

Sean Bowman [02/14/2026]
'''

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Protocol, TYPE_CHECKING

import numpy as np

from interactiveWater.WaveSurface import constants as const

if TYPE_CHECKING:
    from interactiveWater.WaveSurface.iwave.iwaveSolver import IWaveSurface


######################################################################
# -- Surface Configuration -- #
######################################################################

@dataclass
class SurfaceConfig:
    '''
    Configuration for an iWave surface simulation.

    Parameters:
    -----------
    width : int
        Grid width [cells]
    height : int
        Grid height [cells]
    kernelRadius : int
        Derivative kernel radius p (kernel side 2p + 1)
    accelerationTerm : float
        Restoring acceleration coefficient
    velocityDamping : float
        Velocity damping coefficient alpha
    frameDelta : float
        Fixed frame time step [s]
    endTime : float
        Simulation end time [s]
    outputInterval : float
        Time between exported frames [s]
    '''

    width: int = const.screenWidth // const.displayDivFactor
    height: int = const.screenHeight // const.displayDivFactor
    kernelRadius: int = const.defaultKernelRadius
    accelerationTerm: float = const.defaultAccelerationTerm
    velocityDamping: float = const.defaultVelocityDamping
    frameDelta: float = const.targetFrameTime
    endTime: float = 5.0
    outputInterval: float = 0.1

    @property
    def nCells(self) -> int:
        '''Total number of grid cells.'''
        return self.width * self.height

    @property
    def kernelLength(self) -> int:
        '''Kernel side length 2p + 1.'''
        return 2 * self.kernelRadius + 1

    def validate(self) -> None:
        '''
        Check construction parameters.

        Raises:
        -------
        ValueError : On non-positive grid size, negative kernel radius
            or non-positive frame time
        '''
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f'Grid dimensions must be positive, got {self.width} x {self.height}'
            )
        if self.kernelRadius < 0:
            raise ValueError(f'Kernel radius must be >= 0, got {self.kernelRadius}')
        if self.frameDelta <= 0.0:
            raise ValueError(f'Frame delta must be positive, got {self.frameDelta}')

    @classmethod
    def fromJson(cls, configPath: str) -> SurfaceConfig:
        '''
        Load configuration from a JSON file.

        Reads the 'grid', 'iwave', and 'simulation' sections;
        missing keys fall back to the defaults.

        Parameters:
        -----------
        configPath : str
            Path to the JSON configuration file

        Returns:
        --------
        SurfaceConfig : Loaded configuration
        '''
        with open(configPath, 'r') as f:
            data = json.load(f)

        return cls.fromDict(data)

    @classmethod
    def fromDict(cls, data: dict) -> SurfaceConfig:
        '''Build a configuration from parsed JSON sections.'''
        gridSection = data.get('grid', {})
        iwaveSection = data.get('iwave', {})
        simSection = data.get('simulation', {})

        defaults = cls()
        config = cls(
            width=int(gridSection.get('width', defaults.width)),
            height=int(gridSection.get('height', defaults.height)),
            kernelRadius=int(iwaveSection.get('kernelRadius', defaults.kernelRadius)),
            accelerationTerm=float(iwaveSection.get('accelerationTerm', defaults.accelerationTerm)),
            velocityDamping=float(iwaveSection.get('velocityDamping', defaults.velocityDamping)),
            frameDelta=float(simSection.get('frameDelta', defaults.frameDelta)),
            endTime=float(simSection.get('endTime', defaults.endTime)),
            outputInterval=float(simSection.get('outputInterval', defaults.outputInterval)),
        )
        config.validate()
        return config


######################################################################
# -- Surface State -- #
######################################################################

@dataclass
class SurfaceState:
    '''
    Snapshot diagnostics of the surface after a frame.

    Parameters:
    -----------
    time : float
        Accumulated simulation time [s]
    frame : int
        Number of frames simulated since the last reset
    delta : float
        Time step of the last frame [s]
    maxAbsHeight : float
        Maximum |h| over the grid
    meanAbsHeight : float
        Mean |h| over the grid
    energy : float
        Energy proxy sum(h^2)
    nObstructed : int
        Number of cells with obstruction < 1
    nCells : int
        Total number of grid cells
    '''

    time: float
    frame: int
    delta: float
    maxAbsHeight: float
    meanAbsHeight: float
    energy: float
    nObstructed: int
    nCells: int

    @property
    def rmsHeight(self) -> float:
        '''Root-mean-square height sqrt(sum(h^2) / nCells).'''
        if self.nCells == 0:
            return 0.0
        return float(np.sqrt(self.energy / self.nCells))

    @property
    def isDiverging(self) -> bool:
        '''True when heights have become non-finite.'''
        return not (np.isfinite(self.maxAbsHeight) and np.isfinite(self.energy))


######################################################################
# -- Brush Stroke -- #
######################################################################

@dataclass
class BrushStroke:
    '''
    A source or obstruction paint applied before a given frame.

    Parameters:
    -----------
    frame : int
        Frame index the stroke is applied before
    kind : str
        'source' or 'obstruction'
    x, y : int
        Brush center [cells]
    radius : float
        Brush radius [cells]
    strength : float
        Source amplitude or obstruction strength
    '''

    frame: int
    kind: str
    x: int
    y: int
    radius: float
    strength: float

    def applyTo(self, surface: SurfaceSim) -> None:
        '''
        Paint this stroke onto a surface.

        Raises:
        -------
        ValueError : If the stroke kind is unknown
        '''
        if self.kind == 'source':
            surface.placeSource(self.x, self.y, self.radius, self.strength)
        elif self.kind == 'obstruction':
            surface.setObstruction(self.x, self.y, self.radius, self.strength)
        else:
            raise ValueError(f'Unknown brush stroke kind: {self.kind}')


######################################################################
# -- Scenario Setup -- #
######################################################################

@dataclass
class ScenarioSetup:
    '''
    Ready-to-run scenario: configuration, surface and brush schedule.

    Parameters:
    -----------
    name : str
        Scenario name (used for export filenames)
    config : SurfaceConfig
        Surface and timing configuration
    surface : IWaveSurface
        Initialized surface (obstructions may already be painted)
    strokes : list[BrushStroke]
        Brush strokes to apply before their frame
    '''

    name: str
    config: SurfaceConfig
    surface: IWaveSurface
    strokes: list[BrushStroke] = field(default_factory=list)

    def strokesByFrame(self) -> dict[int, list[BrushStroke]]:
        '''Group strokes by the frame they are applied before.'''
        schedule: dict[int, list[BrushStroke]] = {}
        for stroke in self.strokes:
            schedule.setdefault(stroke.frame, []).append(stroke)
        return schedule


######################################################################
# -- Surface Protocol -- #
######################################################################

class SurfaceSim(Protocol):
    '''Protocol for interactive height-field surface simulations.'''

    def placeSource(self, x: int, y: int, r: float, strength: float) -> None:
        '''Add a circular disturbance of radius r centered at (x, y).'''
        ...

    def setObstruction(self, x: int, y: int, r: float, strength: float) -> None:
        '''Paint a square obstruction of extent r centered at (x, y).'''
        ...

    def simFrame(self, delta: float) -> SurfaceState:
        '''Advance the surface by one frame of length delta.'''
        ...

    def reset(self) -> None:
        '''Return the surface to a flat, unobstructed state.'''
        ...

    def getHeight(self, x: int, y: int) -> float:
        '''Height at a cell, or a sentinel outside the grid.'''
        ...

    def getObstruction(self, x: int, y: int) -> float:
        '''Obstruction at a cell, or 1.0 outside the grid.'''
        ...

    @property
    def currentState(self) -> SurfaceState:
        '''Current diagnostics snapshot.'''
        ...
