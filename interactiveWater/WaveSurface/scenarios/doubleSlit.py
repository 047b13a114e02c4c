# -- Double Slit Scenario -- #

'''
Plane waves passing through two slits in an obstruction wall.

A vertical wall is painted with the obstruction brush, leaving two
gaps. A line of oscillating sources near the left edge launches a
roughly planar wave train; behind the wall the two slit waves
interfere. Useful for checking that obstructions damp the field and
that the kernel's dispersion spreads waves out of the slits.

The source strength follows
    s(n) = amplitude * sin(2 * pi * frequency * n * dt)
for frames n < emitFrames.

Sean Bowman [02/15/2026]
'''

from __future__ import annotations

import math
from dataclasses import dataclass

from interactiveWater.WaveSurface import constants as const
from interactiveWater.WaveSurface.iwave.protocols import SurfaceConfig, BrushStroke, ScenarioSetup
from interactiveWater.WaveSurface.iwave.iwaveSolver import IWaveSurface


######################################################################
# -- Double Slit Configuration -- #
######################################################################

@dataclass
class DoubleSlitConfig:
    '''
    Configuration for a double slit scenario.

    Parameters:
    -----------
    width, height : int
        Grid size [cells]
    kernelRadius : int
        Derivative kernel radius p
    wallX : int
        Column of the obstruction wall
    slitWidth : int
        Opening of each slit [cells]
    slitSeparation : int
        Distance between slit centers [cells]
    sourceX : int
        Column of the source line
    sourceSpacing : int
        Spacing between point sources along the line [cells]
    sourceRadius : float
        Radius of each point source [cells]
    amplitude : float
        Source amplitude
    frequency : float
        Source oscillation frequency [Hz]
    emitFrames : int
        Number of frames the line keeps emitting
    accelerationTerm : float
        Restoring acceleration coefficient
    velocityDamping : float
        Velocity damping coefficient
    frameDelta : float
        Fixed frame time [s]
    endTime : float
        Simulation end time [s]
    outputInterval : float
        Time between exported frames [s]
    '''

    width: int = 120
    height: int = 90
    kernelRadius: int = const.defaultKernelRadius
    wallX: int = 40
    slitWidth: int = 4
    slitSeparation: int = 20
    sourceX: int = 6
    sourceSpacing: int = 2
    sourceRadius: float = 1.5
    amplitude: float = 0.3
    frequency: float = 1.5
    emitFrames: int = 90
    accelerationTerm: float = const.defaultAccelerationTerm * 5.0
    velocityDamping: float = const.defaultVelocityDamping * 0.5
    frameDelta: float = const.targetFrameTime
    endTime: float = 5.0
    outputInterval: float = 0.1

    @classmethod
    def small(cls) -> DoubleSlitConfig:
        '''Small tank for quick testing (60 x 40, p = 3).'''
        return cls(
            width=60,
            height=40,
            kernelRadius=3,
            wallX=20,
            slitWidth=3,
            slitSeparation=12,
            sourceX=4,
            emitFrames=45,
            endTime=2.5,
        )

    @classmethod
    def standard(cls) -> DoubleSlitConfig:
        '''Demo-sized tank (640 x 360 screen / 4).'''
        return cls(
            width=const.screenWidth // const.displayDivFactor,
            height=const.screenHeight // const.displayDivFactor,
            wallX=50,
            slitWidth=4,
            slitSeparation=24,
            emitFrames=120,
            endTime=6.0,
        )

    def toSurfaceConfig(self) -> SurfaceConfig:
        '''Surface and timing part of this configuration.'''
        return SurfaceConfig(
            width=self.width,
            height=self.height,
            kernelRadius=self.kernelRadius,
            accelerationTerm=self.accelerationTerm,
            velocityDamping=self.velocityDamping,
            frameDelta=self.frameDelta,
            endTime=self.endTime,
            outputInterval=self.outputInterval,
        )

    def slitRows(self) -> set[int]:
        '''Rows of the wall column left open by the two slits.'''
        center = self.height // 2
        halfSep = self.slitSeparation // 2
        openRows: set[int] = set()
        for slitCenter in (center - halfSep, center + halfSep):
            start = slitCenter - self.slitWidth // 2
            openRows.update(range(start, start + self.slitWidth))
        return openRows


######################################################################
# -- Scenario Creation -- #
######################################################################

def createDoubleSlit(slitConfig: DoubleSlitConfig) -> ScenarioSetup:
    '''
    Create a double slit scenario from configuration.

    Paints the wall (one-cell obstruction strokes, full strength)
    and schedules the oscillating source line for every emitting frame.

    Parameters:
    -----------
    slitConfig : DoubleSlitConfig
        Scenario configuration

    Returns:
    --------
    ScenarioSetup : Configuration, surface and stroke schedule

    Raises:
    -------
    ValueError : If the wall or source column lies outside the grid
    '''
    config = slitConfig.toSurfaceConfig()

    for name, column in (('wallX', slitConfig.wallX), ('sourceX', slitConfig.sourceX)):
        if not 0 <= column < config.width:
            raise ValueError(f'{name}={column} is outside a grid of width {config.width}')

    surface = IWaveSurface.fromConfig(config)

    ######################################################################
    # Paint the wall
    ######################################################################
    openRows = slitConfig.slitRows()
    for y in range(config.height):
        if y not in openRows:
            surface.setObstruction(slitConfig.wallX, y, 0.0, const.obstructionBrushStrength)

    ######################################################################
    # Schedule the source line
    ######################################################################
    omega = 2.0 * math.pi * slitConfig.frequency
    strokes: list[BrushStroke] = []

    for frame in range(slitConfig.emitFrames):
        strength = slitConfig.amplitude * math.sin(omega * frame * config.frameDelta)
        for y in range(0, config.height, max(1, slitConfig.sourceSpacing)):
            strokes.append(BrushStroke(
                frame=frame,
                kind='source',
                x=slitConfig.sourceX,
                y=y,
                radius=slitConfig.sourceRadius,
                strength=strength,
            ))

    return ScenarioSetup(name='doubleSlit', config=config, surface=surface, strokes=strokes)
