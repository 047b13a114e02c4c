# -- Ripple Drop Scenario -- #

'''
Open pond with drops falling onto a flat surface.

Reproduces the interactive demo without a mouse: drops of the default
source brush hit the surface at scheduled frames, optionally around a
square pillar painted with the obstruction brush. Rings spread out,
reflect at the grid edges and diffract around the pillar.

Sean Bowman [02/15/2026]
'''

from __future__ import annotations

from dataclasses import dataclass, field

from interactiveWater.WaveSurface import constants as const
from interactiveWater.WaveSurface.iwave.protocols import SurfaceConfig, BrushStroke, ScenarioSetup
from interactiveWater.WaveSurface.iwave.iwaveSolver import IWaveSurface


######################################################################
# -- Ripple Drop Configuration -- #
######################################################################

@dataclass
class RippleDropConfig:
    '''
    Configuration for a ripple drop scenario.

    Parameters:
    -----------
    width, height : int
        Grid size [cells]
    kernelRadius : int
        Derivative kernel radius p
    drops : list[tuple[int, int, int]]
        (frame, x, y) of each drop
    dropRadius : float
        Source brush radius [cells]
    dropStrength : float
        Source brush strength
    pillarRadius : float
        Half-extent of a central pillar; 0 disables it
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

    width: int = const.screenWidth // const.displayDivFactor
    height: int = const.screenHeight // const.displayDivFactor
    kernelRadius: int = const.defaultKernelRadius
    drops: list[tuple[int, int, int]] = field(default_factory=list)
    dropRadius: float = const.sourceBrushRadius
    dropStrength: float = const.sourceBrushStrength
    pillarRadius: float = 0.0
    accelerationTerm: float = const.defaultAccelerationTerm
    velocityDamping: float = const.defaultVelocityDamping
    frameDelta: float = const.targetFrameTime
    endTime: float = 4.0
    outputInterval: float = 0.1

    @classmethod
    def small(cls) -> RippleDropConfig:
        '''
        Small pond for quick testing.

        64 x 48 grid, p = 3, two drops; runs in about a second.
        '''
        return cls(
            width=64,
            height=48,
            kernelRadius=3,
            drops=[(0, 20, 24), (15, 44, 20)],
            dropRadius=3.0,
            endTime=2.0,
        )

    @classmethod
    def standard(cls) -> RippleDropConfig:
        '''
        Demo-sized pond (640 x 360 screen / 4) with a central pillar.
        '''
        w = const.screenWidth // const.displayDivFactor
        h = const.screenHeight // const.displayDivFactor
        return cls(
            width=w,
            height=h,
            kernelRadius=const.defaultKernelRadius,
            drops=[(0, w // 4, h // 2), (30, 3 * w // 4, h // 3), (60, w // 2, 3 * h // 4)],
            pillarRadius=const.obstructionBrushRadius * 2.0,
            endTime=5.0,
        )

    @classmethod
    def fromDict(cls, data: dict) -> RippleDropConfig:
        '''Build from parsed JSON ('grid', 'iwave', 'simulation', 'drops').'''
        base = SurfaceConfig.fromDict(data)
        dropSection = data.get('drops', {})
        defaults = cls()

        return cls(
            width=base.width,
            height=base.height,
            kernelRadius=base.kernelRadius,
            drops=[tuple(d) for d in dropSection.get('schedule', [])],
            dropRadius=float(dropSection.get('radius', defaults.dropRadius)),
            dropStrength=float(dropSection.get('strength', defaults.dropStrength)),
            pillarRadius=float(dropSection.get('pillarRadius', defaults.pillarRadius)),
            accelerationTerm=base.accelerationTerm,
            velocityDamping=base.velocityDamping,
            frameDelta=base.frameDelta,
            endTime=base.endTime,
            outputInterval=base.outputInterval,
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


######################################################################
# -- Scenario Creation -- #
######################################################################

def createRippleDrop(dropConfig: RippleDropConfig) -> ScenarioSetup:
    '''
    Create a ripple drop scenario from configuration.

    The pillar (if any) is painted immediately; drops become source
    strokes scheduled at their frames. With no drops configured a
    single drop hits the grid center at frame 0.

    Parameters:
    -----------
    dropConfig : RippleDropConfig
        Scenario configuration

    Returns:
    --------
    ScenarioSetup : Configuration, surface and stroke schedule
    '''
    config = dropConfig.toSurfaceConfig()
    surface = IWaveSurface.fromConfig(config)

    if dropConfig.pillarRadius > 0.0:
        surface.setObstruction(
            config.width // 2,
            config.height // 2,
            dropConfig.pillarRadius,
            const.obstructionBrushStrength,
        )

    drops = dropConfig.drops or [(0, config.width // 2, config.height // 2)]

    strokes = [
        BrushStroke(
            frame=int(frame),
            kind='source',
            x=int(x),
            y=int(y),
            radius=dropConfig.dropRadius,
            strength=dropConfig.dropStrength,
        )
        for frame, x, y in drops
    ]

    return ScenarioSetup(name='ripple', config=config, surface=surface, strokes=strokes)
