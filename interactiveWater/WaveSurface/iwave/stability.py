# -- iWave Stability Checks -- #

'''
Caller-side checks for the CFL-like stability bound of the iWave
propagation step.

For a frame time step dt the semi-implicit update stays bounded when

    accelerationTerm <= (0.5 / dt)^2
    velocityDamping  <= 2 / dt

The surface itself never clamps or detects violations; these helpers
let an interactive loop validate its parameters and clamp long frames.

Sean Bowman [02/14/2026]
'''

from __future__ import annotations

from dataclasses import dataclass, field

from interactiveWater.WaveSurface import constants as const


@dataclass
class StabilityReport:
    '''
    Result of a stability check.

    Parameters:
    -----------
    delta : float
        Frame time step checked [s]
    accelerationTerm : float
        Acceleration coefficient checked
    velocityDamping : float
        Damping coefficient checked
    maxAccelerationTerm : float
        Upper bound (0.5 / delta)^2
    maxVelocityDamping : float
        Upper bound 2 / delta
    messages : list[str]
        One diagnostic per violated bound
    '''

    delta: float
    accelerationTerm: float
    velocityDamping: float
    maxAccelerationTerm: float
    maxVelocityDamping: float
    messages: list[str] = field(default_factory=list)

    @property
    def isStable(self) -> bool:
        '''True when both bounds hold.'''
        return not self.messages

    def raiseIfUnstable(self) -> None:
        '''
        Raises:
        -------
        RuntimeError : If any bound is violated
        '''
        if self.messages:
            raise RuntimeError('Unstable iWave parameters: ' + '; '.join(self.messages))


def stabilityLimits(delta: float) -> tuple[float, float]:
    '''
    Maximum acceleration term and velocity damping for a time step.

    Parameters:
    -----------
    delta : float
        Frame time step [s], > 0

    Returns:
    --------
    tuple[float, float] : ((0.5 / delta)^2, 2 / delta)
    '''
    if delta <= 0.0:
        raise ValueError(f'Frame delta must be positive, got {delta}')

    maxAcceleration = (const.accelerationBoundFactor / delta) ** 2
    maxDamping = const.dampingBoundFactor / delta
    return maxAcceleration, maxDamping


def checkStability(
    accelerationTerm: float,
    velocityDamping: float,
    delta: float,
) -> StabilityReport:
    '''
    Check propagation coefficients against the bound for delta.

    Parameters:
    -----------
    accelerationTerm : float
        Restoring acceleration coefficient
    velocityDamping : float
        Velocity damping coefficient
    delta : float
        Frame time step [s], > 0

    Returns:
    --------
    StabilityReport : Limits and any violation messages
    '''
    maxAcceleration, maxDamping = stabilityLimits(delta)

    report = StabilityReport(
        delta=delta,
        accelerationTerm=accelerationTerm,
        velocityDamping=velocityDamping,
        maxAccelerationTerm=maxAcceleration,
        maxVelocityDamping=maxDamping,
    )

    if accelerationTerm > maxAcceleration:
        report.messages.append(
            f'accelerationTerm {accelerationTerm:g} exceeds (0.5/dt)^2 = {maxAcceleration:g}'
        )
    if velocityDamping > maxDamping:
        report.messages.append(
            f'velocityDamping {velocityDamping:g} exceeds 2/dt = {maxDamping:g}'
        )

    return report


def clampFrameDelta(frameTime: float, targetFrameTime: float = const.targetFrameTime) -> float:
    '''
    Clamp a measured frame time to the target frame time.

    Slow frames are simulated as one target-length step instead of
    one long step that could break the stability bound.
    '''
    if frameTime > targetFrameTime:
        return targetFrameTime
    return max(frameTime, 0.0)
