# -- Scenario Registry -- #

'''
Name-based lookup of scenario presets.

Sean Bowman [02/15/2026]
'''

from __future__ import annotations

from interactiveWater.WaveSurface.iwave.protocols import ScenarioSetup
from interactiveWater.WaveSurface.scenarios.rippleDrop import RippleDropConfig, createRippleDrop
from interactiveWater.WaveSurface.scenarios.doubleSlit import DoubleSlitConfig, createDoubleSlit


SCENARIO_NAMES = ('ripple', 'doubleSlit')
PRESET_NAMES = ('small', 'standard')


def createScenario(scenarioName: str, preset: str = 'small') -> ScenarioSetup:
    '''
    Create a scenario by name and preset.

    Parameters:
    -----------
    scenarioName : str
        'ripple' or 'doubleSlit'
    preset : str
        'small' or 'standard'

    Returns:
    --------
    ScenarioSetup : Ready-to-run scenario

    Raises:
    -------
    ValueError : If the scenario or preset is unknown
    '''
    if preset not in PRESET_NAMES:
        raise ValueError(f'Unknown preset: {preset}')

    if scenarioName == 'ripple':
        return createRippleDrop(getattr(RippleDropConfig, preset)())
    elif scenarioName == 'doubleSlit':
        return createDoubleSlit(getattr(DoubleSlitConfig, preset)())
    else:
        raise ValueError(f'Unknown scenario: {scenarioName}')
