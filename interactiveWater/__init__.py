# -- Interactive Water Package -- #

'''
Master package for interactive water simulations.

Domain-specific sub-packages:
    - WaveSurface: iWave height-field surface for real-time interaction

Sean Bowman [02/14/2026]
'''
