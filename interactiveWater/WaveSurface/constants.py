# -- Constants for iWave Surface Simulation -- #

'''
Numerical constants and interactive defaults for the iWave
height-field water surface simulation.

Grid quantities are dimensionless (one unit = one grid cell).
Time is in seconds of wall-clock frame time.

References:
-----------
Tessendorf (2004) -- Interactive Water Surfaces

Sean Bowman [02/14/2026]
'''

#--------------------------------------------------------------------#
# -- Derivative Kernel Quadrature -- #
#--------------------------------------------------------------------#

# Number of quadrature steps in the Bessel-weighted Gaussian integral
# G(r) = sum_i q_i^2 * exp(-sigma * q_i^2) * J0(q_i * r), q_i = i * dq
kernelQuadratureSteps: int = 10000

# Quadrature step size dq
kernelQuadratureStep: float = 0.001

# Gaussian damping factor sigma in exp(-sigma * q^2)
kernelSigma: float = 1.0

# Default kernel radius p (kernel side = 2p + 1)
defaultKernelRadius: int = 6

#--------------------------------------------------------------------#
# -- Wave Propagation -- #
#--------------------------------------------------------------------#

# Acceleration term (gravity-like restoring coefficient)
# Stable for accelerationTerm <= (0.5 / delta)^2
#   30 fps: <= 225,  60 fps: <= 899
defaultAccelerationTerm: float = 20.0

# Velocity damping (alpha)
# Stable for velocityDamping <= 2 / delta
#   30 fps: <= 60,  60 fps: <= 120
defaultVelocityDamping: float = 1.0

# Numerator of the acceleration bound (0.5 / delta)^2
accelerationBoundFactor: float = 0.5

# Numerator of the damping bound 2 / delta
dampingBoundFactor: float = 2.0

#--------------------------------------------------------------------#
# -- Frame Timing -- #
#--------------------------------------------------------------------#

# Target frame rate of the interactive loop [1/s]
targetFps: int = 30

# Target frame time [s]; longer frames are clamped to this value
targetFrameTime: float = 1.0 / targetFps

#--------------------------------------------------------------------#
# -- Read-Back Sentinels -- #
#--------------------------------------------------------------------#

# Height reported for cells outside the grid
outOfRangeHeight: float = 0.5

# Obstruction reported for cells outside the grid (unobstructed)
outOfRangeObstruction: float = 1.0

# Linear index returned for cells outside the grid
invalidIndex: int = -1

#--------------------------------------------------------------------#
# -- Interactive Brush Defaults -- #
#--------------------------------------------------------------------#

# Source brush (left mouse)
sourceBrushRadius: float = 5.0
sourceBrushStrength: float = 1.0

# Obstruction brush (middle mouse); strength 1 paints a full block
obstructionBrushRadius: float = 2.0
obstructionBrushStrength: float = 1.0

#--------------------------------------------------------------------#
# -- Display -- #
#--------------------------------------------------------------------#

# Heights are clamped to [-displayExtents, displayExtents] for display
displayExtents: float = 5.0

# Screen size and downscale factor of the interactive demo
# Grid size = screen size / displayDivFactor
screenWidth: int = 640
screenHeight: int = 360
displayDivFactor: int = 4
