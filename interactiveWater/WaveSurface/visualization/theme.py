# -- Visualization Theme -- #

'''
Centralized dark-mode theme for all WaveSurface Plotly visualizations.

Sean Bowman [02/16/2026]
'''

# Plotly template
TEMPLATE = 'plotly_dark'

# Primary color palette
BLUE = '#42A5F5'
RED = '#EF5350'
GREEN = '#66BB6A'
ORANGE = '#FFA726'

# Neutrals
REFERENCE_LINE = '#888888'

# Diverging colorscale for signed heights (trough -> flat -> crest)
HEIGHT_COLORSCALE = 'RdBu_r'

# Obstruction overlay (blocked cells dark)
OBSTRUCTION_COLORSCALE = 'Greys_r'
