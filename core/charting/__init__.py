"""Chart assembly and rendering helpers.

The assemblers turn static class stat tables plus a user selection into a
`ChartSpec`; `render.chartjs_config` turns that into the Chart.js payload used
by the JSON endpoints.
"""
