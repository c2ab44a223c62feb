"""Chart request schema and renderer payload helpers.

The pure `analysis` package builds chart data; this package turns those
results into Chart.js and 3D scene payloads and encodes saved chart requests.
"""
