"""
cep_weather.api

HTTP surface of both services (FastAPI).
"""

# Package marker.
