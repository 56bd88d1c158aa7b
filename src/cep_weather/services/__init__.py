"""
cep_weather.services

Service layer: the request pipelines behind each `/weather` route.
"""

# Package marker.
