"""
cep_weather.clients

HTTP client boundary for everything the services call.

Responsibilities:
- ViaCEP (zipcode -> city), WeatherAPI (city -> temperature), and the weather
  service as seen from the zipcode service.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Provider payload quirks stay inside these modules; callers only see return values
# and `cep_weather.errors` exceptions.
