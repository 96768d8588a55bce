"""
Prefect flows.

Flows:
- solve: Observation log -> possible patterns per day, conflicts reported
- forecast: Simulator -> twelve month forecasts written to the data store

Usage (local):
    python -m weather_seer.flows.solve observations.json
    python -m weather_seer.flows.forecast

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m weather_seer.flows.forecast
"""
