"""
Service layer abstraction.

Services derive read‑only views from the participant store
(statistics, CSV export) so the API handlers stay thin.
"""
