"""
Endpoint subpackage.

Each module defines an APIRouter for one concern (participants,
statistics, export, health).  The routers are aggregated in
``router.py`` at the package level.
"""
