"""
FastAPI dependencies (settings)
"""
from planner.config import get_settings as _get_settings


# Re-export get_settings для удобства: routes depend on it, tests override it
get_settings = _get_settings
