"""Users REST service: application settings and uvicorn launchers."""

from restful_backend.main import run_dev, run_prod
from restful_backend.settings import BackendSettings, get_settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
]
