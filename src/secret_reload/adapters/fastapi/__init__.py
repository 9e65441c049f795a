"""FastAPI adapter – secret routes, health routes and the app factory."""
from secret_reload.adapters.fastapi.app import create_app
from secret_reload.adapters.fastapi.routers import FastAPIHealthRouter, FastAPISecretRouter

__all__ = ["FastAPIHealthRouter", "FastAPISecretRouter", "create_app"]
