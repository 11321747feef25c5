from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import Optional

from .routes import router
from .. import __version__
from ..algorithms import default_registry
from ..core.registry import ProviderRegistry


def create_app(registry: Optional[ProviderRegistry] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: register the built-in algorithms unless a registry was supplied
        app.state.registry = registry if registry is not None else default_registry()
        yield

    app = FastAPI(
        title="keysmith",
        description="Symmetric secret key generation service",
        version=__version__,
        lifespan=lifespan
    )

    app.include_router(router)

    return app


app = create_app()
