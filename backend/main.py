"""FastAPI application entry point."""

from infrastructure.config import get_settings
from presentation.app import create_app


# Create FastAPI app
settings = get_settings()
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
