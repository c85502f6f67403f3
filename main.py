"""
Main entry point for the FastAPI application.
"""
import sys
from pathlib import Path

# Add the project root to Python path before imports
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from villa_docs.api.app import create_app
from villa_docs.api.config import settings

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
        access_log=True
    )
