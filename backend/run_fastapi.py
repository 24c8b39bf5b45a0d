"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn src.fastapi_app:app --host 0.0.0.0 --port 8000 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from src.config.settings import get_config

if __name__ == "__main__":
    config = get_config()

    print(f"Starting FastAPI application in {config.APP_ENV} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")
    print(f"API docs available at http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        "src.fastapi_app:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level="info" if config.DEBUG else "warning",
    )
