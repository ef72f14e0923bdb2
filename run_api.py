"""FastAPI development server launcher.

Usage:
    python run_api.py

The server will start on http://localhost:4000
API docs available at http://localhost:4000/api/docs
"""

import uvicorn

from swell.config import config

if __name__ == "__main__":
    print("Starting Swell API...")
    print(f"API docs: http://localhost:{config.API_PORT}/api/docs")
    print(f"Scoring endpoint: http://localhost:{config.API_PORT}/score-mission")
    print("\nPress Ctrl+C to stop\n")

    uvicorn.run(
        "swell.interfaces.api.main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        reload=config.ENVIRONMENT == "development",
        log_level=config.LOG_LEVEL.lower(),
    )
