"""
Development server launcher.

Loads .env file and serves ``lumbar.main:app`` with auto-reload.

Usage:
    python scripts/run_dev.py [port]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env before settings are read
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from lumbar.core.config import settings

if __name__ == "__main__":
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8000
    print(f"{settings.PROJECT_NAME} {settings.VERSION} on http://localhost:{port} "
          f"(docs at /docs, database {settings.DATABASE_URL})")

    uvicorn.run("lumbar.main:app", host="127.0.0.1", port=port, reload=True, log_level=settings.LOG_LEVEL.lower())
