"""
Serve the chainnotes API.

    python main.py
    uvicorn app:app --reload
"""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "app:app",
        host=os.getenv("CHAINNOTES_HOST", "127.0.0.1"),
        port=int(os.getenv("CHAINNOTES_PORT", os.getenv("PORT", "8000"))),
        reload=os.getenv("CHAINNOTES_RELOAD", "false").lower() in ("true", "1", "yes"),
        log_level=os.getenv("CHAINNOTES_LOG_LEVEL", "info").lower(),
    )
