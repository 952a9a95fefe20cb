"""
Development server for the Rock, Paper, Scissors API and browser page.
Run: python server.py, then open http://localhost:8080/
"""

import logging

import uvicorn

from backend.config import HOST, LOG_LEVEL, PORT

if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"Serving at http://{HOST}:{PORT}")
    print("Press Ctrl+C to stop")
    uvicorn.run("backend.api.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
