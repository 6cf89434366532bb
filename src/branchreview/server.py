import argparse
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from branchreview.api.router import create_api_router
from branchreview.config import settings
from branchreview.utils.common import get_random_port
from branchreview.utils.logging_config import setup_logging

app = FastAPI(title="Branch Diff Analyzer", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(create_api_router())


def main() -> None:
    """Entry point for the branchreview-server command."""
    parser = argparse.ArgumentParser(description="Branch Diff Analyzer Server")
    parser.add_argument("--port", type=int, help="Port to run the server on (default: random)")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if settings.debug else settings.log_level.upper())

    port = args.port or settings.port
    if port:
        print(f"Analysis server available at: http://{settings.host}:{port}")
        uvicorn.run(app, host=settings.host, port=port)
    else:
        sock, port = get_random_port()
        print(f"Analysis server available at: http://127.0.0.1:{port}")
        uvicorn.run(app, fd=sock.fileno())


if __name__ == "__main__":
    main()
