#!/usr/bin/env python3
"""Start the wall-network geometry API server."""

import logging
import os

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("WALLNET_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "wallnet.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["wallnet"],
    )
