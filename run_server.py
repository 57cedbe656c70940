#!/usr/bin/env python3
"""Run the woord API server."""

import logging
import os

import uvicorn


def main():
    logging.basicConfig(
        level=os.environ.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    print("Starting Woord API server...")
    print("API documentation available at: http://localhost:8000/docs")
    uvicorn.run(
        "server.app:app",
        host="0.0.0.0",
        port=int(os.environ.get('PORT', '8000')),
        reload=os.environ.get('WOORD_RELOAD', 'false').lower() == 'true'
    )


if __name__ == "__main__":
    main()
