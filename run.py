#!/usr/bin/env python3
"""
Launcher for the Week Planner API (install first with `pip install -e .`).
"""

import uvicorn

from weekplanner import config

if __name__ == "__main__":
    print(f"🚀 Week Planner API on http://{config.HOST}:{config.PORT} (docs at /docs)")
    uvicorn.run(
        "weekplanner.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=True,
        log_level=config.LOG_LEVEL.lower(),
    )
