#!/usr/bin/env python3
"""
Quick runner for Legal Document Generation Service
==================================================

Usage:
    python -m docgen_lite.run
"""

import uvicorn

if __name__ == "__main__":
    print("Starting Legal Document Generation Service...")
    print("API docs: http://localhost:8000/docs")
    print("Health:   http://localhost:8000/health")
    print()

    uvicorn.run(
        "docgen_lite.api:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
