"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── __main__.py       ← python -m chatterbox.api
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← FastAPI dependencies
    ├── handlers/         ← Route handlers
    └── middleware/       ← Exception handlers

Usage:
======
    # Run the API
    uvicorn chatterbox.api.main:app --reload
    python -m chatterbox.api

    # Import the app
    from chatterbox.api.main import app, create_application
"""
