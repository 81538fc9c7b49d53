# app/__main__.py
"""
Run the API with uvicorn:
    python -m app
"""

import uvicorn

from app.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("app:app", host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    main()
