"""
Run the API with uvicorn.

    python -m chatterbox.api

Host, port and reload follow HOST, PORT and DEBUG.
"""

import uvicorn

from chatterbox.config.settings import settings


def main() -> None:
    uvicorn.run(
        "chatterbox.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
