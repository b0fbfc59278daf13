"""Entry point: python -m asset_search"""

import uvicorn
from .config import settings


def main():
    uvicorn.run(
        "asset_search.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
