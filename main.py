import os

import uvicorn

from weather_dashboard.core.config import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        "weather_dashboard.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    main()
