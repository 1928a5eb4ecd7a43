# rookies/services/api/server.py
from __future__ import annotations

import uvicorn

from rookies.common.settings import get_settings


def main() -> None:
    cfg = get_settings()
    uvicorn.run(
        "rookies.services.api.app:create_app",
        factory=True,
        host=cfg.api.host,
        port=cfg.api.port,
        log_level=cfg.log_level.lower(),
        reload=cfg.app_env.lower() == "development",
    )


if __name__ == "__main__":
    main()
