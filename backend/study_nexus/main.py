import logging
from typing import Dict

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .developer_routes import router as developer_router
from .logging_config import configure_logging
from .planner_routes import router as planner_router


configure_logging()
logger = logging.getLogger(__name__)
app = FastAPI(title="Study Nexus Planner", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(planner_router)
app.include_router(developer_router)

settings_snapshot = get_settings()
logger.info("Planner starting with a %s-day planning horizon", settings_snapshot.max_plan_days)
logger.info("Deterministic topic draws configured: %s", settings_snapshot.random_seed is not None)
logger.info("Developer endpoints enabled: %s", settings_snapshot.debug_endpoints)


@app.get("/healthz")
def health(settings: Settings = Depends(get_settings)) -> Dict[str, str]:
    return {"status": "ok", "max_plan_days": str(settings.max_plan_days)}


def run() -> None:
    settings = get_settings()
    logger.info("Starting planner API on %s:%s", settings.host, settings.port)

    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    run()
