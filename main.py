import asyncio
import contextlib
import datetime
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api.routes_calendar import mount_calendar_routes
from core.brain import boot, build_scheduler
from core.state import AppState
from utils.config import CONFIG
from utils.debug import configure_logging


def create_app(state: Optional[AppState] = None, start_scheduler: bool = True) -> FastAPI:
    state = state or boot()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        task = None
        scheduler = None
        if start_scheduler and CONFIG["notifications"].get("enabled", True):
            scheduler = build_scheduler(state)
            app.state.scheduler = scheduler
            task = asyncio.create_task(scheduler.run())

        yield

        if task is not None:
            scheduler.stop()
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    app = FastAPI(title="wallcal API", lifespan=lifespan)

    @app.get("/health")
    def health():
        return {"status": "ok", "time": datetime.datetime.now().isoformat(timespec="seconds")}

    mount_calendar_routes(app, state)
    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=CONFIG["api"]["host"], port=CONFIG["api"]["port"])
