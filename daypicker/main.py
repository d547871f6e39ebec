import logging
from typing import Any, Dict

from fastapi import Body, FastAPI, HTTPException
from pydantic import ValidationError

from daypicker import config
from daypicker.actions import ACTION_REGISTRY

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="daypicker")


@app.get("/health")
async def health():
    return {"ok": True, "default_tz": config.DEFAULT_TZ, "first_weekday": config.FIRST_WEEKDAY}


@app.get("/actions")
async def actions():
    return {"actions": sorted(ACTION_REGISTRY)}


@app.post("/actions/{name}")
async def run_action(name: str, body: Dict[str, Any] = Body(...)):
    func = ACTION_REGISTRY.get(name)
    if not func:
        raise HTTPException(status_code=404, detail=f"Unknown action: {name}")

    logger.info("action %s", name)
    try:
        return await func(body)
    except ValidationError as e:
        # ValidationError is a ValueError too; keep it a 422 like FastAPI's own body checks
        logger.warning("action %s rejected: %d validation error(s)", name, e.error_count())
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False, include_input=False))
    except ValueError as e:
        logger.warning("action %s rejected: %s", name, e)
        raise HTTPException(status_code=400, detail=str(e))
