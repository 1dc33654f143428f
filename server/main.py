# server/main.py

import logging
import threading
import time
import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from server.api import users
from server.config import API_HOST, API_PORT, LOG_LEVEL, configure_logging
from server.database import init_db


configure_logging()
init_db()

logger = logging.getLogger(__name__)

app = FastAPI(title="User Manager API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies and non-numeric ids are client errors, not 422s
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


app.include_router(users.router)


# -------------------------------
# Server runners
# -------------------------------

def run():
    """
    Runs the CRUD service in the foreground.
    """
    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())


def start_in_background(timeout: float = 5.0) -> uvicorn.Server:
    """
    Starts the CRUD service on a daemon thread and returns the server handle
    once it is accepting connections. The thread exits together with the UI
    process. Raises RuntimeError if the server stops or does not come up
    within `timeout` seconds, e.g. when the port is already taken.
    """
    config = uvicorn.Config(app, host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())
    server = uvicorn.Server(config)
    thread = threading.Thread(target=server.run, name="crud-api", daemon=True)
    thread.start()

    deadline = time.monotonic() + timeout
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.05)

    if not server.started:
        server.should_exit = True
        logger.error("CRUD service failed to start on %s:%s", API_HOST, API_PORT)
        raise RuntimeError(f"CRUD service failed to start on {API_HOST}:{API_PORT}")

    logger.info("CRUD service listening on %s:%s", API_HOST, API_PORT)
    return server


if __name__ == "__main__":
    run()
