from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
import store
from routes import page, share

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Shareboard API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Errors go out as {"error": ...}, which is what the share page reads.

@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    fields = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
    logger.warning("Rejected %s %s: invalid %s", request.method, request.url.path, fields)
    return JSONResponse({"error": "Invalid request"}, status_code=400)


app.include_router(share.router)
app.include_router(page.router)
app.mount("/static", StaticFiles(directory=page.STATIC_DIR), name="static")


@app.get("/")
def health():
    store.purge_expired()
    return {"status": "ok", "service": "shareboard", "sessions": len(store.sessions)}
