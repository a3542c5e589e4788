from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from shared.config import AUTO_CREATE_TABLES, CORS_ORIGINS, SERVER_PORT
from shared.logger import logger
from create_db import init_models
from services.school_directory.controllers.school_service import router as school_router
from services.content_management.controllers.blog_service import router as blog_router
from services.user_management.controllers.user_service import router as user_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    if AUTO_CREATE_TABLES:
        await init_models()
    yield


app = FastAPI(title="Boarding School Catalog API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def health_check():
    return {"status": "Boarding School Catalog API is running"}


@app.get("/healthcheck", operation_id="healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


app.include_router(school_router)
app.include_router(blog_router)
app.include_router(user_router)


if __name__ == "__main__":
    logger.info("Catalog API listening at port: %s", SERVER_PORT)
    uvicorn.run(app, host="0.0.0.0", port=SERVER_PORT)
