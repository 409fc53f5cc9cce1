import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from portfolio.modules.config import CORS_ORIGINS, LOG_LEVEL
from portfolio.modules.database import connect_to_db, disconnect_from_db, init_db
from portfolio.modules.error_handlers import register_exception_handlers
from portfolio.modules.catalog.api import experience_router, profile_router, project_router, skill_router
from portfolio.modules.users.api import registration_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_db()
    await init_db()
    yield
    # Shutdown
    await disconnect_from_db()

app = FastAPI(title="Portfolio Service", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(project_router)
app.include_router(skill_router)
app.include_router(experience_router)
app.include_router(profile_router)
app.include_router(registration_router)


@app.get("/")
async def root():
    return {"status": "online", "system": "Portfolio Service"}
