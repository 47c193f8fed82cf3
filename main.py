from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from config import configure_logging, get_settings
from api import games, rounds


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: 設定 logging 等級
    configure_logging(get_settings())
    yield
    # Shutdown: 遊戲只存在記憶體，不需要清理


app = FastAPI(
    title="Abacus Game API",
    description="Backend API for the abacus number-matching puzzle",
    version="1.0.0",
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(games.router)
app.include_router(rounds.router)


@app.get("/")
def root():
    return {"message": "Abacus Game API", "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
