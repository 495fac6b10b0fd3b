"""FastAPI application - serves the rhythm grouping API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rhythmchain import __version__
from rhythmchain.api.rhythm import router as rhythm_router

app = FastAPI(title="Rhythmchain", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(rhythm_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok"}


def run():
    import uvicorn
    from rhythmchain.config import settings
    uvicorn.run(
        "rhythmchain.main:app",
        host=settings.host,
        port=settings.port,
    )
