from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.core.config import settings
from storefront.core.logging import setup_logging
from storefront.api.v1.api import router as api_v1_router

setup_logging()

app = FastAPI(title="Storefront Delivery API", version="0.1.0")

# set up CORS so the frontend can talk to us
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# mount our API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.APP_ENV}


def run():
    import uvicorn

    uvicorn.run("storefront.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
