import os

from fastapi import FastAPI

from src.apps.api import router

app = FastAPI(
    title="Asset Committer API",
    version="0.1.0",
    description="Mirrors asset store file events onto a git repository",
)

app.include_router(router.router, prefix="/api")


@app.get("/health")
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}


def run():
    """Serve the API with uvicorn (the ``asset-committer`` console script)."""
    import uvicorn

    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))

    print(f"Starting Asset Committer API on {host}:{port}")

    # Only enable reload in development environment
    reload = os.getenv("ENVIRONMENT", "production") == "development"
    if reload:
        uvicorn.run("src.main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
