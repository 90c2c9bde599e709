"""Main FastAPI application."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from shipwrecked.config import settings
from shipwrecked.api import projects, reviews, shop_items, users, hackatime

app = FastAPI(
    title="Shipwrecked API",
    description="Backend API for Shipwrecked projects, reviews and shells",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(reviews.router)
app.include_router(projects.router)
app.include_router(shop_items.router)
app.include_router(users.router)
app.include_router(hackatime.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Shipwrecked API",
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shipwrecked.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development",
    )
