from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.exceptions import register_exception_handlers
from app.startup import configure_startup_logging, run_startup_checks

# ========== Analytics & Reporting ==========
from modules.analytics import __version__
from modules.analytics.routers import analytics_router

configure_startup_logging()

app = FastAPI(
    title="Restaurant Sales Analytics API",
    description="""
    Sales reporting over completed restaurant orders.

    ## Features

    * **Sales Report** - Headline metrics, growth against the previous period,
      daily and hourly series, channel distribution, top items and location
      performance for a chosen date range
    * **Date Range Presets** - today, yesterday, rolling windows, this week and this month
    * **Filters** - Narrow reports to specific locations and order channels
    """,
    version=__version__,
)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Analytics & Reporting
app.include_router(analytics_router)


@app.on_event("startup")
async def startup_event():
    """Run startup validation checks"""
    run_startup_checks()


@app.get("/")
def read_root():
    return {"message": "Sales analytics service is running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
