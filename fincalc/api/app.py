"""FastAPI application entry point.

Run with: uvicorn fincalc.api.app:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fincalc.api.routes import goals, interest, investments, loans
from fincalc.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="fincalc",
    description="Interest, SIP, loan and retirement calculators",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(interest.router)
app.include_router(investments.router)
app.include_router(loans.router)
app.include_router(goals.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
