# server.py
from dataclasses import asdict
from typing import List, Literal
import logging

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

import config
from analyzer import analyze_password

# ---------------- LOGGING ----------------
def configure_logging(level: str = config.LOG_LEVEL, fmt: str = config.LOG_FORMAT) -> None:
    level_no = logging.getLevelName(level.upper())
    if not isinstance(level_no, int):
        raise ValueError(f"unknown log level {level!r}; use DEBUG, INFO, WARNING, ERROR or CRITICAL")
    renderer = structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        # uncached so structlog.testing.capture_logs can swap processors
        cache_logger_on_first_use=False,
    )

configure_logging()
logger = structlog.get_logger("passcheck.server")

app = FastAPI(title="Password Strength Analyzer")

# enable CORS for local dev
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- API MODELS ----------------
class CheckRequest(BaseModel):
    password: str

class CriterionModel(BaseModel):
    id: str
    label: str
    passed: bool
    description: str

class CheckResponse(BaseModel):
    strength: Literal["weak", "medium", "strong"]
    score: int
    checks: List[CriterionModel]
    crack_time: str
    suggestions: List[str]
    explanation: str

@app.post("/check", response_model=CheckResponse)
def check_pw(req: CheckRequest):
    if len(req.password) > config.MAX_PASSWORD_LENGTH:
        logger.warning("password rejected", reason="too long", length=len(req.password))
        raise HTTPException(status_code=400, detail="password too long")
    report = analyze_password(req.password)
    # never log the password itself
    logger.info(
        "password analyzed",
        length=len(req.password),
        score=report.score,
        strength=report.strength,
        passed=report.passed_count,
    )
    return asdict(report)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("server:app", host=config.HOST, port=config.PORT, reload=True)


# ---------------- End of file ----------------
