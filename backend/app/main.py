from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from reserve_seats.chart import SeatingChartError
from reserve_seats.config import TheaterConfig
from reserve_seats.driver import run_reservations

from .schemas import ReservationRunRequest, ReservationRunResponse, TheaterConfigOut


logger = logging.getLogger(__name__)

app = FastAPI(title="Best Available Seating API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _config_for(payload: ReservationRunRequest) -> TheaterConfig:
    return TheaterConfig.from_env(rows=payload.rows, columns=payload.columns, best_seat=payload.best_seat)


@app.get("/health")
def health() -> dict:
    return {"ok": True}


@app.get("/config", response_model=TheaterConfigOut)
def get_config() -> TheaterConfigOut:
    try:
        cfg = TheaterConfig.from_env()
    except SeatingChartError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    return TheaterConfigOut(rows=cfg.rows, columns=cfg.columns, best_seat=cfg.best_seat)


@app.post("/reservations", response_model=ReservationRunResponse)
def create_reservations(payload: ReservationRunRequest) -> ReservationRunResponse:
    try:
        report = run_reservations(payload.input, _config_for(payload), charts=payload.charts)
    except SeatingChartError as e:
        logger.info("rejected reservation run: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ReservationRunResponse(
        results=report.lines(),
        seats_available=report.seats_available,
        charts=report.charts,
    )
