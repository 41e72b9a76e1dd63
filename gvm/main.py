"""
HTTP control surface for a shared beat clock.

Lets a tap pad, a MIDI bridge or another sketch process drive the tempo
between frames, and query phase / leap noise values.

IMPORTANT:
- Must run with ONE worker (the clock lives in process memory)
"""

import math
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, APIRouter
from pydantic import BaseModel, Field

from gvm.beat_clock import ValidationError
from gvm.config import (
    LOG_LEVEL, DEFAULT_BPM, DEFAULT_CYCLE_LENGTH, DEFAULT_EASE_DURATION,
    TAP_RECORD_INTERVAL, TAP_MAX_TIME_DIFF,
)
from gvm.easing import list_easing_names
from gvm.logger import logger
from gvm.sketches import SKETCHES
from gvm.state import beat_state
from gvm.style_presets import DEFAULT_PRESETS, get_preset, list_preset_names


# ============================================================================
# FastAPI Lifespan
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("GVM clock server starting up")
    logger.info(f"Configuration: DEFAULT_BPM={DEFAULT_BPM}, LOG_LEVEL={LOG_LEVEL}")
    logger.info(f"Tap tempo: record_interval={TAP_RECORD_INTERVAL}, max_time_diff={TAP_MAX_TIME_DIFF}ms")
    yield
    logger.info("GVM clock server shut down")


app = FastAPI(title="GVM", lifespan=lifespan)
clock_router = APIRouter(prefix="/clock", tags=["clock"])
styles_router = APIRouter(prefix="/styles", tags=["styles"])


# ============================================================================
# Request models
# ============================================================================

class BpmRequest(BaseModel):
    bpm: float = Field(..., description="Beats per minute, in (0, 1000]")


# ------------------------------------------------------------------
# Clock
# ------------------------------------------------------------------

@clock_router.get("/state")
async def get_state():
    try:
        return beat_state.get_snapshot()
    except Exception as e:
        logger.error("Failed to read clock state", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@clock_router.post("/bpm")
async def set_bpm(req: BpmRequest):
    try:
        logger.debug(f"BPM request: bpm={req.bpm}")
        beat_state.set_bpm(req.bpm)
        return {"status": "ok", "bpm": req.bpm}
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Failed to set BPM", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@clock_router.post("/tap")
async def tap():
    try:
        bpm, tap_count = beat_state.tap()
        return {"status": "ok", "bpm": bpm, "tap_count": tap_count}
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Failed to register tap", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@clock_router.get("/phase")
async def get_phase(
    cycle_length: float = DEFAULT_CYCLE_LENGTH,
    ease_duration: float = DEFAULT_EASE_DURATION,
    easing: str = "easeInOutSine",
):
    try:
        phase = beat_state.with_clock(lambda c: c.get_phase(cycle_length, ease_duration, easing))
        return {"phase": phase}
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Failed to compute phase", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@clock_router.get("/noise")
async def get_noise(
    cycle_length: float = DEFAULT_CYCLE_LENGTH,
    ease_duration: float = DEFAULT_EASE_DURATION,
    seed_x: float = 0.0,
    seed_y: float = 0.0,
    easing: str = "easeInOutSine",
):
    try:
        value = beat_state.with_clock(
            lambda c: c.leap_noise(cycle_length, ease_duration, (seed_x, seed_y), easing)
        )
        return {"value": value}
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Failed to compute leap noise", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/easings")
async def list_easings():
    names = list_easing_names()
    return {"easings": names, "count": len(names)}


# ------------------------------------------------------------------
# Sketch frames
# ------------------------------------------------------------------

@app.get("/sketches/{name}/frame")
async def get_sketch_frame(name: str, width: float = 800, height: float = 600):
    """Shapes for the current frame of a sample sketch."""
    sketch = SKETCHES.get(name)
    if not sketch:
        raise HTTPException(
            status_code=404,
            detail=f"Sketch '{name}' not found. Available sketches: {', '.join(SKETCHES)}"
        )
    if not math.isfinite(width) or not math.isfinite(height) or width <= 0 or height <= 0:
        raise HTTPException(status_code=400, detail="Width and height must be positive finite numbers")

    try:
        shapes = beat_state.with_clock(lambda c: sketch(c, width, height))
        return {"sketch": name, "shapes": [asdict(shape) for shape in shapes]}
    except Exception as e:
        logger.error(f"Failed to render sketch frame '{name}'", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


# ------------------------------------------------------------------
# Style presets
# ------------------------------------------------------------------

@styles_router.get("/presets")
async def list_style_presets():
    return {
        "presets": [
            {
                "name": name,
                "description": preset.description,
                "mode": preset.mode,
            }
            for name, preset in DEFAULT_PRESETS.items()
        ],
        "count": len(DEFAULT_PRESETS)
    }


@styles_router.get("/presets/{name}")
async def get_style_preset(name: str):
    preset = get_preset(name)
    if not preset:
        raise HTTPException(
            status_code=404,
            detail=f"Preset '{name}' not found. Available presets: {', '.join(list_preset_names())}"
        )
    return {"preset": name, "style": preset.to_style().dict()}


app.include_router(clock_router)
app.include_router(styles_router)
