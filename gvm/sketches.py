"""
Sample rhythm-driven sketches.

Each sketch is a frame generator: given a BeatClock and canvas size it
returns the shapes to draw for the current frame as plain data. Drawing
is left to the host; run_sketch() only drives the frame timing.

run_sketch():
- Is blocking
- Should run in a background thread
- Supports cancellation via threading.Event
"""

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from gvm.beat_clock import BeatClock
from gvm.config import SKETCH_BPM, SKETCH_FPS
from gvm.logger import sketch_logger as logger
from gvm.sketch_math import constrain, fract, map_range
from gvm.styles import Rgba, lerp_color

T = TypeVar("T")


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float
    color: Rgba


@dataclass(frozen=True)
class Ring:
    hue: float
    saturation: float
    lightness: float
    alpha: float
    vertices: list[tuple[float, float]]


# ============================================================================
# Frame generators
# ============================================================================

def sketch_clock(bpm: Optional[float] = None, **kwargs) -> BeatClock:
    """
    Clock for driving the sample sketches.

    Uses SKETCH_BPM unless bpm is given; kwargs go to BeatClock.
    """
    return BeatClock(SKETCH_BPM if bpm is None else bpm, **kwargs)


RADIANCE_INNER = "#ff6f61"
RADIANCE_OUTER = "#6b5b95"


def rhythmic_radiance(clock: BeatClock, width: float, height: float, num_circles: int = 10) -> list[Circle]:
    """
    Concentric circles that step outward by one slot each cycle.

    The phase fraction holds, then eases, so the rings sit still for
    most of the cycle and glide outward at its end.
    """
    phase = fract(clock.get_phase())
    center_x, center_y = width / 2, height / 2
    max_radius = min(width, height) / 2 * 0.8

    circles = []
    for i in range(num_circles):
        progress = (i + phase) / num_circles
        alpha = constrain(map_range(progress, 0, 1, 255, 50), 0, 255)
        base = lerp_color(RADIANCE_INNER, RADIANCE_OUTER, progress)
        circles.append(Circle(
            x=center_x,
            y=center_y,
            radius=max_radius * progress,
            color=Rgba(r=base.r, g=base.g, b=base.b, a=int(alpha)),
        ))
    return circles


def ethereal_pulse(
    clock: BeatClock,
    width: float,
    height: float,
    num_rings: int = 50,
    angle_step: float = 5,
) -> list[Ring]:
    """
    Ripple rings whose radii swell with per-ring leap noise.

    Args:
        angle_step: Degrees between outline vertices
    """
    if angle_step <= 0:
        raise ValueError("Angle step must be positive")

    center_x, center_y = width / 2, height / 2
    max_radius = min(width, height) / 2 * 0.9
    steps = math.ceil(360 / angle_step)

    rings = []
    for i in range(num_rings):
        hue = map_range(i, 0, num_rings, 180, 360)
        noise_factor = clock.leap_noise(4, 1, (i, 0))
        radius = max_radius * (i / num_rings) * (1 + noise_factor * 0.5)

        vertices = []
        for step in range(steps):
            angle = math.radians(step * angle_step)
            vertices.append((center_x + radius * math.cos(angle), center_y + radius * math.sin(angle)))

        rings.append(Ring(hue=hue, saturation=0.7, lightness=0.6, alpha=0.8, vertices=vertices))
    return rings


def drifting_orbs(clock: BeatClock, width: float, height: float, count: int = 100) -> list[Circle]:
    """
    Orbs that hop between noise positions, sizes and colors.

    Every attribute runs on its own cycle length so the hops rarely line up.
    Positions range beyond the canvas by half its size on every side.
    """
    orbs = []
    for i in range(count):
        x = map_range(clock.leap_noise(11, 3, (i, 0)), 0, 1, -width * 0.5, width * 1.5)
        y = map_range(clock.leap_noise(7, 2, (i, 1)), 0, 1, -height * 0.5, height * 1.5)
        # Squared noise favours small orbs
        size = map_range(clock.leap_noise(13, 5, (i, 2)) ** 2, 0, 1, 0.05, 0.3) * max(width, height)

        r = map_range(clock.leap_noise(17, 2, (i, 3)), 0, 1, 100, 255)
        g = map_range(clock.leap_noise(22, 1, (i, 4)), 0, 1, 0, 50)
        b = map_range(clock.leap_noise(29, 1, (i, 5)), 0, 1, 0, 255)

        orbs.append(Circle(
            x=x,
            y=y,
            radius=size / 2,
            color=Rgba(
                r=int(constrain(r, 0, 255)),
                g=int(constrain(g, 0, 255)),
                b=int(constrain(b, 0, 255)),
                a=100,
            ),
        ))
    return orbs


SKETCHES = {
    "rhythmic_radiance": rhythmic_radiance,
    "ethereal_pulse": ethereal_pulse,
    "drifting_orbs": drifting_orbs,
}


# ============================================================================
# Frame loop
# ============================================================================

def run_sketch(
    sketch: Callable[[], T],
    draw: Callable[[T], None],
    duration: float,
    cancel_event: threading.Event,
    fps: int = SKETCH_FPS,
) -> int:
    """
    Generate and draw frames at a fixed rate.

    Args:
        sketch: Produces one frame, e.g. lambda: drifting_orbs(clock, 800, 600)
        draw: Receives each frame
        duration: Seconds to run (0 = until cancelled)
        cancel_event: Stops the loop when set
        fps: Target frame rate

    Returns:
        Number of frames drawn
    """
    if fps <= 0:
        raise ValueError("FPS must be positive")

    logger.info(f"Starting sketch loop: duration={duration}s, fps={fps}")
    start_time = time.time()
    frames = 0

    while True:
        if cancel_event.is_set():
            logger.info(f"Sketch loop cancelled after {frames} frames")
            return frames

        if duration > 0 and (time.time() - start_time) >= duration:
            logger.info(f"Sketch loop completed: {frames} frames")
            return frames

        try:
            draw(sketch())
        except Exception:
            logger.error("Error drawing sketch frame", exc_info=True)
            raise

        frames += 1
        time.sleep(1 / fps)
