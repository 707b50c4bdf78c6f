"""
Main Application GUI - gradient background with a live clock
"""
import customtkinter as ctk
from pathlib import Path
from typing import Optional
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from animation import PhaseOscillator
from clock import ClockTicker
from config import WINDOW_CONFIG, CLOCK_CONFIG, GRADIENT_CONFIG
from gui.components import GradientCanvas
from logger import get_logger

logger = get_logger(__name__)

ctk.set_appearance_mode(WINDOW_CONFIG["appearance_mode"])


class GradientClockApp(ctk.CTk):
    """Main Application Window"""

    def __init__(self):
        super().__init__()

        self.title(WINDOW_CONFIG["title"])
        self.geometry(WINDOW_CONFIG["geometry"])
        self.minsize(WINDOW_CONFIG["min_width"], WINDOW_CONFIG["min_height"])

        self.ticker = ClockTicker()
        self.oscillator = PhaseOscillator(GRADIENT_CONFIG["half_period"])
        self._clock_job: Optional[str] = None
        self._frame_job: Optional[str] = None

        self._create_layout()
        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self._tick_clock()
        self._animate()

    def _create_layout(self):
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.canvas = GradientCanvas(self)
        self.canvas.grid(row=0, column=0, sticky="nswe")

    def _tick_clock(self):
        """Refresh the time text once per tick interval"""
        self.canvas.set_time(self.ticker.tick())
        self._clock_job = self.after(CLOCK_CONFIG["tick_interval_ms"], self._tick_clock)

    def _animate(self):
        """Advance the phase and repaint the background"""
        self.canvas.paint_phase(self.oscillator.value())
        self._frame_job = self.after(GRADIENT_CONFIG["frame_interval_ms"], self._animate)

    def _cancel_jobs(self):
        for job in (self._clock_job, self._frame_job):
            if job:
                self.after_cancel(job)
        self._clock_job = None
        self._frame_job = None

    def _on_close(self):
        logger.info("Closing window")
        self._cancel_jobs()
        self.destroy()


def run_app():
    logger.info("Starting %s", WINDOW_CONFIG["title"])
    app = GradientClockApp()
    app.mainloop()


if __name__ == "__main__":
    run_app()
