"""
This module defines the StrainCalculator class, which runs both strain
evaluators over every note of a chart.
"""

# pylint: disable=too-few-public-methods

import logging
import time
from pathlib import Path
from typing import Optional

import numpy as np

from src.difficulty.calculation.strain_config import StrainConfig
from src.difficulty.calculation.strain_result import StrainResult
from src.difficulty.chart.chart import Chart
from src.difficulty.evaluators.individual_strain_evaluator import IndividualStrainEvaluator
from src.difficulty.evaluators.overall_strain_evaluator import OverallStrainEvaluator
from src.difficulty.preprocessing.note_sequence import NoteSequence


class StrainCalculator:
    """
    Computes per-note strains for a chart.

    The chart is linked into a NoteSequence once; each note is then evaluated
    independently against its own predecessor snapshot. Nothing is mutated
    during the pass, so evaluating a chart twice gives identical arrays.
    """

    def __init__(self, chart: Chart, config: Optional[StrainConfig] = None):
        """
        Initializes a new calculation.

        Args:
            chart: The Chart whose notes are evaluated.
            config: A StrainConfig with calculation parameters.
        """
        self.chart = chart
        self.config = config or StrainConfig()
        self.sequence: NoteSequence = chart.to_sequence()
        self.logger: logging.Logger | None = None

    def calculate(self, log_level: Optional[int] = None) -> StrainResult:
        """
        Evaluates every note in the chart.

        Args:
            log_level: The logging level to use (e.g., logging.DEBUG).
                       If None, uses the level from StrainConfig.

        Returns:
            A StrainResult holding one individual and one overall strain per note.
        """
        effective_log_level = (
            log_level if log_level is not None else self.config.log_level
        )
        self.logger = self._setup_logger(effective_log_level)
        self.logger.debug("--- Starting Strain Calculation for %s ---", self)

        count = len(self.sequence)
        start_times = np.empty(count, dtype=np.float64)
        columns = np.empty(count, dtype=np.int64)
        individual = np.empty(count, dtype=np.float64)
        overall = np.empty(count, dtype=np.float64)

        for note in self.sequence:
            previous_notes = note.previous_notes
            start_times[note.index] = note.start_time
            columns[note.index] = note.column
            individual[note.index] = IndividualStrainEvaluator.evaluate_difficulty_of(
                note, previous_notes, self.config.hand_decay
            )
            overall[note.index] = OverallStrainEvaluator.evaluate_difficulty_of(
                note, previous_notes, self.config.hand_decay
            )
            self.logger.debug(
                "%8.1fms col %d -> individual %.4f, overall %.4f",
                note.start_time,
                note.column,
                individual[note.index],
                overall[note.index],
            )

        result = StrainResult(
            start_times=start_times,
            columns=columns,
            individual_strains=individual,
            overall_strains=overall,
        )
        self._log_summary(result)
        return result

    # --- Logging and Output ---

    def _setup_logger(self, log_level: int) -> logging.Logger:
        """Configures a logger to write strain results to a file."""
        logger = logging.getLogger("strain_logger")

        if not self.config.enable_logging:
            self._close_handlers(logger)
            logger.addHandler(logging.NullHandler())
            logger.setLevel(logging.CRITICAL + 1)
            return logger

        log_dir = Path(self.config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        sanitized_title = "".join(
            c for c in self.chart.title if c.isalnum() or c in " _"
        ).rstrip()
        timestamp = int(time.time())
        log_filename = (
            f"{sanitized_title.replace(' ', '_')}_"
            f"{self.chart.difficulty}_{timestamp}.log"
        )
        log_filepath = log_dir / log_filename

        logger.setLevel(log_level)
        logger.propagate = False

        self._close_handlers(logger)

        file_handler = logging.FileHandler(log_filepath, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(file_handler)

        return logger

    @staticmethod
    def _close_handlers(logger: logging.Logger):
        """Detaches the handlers of a previous pass, releasing their log files."""
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def _log_summary(self, result: StrainResult):
        """Logs the summary of a completed pass."""
        if not self.logger or len(result) == 0:
            return

        self.logger.debug("\n--- Strain Summary ---")
        self.logger.debug("Notes Evaluated: %d", len(result))
        self.logger.debug(
            "Individual Strain: mean %.4f, max %.4f",
            np.mean(result.individual_strains),
            np.max(result.individual_strains),
        )
        self.logger.debug(
            "Overall Strain: mean %.4f, max %.4f, std %.4f",
            np.mean(result.overall_strains),
            np.max(result.overall_strains),
            np.std(result.overall_strains),
        )

    def __repr__(self) -> str:
        """Provides a summary of the calculation setup."""
        return (
            f"<StrainCalculator(Chart='{self.chart.title}' [{self.chart.difficulty}], "
            f"Keys={self.sequence.total_columns}, Notes={len(self.sequence)})>"
        )
