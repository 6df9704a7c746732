"""
This module defines the configuration for a strain calculation pass.
"""

from dataclasses import dataclass

from src.difficulty.utils.hand_util import DEFAULT_HAND_DECAY


@dataclass(frozen=True)
class StrainConfig:
    """
    Holds the user-defined parameters for a strain calculation pass.

    Attributes:
        hand_decay (float): Falloff applied to same-hand impactness for every
                            column beyond the adjacent one. Must be in
                            (0, 1]. Defaults to 1/3.
        enable_logging (bool): Whether to write per-note strain logs to file.
                               Defaults to False.
        log_level (int): The logging level to use when logging is enabled.
                         Defaults to logging.INFO.
        log_dir (str): Directory the log files are written to.
    """

    hand_decay: float = DEFAULT_HAND_DECAY
    enable_logging: bool = False
    log_level: int = 20
    log_dir: str = "./logs"

    def __post_init__(self):
        """Validate parameters after initialization."""
        if not 0.0 < self.hand_decay <= 1.0:
            raise ValueError("Hand decay must be greater than 0.0 and at most 1.0.")
