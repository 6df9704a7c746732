from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class StrainResult:
    """Per-note strains for one chart, in NoteSequence order."""

    start_times: np.ndarray
    columns: np.ndarray
    individual_strains: np.ndarray
    overall_strains: np.ndarray

    def __len__(self) -> int:
        return len(self.individual_strains)

    @property
    def peak_individual_strain(self) -> float:
        if len(self) == 0:
            return 0.0
        return float(np.max(self.individual_strains))

    @property
    def peak_overall_strain(self) -> float:
        if len(self) == 0:
            return 0.0
        return float(np.max(self.overall_strains))

    def column_strains(self, column: int) -> np.ndarray:
        """Overall strains of the notes in one column."""
        return self.overall_strains[self.columns == column]
