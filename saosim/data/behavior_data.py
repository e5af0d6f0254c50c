"""Observed values of a behavior variable.

A BehaviorLongitudinalData holds, for every observation moment and every
actor, three independent planes: the integer value, whether that value is
missing, and whether it is structurally determined. After loading,
``calculate_properties()`` derives the range and overall mean that every
behavior effect uses for centering, and a statistics pass stores the
similarity centering constants (see ``saosim.data.similarity``).

The object follows a two-phase lifecycle. While loading, values and flags
can be written freely. ``freeze()`` computes the derived statistics if they
are missing and turns the value planes read-only, so that effects evaluated
during simulation see a fixed data set.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from saosim.data.actor_set import ActorSet
from saosim.data.longitudinal_data import LongitudinalData

logger = logging.getLogger(__name__)


class DataIntegrityError(ValueError):
    """Raised when observed data cannot support any effect computation."""


class BehaviorLongitudinalData(LongitudinalData):
    """Stores the observed values of one behavior variable.

    All cells start as value 0, not missing, not structural. Cell accessors
    do not check bounds: ``observation < observation_count`` and
    ``actor < n`` are caller preconditions.

    Args:
        id: Identifier, unique among the variables of one registry.
        name: Name of the behavior variable.
        actor_set: The actors the variable is observed on.
        observation_count: Number of observation moments (at least 1).
    """

    def __init__(self, id: int, name: str, actor_set: ActorSet, observation_count: int):
        super().__init__(id, name, actor_set, observation_count)
        shape = (observation_count, actor_set.n)
        self._values = np.zeros(shape, dtype=np.int64)
        self._missing = np.zeros(shape, dtype=bool)
        self._structural = np.zeros(shape, dtype=bool)

        self._min: int | None = None
        self._max: int | None = None
        self._overall_mean: float | None = None
        self._range: int | None = None

        self._similarity_mean = 0.0
        self._similarity_means: dict[str, float] = {}
        self._frozen = False

    # -----------------------------------------------------------------
    # Construction helpers
    # -----------------------------------------------------------------

    @classmethod
    def from_array(
        cls,
        id: int,
        name: str,
        actor_set: ActorSet,
        observations: Any,
        structural: Any = None,
    ) -> BehaviorLongitudinalData:
        """Build a data object from an actors-by-observations array.

        NaN cells are marked missing and stored as 0.

        Args:
            observations: Array-like of shape ``(n, T)``.
            structural: Optional boolean array-like of the same shape.

        Raises:
            ValueError: If the shape does not match the actor set or a
                non-missing value is not integral.
        """
        arr = np.asarray(observations, dtype=float)
        if arr.ndim != 2 or arr.shape[0] != actor_set.n:
            raise ValueError(
                f"expected an array of shape ({actor_set.n}, T) for '{name}', "
                f"got {arr.shape}"
            )
        missing = np.isnan(arr)
        filled = np.where(missing, 0.0, arr)
        if not np.array_equal(filled, np.round(filled)):
            raise ValueError(f"behavior variable '{name}' has non-integer values")

        data = cls(id, name, actor_set, arr.shape[1])
        data._values[:] = filled.T.astype(np.int64)
        data._missing[:] = missing.T

        if structural is not None:
            flags = np.asarray(structural, dtype=bool)
            if flags.shape != arr.shape:
                raise ValueError(
                    f"structural flags for '{name}' have shape {flags.shape}, "
                    f"expected {arr.shape}"
                )
            data._structural[:] = flags.T
        return data

    @classmethod
    def from_frame(
        cls,
        id: int,
        name: str,
        actor_set: ActorSet,
        frame: pd.DataFrame,
        structural: pd.DataFrame | None = None,
    ) -> BehaviorLongitudinalData:
        """Build a data object from a DataFrame with one row per actor and
        one column per observation. Missing cells (NaN or NA) are flagged.
        """
        observations = frame.to_numpy(dtype=float, na_value=np.nan)
        flags = None if structural is None else structural.to_numpy(dtype=bool)
        return cls.from_array(id, name, actor_set, observations, flags)

    # -----------------------------------------------------------------
    # Cell access
    # -----------------------------------------------------------------

    def value(self, observation: int, actor: int) -> int:
        """Stored value of ``actor`` at ``observation`` (0 for unset cells)."""
        return int(self._values[observation, actor])

    def set_value(self, observation: int, actor: int, value: int) -> None:
        """Store the value of ``actor`` at ``observation``.

        Raises:
            RuntimeError: After ``freeze()``.
        """
        self._check_writable()
        self._values[observation, actor] = value

    def values(self, observation: int) -> np.ndarray:
        """Read-only view of the values of all actors at one observation."""
        row = self._values[observation]
        row.flags.writeable = False
        return row

    def missing(self, observation: int, actor: int) -> bool:
        """Whether the cell was not observed."""
        return bool(self._missing[observation, actor])

    def set_missing(self, observation: int, actor: int, missing: bool) -> None:
        """Flag the cell as unobserved (or observed). Raises RuntimeError once frozen."""
        self._check_writable()
        self._missing[observation, actor] = missing

    def structural(self, observation: int, actor: int) -> bool:
        """Whether the cell value is fixed by the process rather than observed."""
        return bool(self._structural[observation, actor])

    def set_structural(self, observation: int, actor: int, structural: bool) -> None:
        """Flag the cell as structurally determined. Raises RuntimeError once frozen."""
        self._check_writable()
        self._structural[observation, actor] = structural

    def missing_flags(self, observation: int) -> np.ndarray:
        """Read-only view of the missing flags of all actors at one observation."""
        row = self._missing[observation]
        row.flags.writeable = False
        return row

    def missing_count(self, observation: int) -> int:
        """Number of unobserved actors at ``observation``."""
        return int(self._missing[observation].sum())

    def structural_count(self, observation: int) -> int:
        """Number of structurally determined cells at ``observation``."""
        return int(self._structural[observation].sum())

    # -----------------------------------------------------------------
    # Derived statistics
    # -----------------------------------------------------------------

    @property
    def min(self) -> int:
        """Smallest non-missing value over all observations."""
        self._check_calculated()
        return self._min

    @property
    def max(self) -> int:
        """Largest non-missing value over all observations."""
        self._check_calculated()
        return self._max

    @property
    def overall_mean(self) -> float:
        """Mean over observations of the per-observation means."""
        self._check_calculated()
        return self._overall_mean

    @property
    def range(self) -> int:
        self._check_calculated()
        return self._range

    @property
    def properties_calculated(self) -> bool:
        return self._range is not None

    def calculate_properties(self) -> None:
        """Derive min, max, overall mean and range from the value planes.

        Each observation contributes its own mean over the non-missing
        actors, so observations with many missing cells are not
        down-weighted.

        Raises:
            DataIntegrityError: If some observation has no non-missing
                value, or if all non-missing values are equal.
        """
        lo: int | None = None
        hi: int | None = None
        mean_total = 0.0

        for observation in range(self.observation_count):
            observed = self._values[observation][~self._missing[observation]]
            if observed.size == 0:
                raise DataIntegrityError(
                    f"No valid data for behavior variable '{self.name}', "
                    f"observation {observation}"
                )
            row_min = int(observed.min())
            row_max = int(observed.max())
            lo = row_min if lo is None else min(lo, row_min)
            hi = row_max if hi is None else max(hi, row_max)
            mean_total += float(observed.sum()) / observed.size

        if hi - lo == 0:
            raise DataIntegrityError(
                f"All observed values are equal for the behavior variable {self.name}"
            )

        self._min = lo
        self._max = hi
        self._range = hi - lo
        self._overall_mean = mean_total / self.observation_count
        logger.info(
            "Properties of '%s': min=%d max=%d range=%d overall_mean=%.4f",
            self.name, self._min, self._max, self._range, self._overall_mean,
        )

    # -----------------------------------------------------------------
    # Similarity
    # -----------------------------------------------------------------

    @property
    def similarity_mean(self) -> float:
        """Centering constant of the unconditional similarity (default 0)."""
        return self._similarity_mean

    @similarity_mean.setter
    def similarity_mean(self, value: float) -> None:
        self._check_writable()
        logger.debug("Similarity mean of '%s' set to %.6f", self.name, value)
        self._similarity_mean = value

    def similarity_means(self) -> dict[str, float]:
        """Copy of the per-network centering constants."""
        return dict(self._similarity_means)

    def set_similarity_means(self, value: float, network_name: str) -> None:
        """Store (or overwrite) the centering constant for one network."""
        self._check_writable()
        logger.debug(
            "Alter similarity mean of '%s' wrt '%s' set to %.6f",
            self.name, network_name, value,
        )
        self._similarity_means[network_name] = value

    def similarity(self, a: float, b: float) -> float:
        """Centered similarity ``1 - |a - b| / range - similarity_mean``."""
        return 1.0 - abs(a - b) / self.range - self._similarity_mean

    def similarity_network(self, a: float, b: float, network_name: str) -> float:
        """Centered similarity using the constant stored for ``network_name``.

        Unknown networks are centered with 0.
        """
        centering = self._similarity_means.get(network_name, 0.0)
        return 1.0 - abs(a - b) / self.range - centering

    # -----------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> BehaviorLongitudinalData:
        """End the loading phase.

        Calculates the derived statistics if that has not happened yet and
        makes every plane and centering constant read-only.

        Raises:
            DataIntegrityError: From ``calculate_properties``.
        """
        if self._frozen:
            return self
        if not self.properties_calculated:
            self.calculate_properties()
        for plane in (self._values, self._missing, self._structural):
            plane.flags.writeable = False
        self._frozen = True
        logger.info("Behavior variable '%s' frozen", self.name)
        return self

    # -----------------------------------------------------------------
    # Inspection
    # -----------------------------------------------------------------

    def to_frame(self, missing_as_nan: bool = True) -> pd.DataFrame:
        """Actors-by-observations DataFrame of the stored values."""
        table = self._values.T.astype(float if missing_as_nan else np.int64)
        if missing_as_nan:
            table[self._missing.T] = np.nan
        frame = pd.DataFrame(table, columns=range(self.observation_count))
        frame.index.name = "actor"
        frame.columns.name = "observation"
        return frame

    def summary(self) -> pd.DataFrame:
        """One row per observation with counts and value statistics.

        Mean, min and max are NaN for an observation without data.
        """
        rows = []
        for observation in range(self.observation_count):
            observed = self._values[observation][~self._missing[observation]]
            has_data = observed.size > 0
            rows.append({
                "observed": int(observed.size),
                "missing": self.missing_count(observation),
                "structural": self.structural_count(observation),
                "mean": float(observed.mean()) if has_data else np.nan,
                "min": float(observed.min()) if has_data else np.nan,
                "max": float(observed.max()) if has_data else np.nan,
            })
        frame = pd.DataFrame(rows)
        frame.index.name = "observation"
        return frame

    def _check_writable(self) -> None:
        if self._frozen:
            raise RuntimeError(f"behavior variable '{self.name}' is frozen")

    def _check_calculated(self) -> None:
        if self._range is None:
            raise RuntimeError(
                f"properties of '{self.name}' are not available before "
                "calculate_properties()"
            )
