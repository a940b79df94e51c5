# -*- coding: utf-8 -*-
"""
Created on Tue Jan 20 08:58:14 2026

@author: bboyg

Maximum detectable range by bisection.

Detectability is assumed non-increasing in range for a fixed direction and
RCS (received power falls as R^-4 and the gain only depends on angle), so a
bracket [min_range, max_range] with "detectable" at the bottom and "not
detectable" at the top contains exactly one crossing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional
import math
import numpy as np

from errors import InvalidSearchBounds
from target import TargetGeometry


class SearchOutcome(Enum):
    DETECTED = "detected"                # crossing found inside the bracket
    NOT_DETECTABLE = "not_detectable"    # not detectable even at min_range
    EXCEEDS_CEILING = "exceeds_ceiling"  # still detectable at max_range


@dataclass(frozen=True)
class SearchBounds:
    """
    Bisection bracket and tolerance [m].

    The bracket is a search setting, not physics: it has to be wide enough
    to hold any realistic answer.
    """
    min_range_m: float = 1e3
    max_range_m: float = 500e3
    epsilon_m: float = 100.0

    def validate(self):
        values = (self.min_range_m, self.max_range_m, self.epsilon_m)
        if not all(np.isfinite(v) for v in values):
            raise InvalidSearchBounds(f"search bounds must be finite, got {values}")
        if self.min_range_m <= 0:
            raise InvalidSearchBounds(f"min_range_m must be > 0, got {self.min_range_m}")
        if not self.min_range_m < self.max_range_m:
            raise InvalidSearchBounds(
                f"min_range_m ({self.min_range_m}) must be below max_range_m ({self.max_range_m})"
            )
        if self.epsilon_m <= 0:
            raise InvalidSearchBounds(f"epsilon_m must be > 0, got {self.epsilon_m}")


@dataclass(frozen=True)
class RangeSearchResult:
    """
    outcome    : SearchOutcome
    range_m    : DETECTED        -> largest range confirmed detectable
                 EXCEEDS_CEILING -> max_range_m (a lower bound only)
                 NOT_DETECTABLE  -> None
    iterations : bisection steps taken
    gain_dB    : antenna gain used for the search, if known
    """
    outcome: SearchOutcome
    range_m: Optional[float]
    iterations: int = 0
    gain_dB: Optional[float] = None

    @property
    def detectable(self) -> bool:
        return self.outcome is not SearchOutcome.NOT_DETECTABLE


def max_iterations(bounds: SearchBounds) -> int:
    """
    Hard cap on bisection steps: ceil(log2(width / epsilon)).
    """
    width = bounds.max_range_m - bounds.min_range_m
    if width <= bounds.epsilon_m:
        return 0
    return int(math.ceil(math.log2(width / bounds.epsilon_m)))


def bisect_max_range(is_detectable: Callable[[float], bool],
                     bounds: SearchBounds = SearchBounds()) -> RangeSearchResult:
    """
    Largest range r in bounds with is_detectable(r) True, to within epsilon.

    is_detectable must be non-increasing in range.
    """
    bounds.validate()

    lo = bounds.min_range_m
    hi = bounds.max_range_m

    # Both ends are checked up front so neither bound is ever reported as a
    # genuine crossing.
    if not is_detectable(lo):
        return RangeSearchResult(SearchOutcome.NOT_DETECTABLE, None, 0)

    if is_detectable(hi):
        return RangeSearchResult(SearchOutcome.EXCEEDS_CEILING, hi, 0)

    n_max = max_iterations(bounds)
    n = 0
    while hi - lo > bounds.epsilon_m and n < n_max:
        mid = (lo + hi) / 2.0
        if is_detectable(mid):
            lo = mid
        else:
            hi = mid
        n += 1

    return RangeSearchResult(SearchOutcome.DETECTED, lo, n)


def max_detectable_range(link, az_rad: float, el_rad: float, rcs_m2: float,
                         bounds: SearchBounds = SearchBounds(),
                         gain_dB: Optional[float] = None) -> RangeSearchResult:
    """
    Maximum detectable range toward (az, el) for a target of rcs_m2.

    The gain is queried once (or taken from gain_dB) and held fixed while
    the range is varied.
    """
    bounds.validate()

    if gain_dB is None:
        gain_dB = link.antenna_gain(az_rad, el_rad)

    probe = TargetGeometry(bounds.min_range_m, az_rad, el_rad, rcs_m2)
    probe.validate()

    result = bisect_max_range(
        lambda r: link.is_detectable(probe.at_range(r), gain_dB),
        bounds
    )
    return RangeSearchResult(result.outcome, result.range_m, result.iterations, gain_dB)
