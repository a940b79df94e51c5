# -*- coding: utf-8 -*-
"""
Created on Mon Jan 19 09:05:11 2026

@author: bboyg

Exception types for the coverage estimator.

Configuration errors (bad radar config, bad geometry, bad search bracket) are
raised straight to the caller. Gain query failures and numeric domain errors
are per-point problems and are recovered by the sweep engine.
"""


class CoverageError(Exception):
    """Base class for every error raised by this package."""


class InvalidRadarConfig(CoverageError, ValueError):
    pass


class InvalidGeometry(CoverageError, ValueError):
    """Non-positive / non-finite target range or RCS."""


class InvalidSearchBounds(CoverageError, ValueError):
    """Malformed bisection bracket or tolerance."""


class NumericDomainError(CoverageError, ArithmeticError):
    """A non-positive power was about to be fed to a logarithm."""


class GainQueryFailure(CoverageError, RuntimeError):
    """The gain model could not produce a value for the requested direction."""


class SweepFailure(CoverageError):
    """
    Every point of a sweep was invalid.

    One bad angle is noise; all of them failing means the gain model itself is
    unusable. The invalid samples are kept on the exception for inspection.
    """

    def __init__(self, message, samples=None):
        super().__init__(message)
        self.samples = list(samples) if samples is not None else []
