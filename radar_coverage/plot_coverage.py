# -*- coding: utf-8 -*-
"""
Created on Wed Jan 21 14:03:38 2026

@author: bboyg
"""

import numpy as np
import matplotlib.pyplot as plt

from coverage_sweep import samples_to_frame


def plot_range_cut(samples, axis="az", ax=None, title=None):
    """
    Max detectable range (km) against azimuth or elevation (degrees).
    Invalid points are left out; not-detectable points sit at 0 km.
    """
    df = samples_to_frame(samples)
    col = "az_deg" if axis == "az" else "el_deg"

    m = df["valid"].to_numpy().astype(bool)

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    else:
        fig = ax.figure

    ax.plot(df[col].to_numpy()[m], df["max_range_km"].to_numpy()[m], ".-")
    bad = df[col].to_numpy()[~m]
    if len(bad):
        ax.plot(bad, np.zeros(len(bad)), "rx", label="invalid")
        ax.legend()

    ax.set_xlabel("Azimuth (deg)" if axis == "az" else "Elevation (deg)")
    ax.set_ylabel("Max detectable range (km)")
    ax.set_title(title or "Coverage cut")
    ax.grid(True)
    return fig


def plot_coverage_map(samples, ax=None, title=None):
    """
    2D az/el map of max detectable range (km). Invalid points are NaN (blank).
    Samples must come from sweep_2d (azimuth outer, elevation inner).
    """
    df = samples_to_frame(samples)

    az = np.unique(df["az_deg"].to_numpy())
    el = np.unique(df["el_deg"].to_numpy())

    rng = df["max_range_km"].to_numpy(dtype=float).reshape(len(az), len(el))

    if ax is None:
        fig, ax = plt.subplots(figsize=(9, 5))
    else:
        fig = ax.figure

    mesh = ax.pcolormesh(az, el, rng.T, shading="nearest")
    fig.colorbar(mesh, ax=ax, label="Max detectable range (km)")

    ax.set_xlabel("Azimuth (deg)")
    ax.set_ylabel("Elevation (deg)")
    ax.set_title(title or "Detection coverage")
    return fig
