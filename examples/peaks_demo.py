#!/usr/bin/env python3
"""
Demo script showing mountain peak generation.

Usage:
    python examples/peaks_demo.py [seed] [output.svg]
"""

import sys
from pathlib import Path

import numpy as np

from py_peaks.core.mountain_peaks import create


def main():
    """Generate a silhouette with a plateau, shadows and a ridge line."""
    seed = sys.argv[1] if len(sys.argv) > 1 else "demo123"
    output = Path(sys.argv[2] if len(sys.argv) > 2 else "mountain_peaks.svg")

    print("Py-Peaks Silhouette Demo")
    print("=" * 40)

    config = {
        "stage": {"width": 800, "height": 400},
        "peaks": {"count": 3, "detail": 5, "minY": 250, "maxY": 380, "startWithPeak": True},
        "valleys": {"minY": 80},
        "flats": [{"position": 0.6, "width": 60, "align": "center", "name": "lodge"}],
        "fill": {
            "gradient": {
                "x1": "0%", "y1": "0%", "x2": "0%", "y2": "100%",
                "stops": [
                    {"offset": "0%", "stop-color": "#6b7b8c"},
                    {"offset": "100%", "stop-color": "#2f3b48"},
                ],
            }
        },
        "shadow": {"color": "rgba(0, 0, 0, 0.25)"},
        "ridge": {"color": "#ffffff", "thickness": 2},
    }

    peaks = create(config, seed=seed)
    coords = peaks.coordinates

    elevations = peaks.config.stage.height - np.array([c.y for c in coords])
    print(f"\nSeed: {seed}")
    print(f"  Points: {len(coords)}")
    print(f"  Elevation range: {elevations.min():.0f}-{elevations.max():.0f}")
    print(f"  Mean elevation: {elevations.mean():.1f}")

    for coord in coords:
        if coord.flat_name is not None:
            print(f"  Flat '{coord.flat_name}' anchored at x={coord.x:.1f}, y={coord.y:.0f}")

    output.write_text(peaks.to_svg())
    print(f"\nWrote {output}")


if __name__ == "__main__":
    main()
