"""setuptools entry point for the parametric_eq package."""
from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="parametric-eq",
    version="0.1.0",
    description="Parametric EQ band model, biquad response preview and EqualizerAPO/GraphicEQ codecs",
    packages=find_packages(include=["parametric_eq", "parametric_eq.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "parametric-eq=parametric_eq.cli:main",
        ],
    },
)
