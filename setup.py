#!/usr/bin/env python3
"""
Setup script for spatial-cpue-jax.

Install in development mode:
    pip install -e .

Install normally:
    pip install .
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="spatial-cpue-jax",
    version="0.1.0",
    description="Zero-inflated spatial CPUE likelihood with exponential-decay random effects, in JAX",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["spatial_cpue_jax", "spatial_cpue_jax.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "scipy>=1.9.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "scipy>=1.9.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },
)
