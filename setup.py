# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Setup configuration for stoxum-logging package."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="stoxum-logging",
    version="0.1.0",
    author="Stoxum Contributors",
    description="Hierarchical logging with swappable output engines for Stoxum libraries",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0.0",  # Interactive console engine
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "hypothesis>=6.0.0",
            "pylint>=3.0.0",
            "mypy>=1.0.0",
        ],
    },
)
