#!/usr/bin/env python3
"""
Music Helper - Setup Configuration
Metadata inference and signal helpers for music player front ends
"""

from setuptools import setup, find_packages

# Read README for long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Core dependencies
core_requirements = [
    "numpy>=1.24.0",        # Level metering
    "mutagen>=1.47.0",      # Artist tags for file-based resolution
    "soundfile>=0.12.0",    # PCM window loading
    "python-dotenv>=1.0.0", # Environment variables
]

# Development dependencies
dev_requirements = [
    "pytest>=7.0.0",
    "pytest-cov>=4.0.0",
    "black>=23.0.0",
    "flake8>=6.0.0",
    "mypy>=1.0.0",
]

setup(
    # Package information
    name="music-helper",
    version="1.0.0",
    description="Main-artist inference, RMS level metering and track length formatting for music players",
    long_description=long_description,
    long_description_content_type="text/markdown",

    # Package discovery
    packages=find_packages(exclude=["tests*", "test_*", "*.tests*"]),
    include_package_data=True,

    # Dependencies
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": ["pytest>=7.0.0"],
    },

    # Python version and classifiers
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
        "Topic :: Multimedia :: Sound/Audio :: Analysis",
    ],

    keywords=["music", "audio", "metadata", "artist", "rms", "level-meter", "playlist"],

    zip_safe=False,
    platforms=["any"],
)
