"""
Setup script for pretzelkit.
"""

from setuptools import setup, find_packages

setup(
    name="pretzelkit",
    version="1.0.0",
    description="Seifert matrices, genus and Alexander polynomials of pretzel links",
    author="pretzelkit Project",
    packages=find_packages(include=["pretzelkit", "pretzelkit.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pretzelkit=pretzelkit.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
