"""
Setup script for elementwise.

ElementWise is an interactive periodic table and chemistry learning
companion for the terminal. It has two halves:

1. Periodic Table - state at any temperature, trend shading, Bohr models,
   side-by-side comparison
2. Learn - quiz, flashcards, and a symbol/name memory game

The 'elementwise' command is the entry point.
"""

from setuptools import find_packages, setup

setup(
    name="elementwise",
    version="1.0.0",
    description="Interactive periodic table and chemistry learning engine",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="ElementWise",
    packages=find_packages(include=["elementwise", "elementwise.*"]),
    package_data={"elementwise.data": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "elementwise=elementwise.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Scientific/Engineering :: Chemistry",
    ],
    keywords="chemistry periodic-table learning quiz flashcards cli education",
)
