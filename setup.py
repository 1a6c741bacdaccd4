"""
Setup script for birdly-engine.

birdly-engine is the algorithmic core of the birdly flashcard app. It
decides what the learner practices next and builds word-search puzzles:

1. Adaptive Practice Scheduler - Mastery-weighted group, exercise and image selection
2. Mastery Update Rule - Asymmetric rewards with diminishing returns
3. Word Search Generator - Hidden self-avoiding paths with grid growth

The 'birdly-engine' command is a developer tool for simulating sessions
and previewing puzzles.
"""

from setuptools import find_packages, setup

setup(
    name="birdly-engine",
    version="1.0.0",
    description="Adaptive practice scheduling and word-search generation for birdly",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="birdly",
    packages=find_packages(include=["birdly_engine", "birdly_engine.*"]),
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
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "birdly-engine=birdly_engine.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning flashcards mastery word-search education",
)
