"""
Setup script for dojo-cli.

Dojo is a terminal learning dojo for CLI fundamentals. It:

1. Bootstraps a local practice directory (.dojo/ plus practice folders)
2. Tracks curriculum progress in JSON
3. Leaves session state and event files for an AI assistant to watch

The 'dojo' command is the entry point.
"""

from setuptools import find_namespace_packages, setup

setup(
    name="dojo-cli",
    version="0.1.0",
    description="Terminal learning dojo for CLI fundamentals with AI assistant hand-off",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["src", "src.*"]),
    py_modules=["config"],
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
            "dojo=src.dojo.cli:run",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
    keywords="learning cli terminal education dojo",
)
