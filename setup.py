"""
setup.py

Packaging metadata and CLI entry point for docbundle.

Version: 0.1.0: bundle splitter and variant selector with split, select,
inspect and pack subcommands.
"""
from setuptools import setup, find_packages

setup(
    name="docbundle",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "PyYAML",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "docbundle=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
