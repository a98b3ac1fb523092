from __future__ import annotations

import os

from setuptools import find_packages, setup


def _read_long_description() -> str:
    repo_root = os.path.abspath(os.path.dirname(__file__))
    path = os.path.join(repo_root, "SPEC_FULL.md")
    if not os.path.exists(path):
        return ""
    with open(path, encoding="utf-8") as f:
        return f.read()


setup(
    name="randdraw",
    version="0.1.0",
    description="Random variates (uniform, exponential, Pareto, bounded Pareto), alias-table sampling and shuffling",
    long_description=_read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    packages=find_packages(include=["randdraw", "randdraw.*"]),
    install_requires=["numpy>=1.22"],
    extras_require={
        "test": ["pytest>=7", "scipy>=1.8"],
    },
)
