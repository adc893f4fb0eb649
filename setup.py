"""
Install script for math_testutils.

Usage
-----
From the repository root::

    pip install -e ".[dev]"
    pytest math_testutils/tests
"""

from setuptools import setup
import os

here = os.path.abspath(os.path.dirname(__file__))
pkg_root = os.path.join(here, "math_testutils")

# Discover all sub-packages (directories containing __init__.py)
packages = ["math_testutils"]
for dirpath, dirnames, filenames in os.walk(pkg_root):
    # Skip hidden, __pycache__, .git, etc.
    dirnames[:] = [
        d for d in dirnames
        if not d.startswith((".", "__pycache__"))
    ]
    if "__init__.py" in filenames and dirpath != pkg_root:
        rel = os.path.relpath(dirpath, pkg_root).replace(os.sep, ".")
        packages.append(f"math_testutils.{rel}")

setup(
    name="math-testutils",
    version="0.1.0",
    description=(
        "NaN-aware float assertions, serialization round trips and "
        "reference statistics for numerical unit tests"
    ),
    packages=packages,
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21",
        "scipy>=1.7",
    ],
    extras_require={
        "dev": ["pytest>=7.0", "pytest-cov"],
    },
)
