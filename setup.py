"""
setup.py

Установка:
    pip install -e .            # чистый Python (dp, parallel)
    pip install -e .[fast]      # + numba ядро
    pip install -e .[test]      # + pytest

Использование:
    python main.py
"""

from setuptools import setup, find_packages

setup(
    name="peg_triangle",
    version="1.0.0",
    description="Exhaustive win/lose classification for triangular Peg Solitaire",
    packages=find_packages(include=["core", "solvers", "peg_io", "analysis", "utils"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "fast": ["numba", "numpy"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "peg-triangle=main:main",
        ],
    },
    zip_safe=False,
)
