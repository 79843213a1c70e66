"""
setup.py

Сборка пакета симулятора.

Использование:
    pip install -e .[test]
    python main.py simulate 42
"""

from setuptools import setup, find_packages

setup(
    name="peg_sim",
    version="1.0.0",
    description="Greedy seed-driven peg solitaire simulator",
    packages=find_packages(include=["core", "simulation", "peg_io", "utils", "web"]),
    py_modules=["main"],
    python_requires=">=3.9",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-sim=main:main",
        ],
    },
    zip_safe=False,
)
