# setup.py - Build and install the brauer_diagrams package
from setuptools import setup, find_packages

setup(
    name="brauer_diagrams",
    version="0.1.0",
    description="Brauer and Temperley-Lieb diagram algebra for monoidal categories",
    packages=find_packages(include=["brauer_diagrams", "brauer_diagrams.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
