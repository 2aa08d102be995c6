# setup.py
from setuptools import setup, find_packages

setup(
    name="objscene",
    version="1.0.0",
    description="Wavefront OBJ/MTL loader producing GPU-ready indexed meshes",
    packages=find_packages(include=["objscene", "objscene.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
