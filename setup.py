# setup.py
from setuptools import setup, find_packages

setup(
    name="rill",
    version="0.1.0",
    description="Reader, value model, environments and apply protocol for a small Lisp",
    packages=find_packages(include=["rill", "rill.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
