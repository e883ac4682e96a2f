# setup.py
from setuptools import setup, find_packages

setup(
    name="littlelisp",
    version="0.1.0",
    description="A small Lisp reader and tree-walking evaluator",
    packages=find_packages(include=["littlelisp", "littlelisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
