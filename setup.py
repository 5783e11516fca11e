# setup.py
from setuptools import setup, find_packages

setup(
    name="sprig",
    version="0.3.0",
    description="A small lexically scoped LISP-family expression evaluator",
    packages=find_packages(include=["sprig", "sprig.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
