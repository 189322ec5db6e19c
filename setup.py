# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="stacklang",
    version="0.1.0",
    description="Tokenizer and recursive evaluator for a small postfix stack language",
    packages=find_namespace_packages(include=["stacklang", "stacklang.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    zip_safe=False,
)
