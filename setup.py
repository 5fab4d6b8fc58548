#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="probviz",
    version="0.1.0",
    description="Evaluation core for comparing two probability distributions",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",

    # finds probviz/ and probviz.distributions,
    # but excludes tests, examples, docs
    packages=find_packages(exclude=["tests*", "examples*", "docs*"]),

    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20",
        "scipy>=1.7",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "flake8",
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],

    include_package_data=False,
)
