#!/usr/bin/env python

from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="memesites",
    version='0.1.0',
    description="memesites - read the motif sites of MEME reports as sequence alignments.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=['memesites', 'memesites.*']),
    include_package_data=True,
    test_suite="tests",
    python_requires=">=3.6",
    install_requires=[
        'Click',
        'jsonpickle',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'memesites = memesites.scripts.memesites_cli:cli',
        ],
    },
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ),
)
