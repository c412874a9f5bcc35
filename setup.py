#!/usr/bin/env python3
"""
Setup script for queries-resources
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding='utf-8')

# Read version from queries_resources/__init__.py
version = "0.1.0"
init_file = Path(__file__).parent / "queries_resources" / "__init__.py"
if init_file.exists():
    for line in init_file.read_text(encoding='utf-8').split('\n'):
        if line.startswith('__version__'):
            version = line.split('=')[1].strip().strip('"').strip("'")
            break

BASE_REQUIREMENTS = [
    "pycountry>=23.12.0",
    "tabulate>=0.9.0",
]

EXTRAS = {
    "test": ["pytest>=7.0.0"],
}

EXTRAS["dev"] = sorted(
    set(
        EXTRAS["test"]
        + [
            "black>=22.0.0",
            "flake8>=4.0.0",
        ]
    )
)


setup(
    name="queries-resources",
    version=version,
    description="Bundled stem maps, word clusters and gazetteers for query understanding",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "queries_resources.data": ["*/*.txt"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=BASE_REQUIREMENTS,
    extras_require=EXTRAS,
    entry_points={
        "console_scripts": [
            "queries-resources=queries_resources.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: Linguistic",
    ],
    keywords="nlu, gazetteer, stemming, word clusters, resources",
    zip_safe=False,
)
