#!/usr/bin/env python3

from pathlib import Path

from setuptools import setup


def read(version_filepath: Path) -> str:
    with version_filepath.open("r") as fp:
        return fp.read()


def get_version(version_filepath: Path) -> str:
    for line in read(version_filepath).splitlines():
        if line.startswith("__version__"):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]

    raise RuntimeError("Unable to find version string.")


# The directory containing this file
HERE = Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()

# This call to setup() does all the work
setup(
    name="subgraph-scc",
    version=get_version(HERE / "subgraph_scc/__init__.py"),
    description=(
        "Strongly connected components of shrinking subgraphs and elementary cycles"
        " of directed graphs"
    ),
    long_description=README,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.10",
    packages=["subgraph_scc"],
    include_package_data=True,
    install_requires=["graphviz", "networkx"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "subgraph-scc=subgraph_scc.__main__:main",
        ]
    },
)
