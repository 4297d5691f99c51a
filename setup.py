#!python

import os.path
import sys

from setuptools import find_packages, setup

# Import the version module on its own so building doesn't need the
# runtime dependencies
sys.path.insert(0, os.path.abspath(os.path.join("src", "fsakit")))
from version import versionstring

if __name__ == "__main__":
    setup(
        name="fsakit",
        version=versionstring(),
        package_dir={"": "src"},
        packages=find_packages("src"),
        description="Finite state automata: simulation, epsilon elimination, "
        "subset construction and DFA minimization.",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        license="Two-clause BSD license",
        keywords="automaton dfa nfa minimization subset construction",
        zip_safe=True,
        python_requires=">=3.8",
        install_requires=[
            "loguru>=0.7.2",
        ],
        extras_require={
            "test": [
                "pytest>=8.3.2",
            ],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Development Status :: 3 - Alpha",
            "Intended Audience :: Developers",
            "Intended Audience :: Education",
            "License :: OSI Approved :: BSD License",
            "Natural Language :: English",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Topic :: Scientific/Engineering :: Mathematics",
        ],
    )
