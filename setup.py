#!/usr/bin/env python3
#
# Floccus
#

from setuptools import setup
from os import path
from io import open

package = 'floccus'

description = 'Python library of meteorological thermodynamic formulas with validated, bulk and parallel evaluation.'

requirements = [
    'numpy',
    'pint',
]

extras = {
    'plot': ['matplotlib'],
    'test': ['pytest'],
}

here = path.abspath(path.dirname(__file__))

# Set the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

# Set version
__version__ = None
with open(path.join(here, package, '__init__.py'), encoding='utf-8') as f:
    for line in f:
        if line.startswith('__version__'):
            exec(line.strip())
            break

setup(
    name=package,
    version=__version__,
    description=description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    author='Michael Roth',
    author_email='michael.roth@klimaat.ca',
    keywords='meteorology thermodynamics humidity psychrometrics',
    packages=[package],
    python_requires='>=3.6',
    install_requires=requirements,
    extras_require=extras,
    license='MIT',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 4 - Beta",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
    ]
)
