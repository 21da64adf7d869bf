#!/usr/bin/env python3

from setuptools import setup
from setuptools import find_packages


# Optional dependencies
extras_require = {
    'config': [
        'anyconfig>=0.13',
        'PyYAML>=6',
    ],
    'test': [
        'pytest>=7',
        'anyconfig>=0.13',
        'PyYAML>=6',
    ],
}

# All dependencies
extras_require['all'] = []
for key in extras_require:
    if key != 'all':
        extras_require['all'] += extras_require[key]

# Setup script
setup(
    name='argcompose',
    version='0.1.0',
    description='Declarative option parsers for argparse',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[line for line in open('requirements.txt') if line.strip()],
    extras_require=extras_require,
)
