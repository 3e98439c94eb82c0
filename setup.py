#!/usr/bin/env python3
"""
Python setuptools script for the ``memocache`` library.
"""
from setuptools import setup
from setuptools import find_packages
from memocache.version import __version__

setup(
    name='memocache',
    version=__version__,
    description='Memoize pure callables by their exact argument tuple',
    long_description=(
        "Wrap functions, overloaded functions, methods and closures in a "
        "cache keyed by their positional arguments, so repeated calls with "
        "the same arguments are served without recomputation."
    ),
    packages=find_packages(exclude=['memocache.tests', 'memocache.tests.*']),
    python_requires='>=3.7, <4',
    install_requires=[
        'configargparse>=0.10.0',
    ],
    extras_require={
        'test': [
            'pytest>=3.0',
        ]
    },
    license='Apache Version 2.0',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Utilities',
    ],
    keywords='memoize memoization cache decorator',
    entry_points={
        'console_scripts': [
            'memocache = memocache.__main__:main'
        ]
    }
)
