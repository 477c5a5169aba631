#!/usr/bin/env python3

from setuptools import setup

setup(
    name="looseorder",
    python_requires=">= 3.8",
    install_requires=[
        'toml', 'ruamel.yaml',
        'jinja2'],

    # http://setuptools.readthedocs.io/en/latest/setuptools.html#declaring-extras-optional-features-with-their-own-dependencies
    extras_require={
        'color': ['coloredlogs'],
    },
    version="1.0",
    description="Tolerant topological sorting of records with 'before' hints",
    license="http://www.gnu.org/licenses/gpl-3.0.html",
    packages=["looseorder", "looseorder.cmd", "looseorder.utils"],
    scripts=['loosesort']
)
