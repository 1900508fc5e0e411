#!/usr/bin/env python3

import os
import io
import re

from setuptools import setup, find_packages

def read(*names, **kwargs):
    with io.open(
        os.path.join(os.path.dirname(__file__), *names),
        encoding=kwargs.get("encoding", "utf8")
    ) as fp:
        return fp.read()

def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")

setup(
    name = 'fastaidx',
    version = find_version('fastaidx','__init__.py'),

    description = 'Random access to line-wrapped FASTA files through their .fai index.',

    author = 'Rob Schaefer',
    author_email = 'rob@linkage.io',
    license = "Available under the MIT License",

    classifiers=[
	# How mature is this project? Common values are
	#   3 - Alpha
	#   4 - Beta
	#   5 - Production/Stable
	'Development Status :: 4 - Beta',

	'Intended Audience :: Science/Research',
	'Topic :: Scientific/Engineering :: Bio-Informatics',

	'License :: OSI Approved :: MIT License',

	'Programming Language :: Python :: 3',
    ],
    keywords='data genetics biology fasta faidx', 

    packages = find_packages(exclude=['tests']),
    scripts = [
       'fastaidx/cli/fastaidx'     
    ],
    python_requires = '>=3.8',
    install_requires = [
        'numpy>=1.12.0',
        'pandas>=0.16.2',
    ],
    extras_require = {
        'test' : [
            'pytest>=3.0',
            'pysam>=0.14.1',
        ]
    },
)
