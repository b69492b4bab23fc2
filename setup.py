#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# urlform/__init__.py imports the dependencies, so the version is read without importing the package
_version_source = (Path(__file__).parent / 'urlform' / 'version.py').read_text()
__version__ = re.search(r"^BASE_VERSION = '([^']+)'", _version_source, re.MULTILINE).group(1)

install_requires = [
    'colorama>=0.4',
    'ConfigArgParse>=1.5',
    'pydantic>=2.0,<3',
    'PyYAML>=6.0',
    'structlog>=22.3',
    'typing_extensions>=4.6',
]

setup(
    name='urlform',
    version=__version__,
    description='application/x-www-form-urlencoded encoding with conversions derived from record types',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    entry_points={
        'console_scripts': ['urlform-cli=urlform.cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
