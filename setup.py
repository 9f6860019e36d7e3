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

from setuptools import find_packages, setup

# XXX: the version is read from the file instead of importing the package, which needs its dependencies installed
about: dict[str, str] = {}
with open('borsh_codec/version.py') as fp:
    exec(fp.read(), about)

setup(
    name='borsh-codec',
    version=about['__version__'],
    description='Deterministic binary codec in the Borsh format, with schemas',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=[
        'structlog>=22.3.0',
        'typing_extensions>=4.4.0',
        'pydantic>=2.0',
        'pyyaml>=6.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.2.0',
        ],
    },
)
