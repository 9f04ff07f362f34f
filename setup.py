# coding: utf-8
# Copyright 2026 The UCD Tools Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import os
from setuptools import setup

def ucdtools_scripts():
    return [os.path.join('bin', 'ucdtools')]

# Read the contents of the README file
with open('README.md') as f:
    long_description = f.read()

setup(
    name="ucdtools",
    use_scm_version={"write_to": "Lib/ucdtools/_version.py",
                     "fallback_version": "0.1.0"},
    description='Command-line tools for studying Unicode characters'
                ' with the Unicode Character Database',
    long_description=long_description,
    long_description_content_type='text/markdown',
    package_dir={'': 'Lib'},
    packages=['ucdtools',
              'ucdtools.scripts'],
    scripts=ucdtools_scripts(),
    zip_safe=False,
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Topic :: Text Processing',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3'
    ],
    python_requires=">=3.8",
    setup_requires=['setuptools_scm>=4'],
    extras_require={"test": ['pytest']},
    install_requires=[
        'rich',
    ]
    )
