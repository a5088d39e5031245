# coding: utf-8
# Copyright 2026 The Font Inventory Authors.
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
import re
from setuptools import setup

def fontinventory_scripts():
    return [os.path.join('bin', f) for f in os.listdir('bin') if f.startswith('fontinventory')]

def read_version():
    with open(os.path.join('Lib', 'fontinventory', '_version.py')) as f:
        return re.search(r'^version = "([^"]+)"', f.read(), re.M).group(1)

# Read the contents of the README file
with open('README.md', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="fontinventory",
    version=read_version(),
    description='List the characters in a font and check it covers a text'
                ' before shipping it as a webfont',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='The Font Inventory Authors',
    package_dir={'': 'Lib'},
    packages=['fontinventory',
              'fontinventory.scripts'],
    package_data={'fontinventory': ["templates/*.css"]},
    scripts=fontinventory_scripts(),
    zip_safe=False,
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Topic :: Text Processing :: Fonts',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3'
    ],
    python_requires=">=3.8",
    extras_require={"test": ['pytest']},
    install_requires=[
        'FontTools',
        'brotli',
        'jinja2',
        'rich',
        'tabulate',
    ]
    )
