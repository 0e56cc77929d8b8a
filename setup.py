#!/usr/bin/env python
"""
<Program Name>
  setup.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  setup.py script to install the pgp-armor library

"""
import io
import os
import re

from setuptools import setup, find_packages


base_dir = os.path.dirname(os.path.abspath(__file__))

def get_version(filename="pgp_armor/__init__.py"):
  """
  Gather version number from specified file.

  This is done through regex processing, so the file is not imported or
  otherwise executed.

  No format verification of the resulting version number is done.
  """
  with io.open(os.path.join(base_dir, filename), encoding="utf-8") as initfile:
    for line in initfile.readlines():
      m = re.match("__version__ *= *['\"](.*)['\"]", line)
      if m:
        return m.group(1)

with io.open(os.path.join(base_dir, "README.md"), encoding="utf-8") as f:
  long_description = f.read()

setup(
  name="pgp-armor",
  description=("Parse and encode OpenPGP ASCII Armor and clearsigned "
    "messages (RFC 4880)"),
  long_description_content_type="text/markdown",
  long_description=long_description,
  license="Apache-2.0",
  keywords="openpgp ascii armor radix-64 crc24 clearsign",
  classifiers = [
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: Apache Software License',
    'Natural Language :: English',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: Implementation :: CPython',
    'Topic :: Security :: Cryptography',
    'Topic :: Software Development :: Libraries'
  ],
  python_requires=">=3.8, <4",
  packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
  install_requires=["securesystemslib>=0.18.0", "attrs>=19.2.0",
                    "cryptography"],
  extras_require={
    # The test suite only uses the standard library's unittest
    "test": []
  },
  test_suite="tests.runtests",
  version=get_version(),
)
