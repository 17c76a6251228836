#!/usr/bin/env python

"""Set up the pysqlbind package.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pysqlbind

To install with the test requirements:

    pip install 'pysqlbind[test]'

A native client Driver implementation is supplied by the application; none is
installed with this package.
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'pysqlbind', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in pysqlbind/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

setup(
    name='pysqlbind',
    version=VERSION,
    author='NuoDB',
    author_email='drivers@nuodb.com',
    description='Prepared statement and result binding engine for SQL client drivers',
    keywords='sql database prepared statement dbapi',
    packages=['pysqlbind'],
    license='BSD License',
    long_description=open(readme).read(),
    python_requires='>=3.9',
    install_requires=['tzlocal>=3.0'],
    extras_require=dict(test=['pytest', 'pytz>=2015.4']),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: SQL',
        'Topic :: Database :: Front-Ends',
    ],
)
