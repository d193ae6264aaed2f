#!/usr/bin/env python
"""Setuptools script.
"""
import os
import codecs
from setuptools import setup, find_packages

PACKAGENAME = 'passgate'
DESCRIPTION = 'HTTP Basic authentication gate backed by a bcrypt password file'
AUTHOR = 'Adam Thornton'
AUTHOR_EMAIL = 'athornton@lsst.org'
URL = 'https://github.com/lsst-sqre/passgate'
VERSION = '0.1.0'
LICENSE = 'MIT'


def local_read(filename):
    """Read a file into a string.
    """
    full_filename = os.path.join(
        os.path.abspath(os.path.dirname(__file__)),
        filename)
    return codecs.open(full_filename, 'r', 'utf-8').read()


LONG_DESC = local_read('README.md')

setup(
    name=PACKAGENAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=LONG_DESC,
    long_description_content_type='text/markdown',
    url=URL,
    project_urls={
        'Homepage': URL,
        'Source': URL,
    },
    author=AUTHOR,
    author_email=AUTHOR_EMAIL,
    license=LICENSE,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'License :: OSI Approved :: MIT License',
    ],
    keywords='lsst',
    python_requires='>=3.11',
    package_dir={'': 'src'},
    packages=find_packages(where='src', exclude=['docs', 'tests*']),
    install_requires=[
        'bcrypt>=4.0',
        'click>=8.1',
        'fastapi>=0.100',
        'pydantic>=2.0',
        'safir>=6.0',
        'structlog',
        'uvicorn',
    ],
    extras_require={
        'dev': [
            'asgi-lifespan',
            'httpx',
            'pytest',
            'pytest-asyncio',
        ],
    },
    entry_points={
        'console_scripts': [
            'passgate = passgate.cli:main'
        ]
    }
)
