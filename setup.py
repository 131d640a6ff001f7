#!/usr/bin/env python

"""
Setup script for the Python package. Test dependencies are
listed in the 'test' extra.
"""

from setuptools import find_packages, setup

PKG = 'streamable-files'

with open('README.md', encoding='utf-8') as f:
    readme = f.read()


setup(
    name=PKG,
    # This tag is automatically updated by bump2version
    version='1.0.0',
    description='Static file server with HTTP byte-range support, for streaming media',
    long_description=readme,
    long_description_content_type='text/markdown',
    license='MIT',
    packages=find_packages(include=['streamable', 'streamable.*']),
    python_requires='>=3.10',
    install_requires=[
        'click',
        'fastapi',
        'starlette',
        'pydantic >= 2',
        'uvicorn',
    ],
    extras_require={
        'gcp': ['google-cloud-logging'],
        'test': ['pytest < 9', 'httpx'],
    },
    entry_points={
        'console_scripts': [
            'streamable-files = streamable.cli:main',
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords='http range streaming static-files',
    classifiers=[
        'Environment :: Web Environment',
        'Framework :: FastAPI',
        'License :: OSI Approved :: MIT License',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: POSIX',
        'Operating System :: Unix',
        'Programming Language :: Python',
        'Topic :: Internet :: WWW/HTTP :: HTTP Servers',
    ],
)
