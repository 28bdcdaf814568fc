#!/usr/bin/env python3
"""
Setup script for org-site - Org-mode static site utilities.
"""

from setuptools import setup, find_packages
import os

# Read the contents of README file
this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='org-site',
    version='0.2.0',
    description='Project scaffolding and Mustache-rendered page fragments for Org-mode static sites',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'orgsite_pkg': [
            'orgsite.yml',
            'template/*/*.html',
        ],
    },
    include_package_data=True,
    install_requires=[
        'PyYAML>=5.4',
        'chevron>=0.14.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Internet :: WWW/HTTP :: Site Management',
        'Topic :: Text Processing :: Markup :: HTML',
    ],
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'orgsite=orgsite_pkg.cli:main',
        ],
    },
    keywords='static site generator, org-mode, mustache, blog, wiki',
)
