#!/usr/bin/env python

import pathlib

from setuptools import find_packages, setup

here = pathlib.Path(__file__).parent.resolve()

install_requires = (here / 'requirements.txt').read_text(encoding='utf-8').splitlines()

setup(
    name='native-build-runner',
    version='1.0.0',
    description='Compose container runtime invocations for native builds with host-owned output',
    license='Apache-2.0',
    python_requires='>=3.8',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=install_requires,
    extras_require={
        'test': ['pytest', 'pytest-mock'],
    },
    entry_points={
        'console_scripts': [
            'native-build-runner = native_build_runner.__main__:main',
        ],
    },
)
