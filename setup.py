#!/usr/bin/env python3

import os

from setuptools import find_namespace_packages, setup

if __name__ == '__main__':
    setup(
        name='tristate',
        version='1.0.0',
        description='A three-valued alternative to bool | None',
        author='Ilya Egorov',
        author_email='0x42005e1f@gmail.com',
        license='ISC',
        python_requires='>=3.8',
        install_requires=[
            'typing-extensions>=4.6.0; python_version < "3.11"',
        ],
        extras_require={
            'test': [
                'pytest>=7',
                'wrapt>=1.14',
            ],
            'docs': [
                'packaging',
                'sphinx',
                'sphinx-rtd-theme',
            ],
        },
        package_dir={'': 'src'},
        packages=find_namespace_packages(where='src'),
        package_data={'': ['*.pyi']},
        py_modules=[
            entry.name[:-3]
            for entry in os.scandir('src')
            if (
                not entry.name.startswith('.')
                and entry.name.endswith('.py')
                and entry.is_file()
            )
        ]
    )
