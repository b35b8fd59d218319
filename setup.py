#!/usr/bin/env python
from setuptools import setup
import os


def get_version():
    curdir = os.path.dirname(__file__)
    filename = os.path.join(curdir, 'src', 'svgrecolor', 'version.py')
    with open(filename, 'rb') as fp:
        return fp.read().decode('utf8').split('=')[1].strip(" \n'")


def readme():
    with open('README.rst') as f:
        return f.read()


setup(
    name='svgrecolor',
    version=get_version(),
    description='Replace the color palette of an SVG document',
    long_description=readme(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Multimedia :: Graphics :: Graphics Conversion',
    ],
    keywords='svg color palette recolor logo',
    license='MIT License',
    package_dir={'': 'src'},
    packages=[
        'svgrecolor',
    ],
    python_requires='>=3.10',
    install_requires=[
        'numpy',
        'pillow',
    ],
    extras_require={
        'test': [
            'pytest'],
    },
    include_package_data=True,
    )
