import os

from setuptools import find_packages
from setuptools import setup

packages = find_packages(where='src')

# grab __version__, __author__, etc.
exec(open('src/adjacent_pair_iterator/version.py').read())


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname), encoding='utf-8').read()


try:
    long_description = read('README.rst')
except OSError:
    long_description = read('README.md')

setup(
    name=__title__,
    version=__version__,
    description=__description__,
    long_description=long_description,
    long_description_content_type='text/markdown',

    author=__author__,
    author_email=__author_email__,
    license=__license__,

    classifiers=[
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Topic :: Software Development :: Libraries',
    ],

    packages=packages,
    package_dir={'': 'src'},
    python_requires='>=3.8',

    install_requires=['typing_extensions>=4.0.0',
                      ],

    extras_require={
        'test': ['pytest>=7.0.0',
                 'numpy>=1.17.3',
                 ],
    },
)
