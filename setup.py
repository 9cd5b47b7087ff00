import os
import re

from setuptools import find_packages, setup


def get_version():
    with open(os.path.join(os.path.dirname(__file__), 'reconviz', '__init__.py')) as fh:
        return re.search(r"^__version__ = '([^']+)'", fh.read(), re.MULTILINE).group(1)


def parse_readme():
    try:
        with open('README.md') as fh:
            return fh.read()
    except OSError:
        return ''


TEST_REQS = [
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'Shapely>=1.6.4.post1',
    'colour',
    'pandas>=1.1',
    'svgwrite',
]


setup(
    name='reconviz',
    version=get_version(),
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Layout and rendering of genomic rearrangement profiles',
    long_description=parse_readme(),
    long_description_content_type='text/markdown',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.7',
    test_suite='tests',
    entry_points={'console_scripts': ['reconviz = reconviz.main:main']},
)
