from setuptools import setup, find_packages
import os


def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()


VERSION = '0.1.0'
AUTHOR = 'StackPage team'
DESCRIPTION = read('README.rst')
KEYWORDS = 'http,server,html,stack,demo'

setup(
    name='stackpage',
    version=VERSION,
    description='Demonstration HTTP server rendering sample values and a stack',
    long_description=DESCRIPTION,
    author=AUTHOR,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=['docopt', 'requests'],
    extras_require={
        'test': ['pytest'],
    },
    keywords=KEYWORDS,
    entry_points={
        'console_scripts': [
            'stackpage-server=bin.stackpage_server:_main',
            'stackpage-client=bin.stackpage_client:_main',
        ]
    },
)
