import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='autolink-reports',
    version='1.0.0',
    license='MIT',
    description='The reporting endpoints of the AutoLink vehicle rental API.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.8',
    install_requires=[
        'aiohttp',
        'uvloop',
        'marshmallow>=3.13,<4',
        'attrs',
        'sqlalchemy[asyncio]>=2.0',
        'aiosqlite',
        'sentry-sdk',
    ],
    extras_require={
        'test': [
            'pytest',
            'faker',
        ],
    },
    entry_points={
        'console_scripts': ['autolink=autolink.cli:run'],
    },
)
