#!/usr/bin/env python3
from setuptools import setup, find_packages


setup(
    name='textscorer',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    entry_points={
        'console_scripts': [
            'textscorer = textscorer:main'
        ]
    },
    install_requires=[
        'regex>=2023.8.8',
        'jinja2>=3.1'
    ],
    extras_require={
        'test': [
            'pytest>=7.4'
        ]
    },
    package_data={
        'textscorer': ['data/*.json', 'data/*.txt']
    },
    include_package_data=True,
    description='A Markov-chain text scorer for detecting gibberish',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3'
    ],
)
