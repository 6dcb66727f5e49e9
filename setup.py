# coding=utf-8
"""Setup package 'bigfraction'."""

from setuptools import setup

with open('README.md') as file:
    long_description = file.read()

setup(
    name="bigfraction",
    version="1.0.0",
    author="bigfraction contributors",
    description="Exact rational numbers with decimal rounding and formatting",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={'': 'src'},
    packages=['bigfraction'],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        'test': ["pytest", "hypothesis"],
    },
    tests_require=["pytest", "hypothesis"],
    license='BSD',
    keywords='rational fraction number datatype rounding',
    platforms='all',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    zip_safe=False,
    )
