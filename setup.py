#!/usr/bin/env python

from setuptools import setup


setup(
    name="PyRecipe",
    version="0.1.0",
    packages=['pyRecipe'],
    author="The PyNN team",
    author_email="andrew.davison@unic.cnrs-gif.fr",
    description="Validated marshalling of cell-centric network descriptions (recipes) for simulation engines",
    long_description=open("README.rst").read(),
    license="CeCILL http://www.cecill.info",
    keywords="computational neuroscience simulation recipe arbor network",
    url="http://neuralensemble.org/",
    classifiers=['Development Status :: 4 - Beta',
                 'Environment :: Console',
                 'Intended Audience :: Science/Research',
                 'License :: Other/Proprietary License',
                 'Natural Language :: English',
                 'Operating System :: OS Independent',
                 'Programming Language :: Python :: 3',
                 'Topic :: Scientific/Engineering'],
    python_requires='>=3.8',
    install_requires=['numpy>=1.18.5', 'neo>=0.12.0', 'quantities>=0.14.1'],
    extras_require={
        'test': ['pytest'],
    },
)
