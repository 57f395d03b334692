"""
setup.py for date_range pip package.


Creating a Development Conda Environment
----------------------------------------

To create a Conda environment for date_range development, from the
directory containing this file:

    conda create -n date-range-dev python=3.11
    conda activate date-range-dev
    pip install -e ".[test,docs]"
    pip install build twine


Running Unit Tests
------------------

To run the unit tests:

    conda activate date-range-dev
    python -m unittest discover -s date_range -t .

To run the tests of just one module, for example `interval_utils`:

    conda activate date-range-dev
    python -m unittest date_range.tests.test_interval_utils


Building the Documentation
--------------------------

    conda activate date-range-dev
    cd docs
    sphinx-build -b html . _build/html


Building and Uploading the Package
----------------------------------

The package build and upload commands below should be issued from within
the directory containing this file.

To build the package:

    conda activate date-range-dev
    python -m build

The build process will write package `.tar.gz` and `.whl` files to the
`dist` subdirectory of the directory containing this file.

To upload a built package to the test Python package index:

    conda activate date-range-dev
    python -m twine upload --repository-url https://test.pypi.org/legacy/ dist/*

To upload a built package to the real Python package index:

    conda activate date-range-dev
    python -m twine upload dist/*
"""


from pathlib import Path
import importlib.util

from setuptools import find_packages, setup


def load_version_module(package_name):
    module_name = f'{package_name}.version'
    file_path = Path(__file__).parent / package_name / 'version.py'
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


version = load_version_module('date_range')


setup(

    name='date-range',
    version=version.full_version,
    description=(
        'Date range value objects with flexible parsing, comparison, '
        'and iteration.'),
    license='MIT',

    packages=find_packages(include=['date_range', 'date_range.*']),

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],

    python_requires='>=3.9',

    install_requires=[
        'environs',
        'jsonschema',
        'python-dateutil',
        'ruamel.yaml',
    ],

    extras_require={
        'test': ['pytz'],
        'docs': ['sphinx', 'sphinx_rtd_theme'],
    },

    entry_points={
        'console_scripts': [
            'date_range_demo=date_range.scripts.date_range_demo:_main',
        ]
    },

    include_package_data=True,
    zip_safe=False

)
