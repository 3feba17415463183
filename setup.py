import os
import sys

# for the supported Python versions, see 'python_requires' below

from setuptools import setup

# make sure versioninfo is found in the project directory
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import versioninfo

xedit_version = versioninfo.version()

extra_options = {}
extra_options['zip_safe'] = False
extra_options['python_requires'] = '>=3.7'
extra_options['install_requires'] = versioninfo.requirements()
extra_options['extras_require'] = {
    'test': ['pytest'],
}

extra_options['package_data'] = {
    'xedit.tests': ['*.xml'],
    }

extra_options['package_dir'] = {
        '': 'src'
    }

extra_options['packages'] = [
        'xedit', 'xedit.tests'
    ]

with open(os.path.join(versioninfo.get_base_dir(), 'README.rst')) as f:
    long_description = f.read()

setup(
    name = "xedit",
    version = xedit_version,
    license="BSD",
    description=(
        "Helpers for finding and editing XML nodes by XPath"
        " on top of lxml."
    ),
    long_description=long_description + "\n" + versioninfo.changes(),
    long_description_content_type="text/x-rst",
    classifiers=[
        versioninfo.dev_status(),
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        # NOTE: keep in sync with 'python_requires' above.
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Topic :: Text Processing :: Markup :: XML',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],

    **extra_options
)
