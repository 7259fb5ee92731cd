"""
Setup file for the escapegraph Python package.

This package decides whether a disc-shaped agent can escape from a field of
point obstacles to unbounded free space while keeping a required clearance.
"""

from setuptools import find_packages, setup

package_name = 'escapegraph'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    python_requires='>=3.8',
    install_requires=['numpy', 'loguru'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Dev Goti',
    maintainer_email='devgoti1683@gmail.com',
    description=(
        'escapegraph: exact Delaunay bottleneck preprocessing for escape '
        'queries of disc agents among point obstacles.'
    ),
    license='MIT',
    entry_points={
        'console_scripts': [
            'escapegraph = escapegraph.cli:main'
        ],
    },
)
