"""Setup script for wavefront_mtl package."""

from setuptools import setup, find_packages

setup(
    name='wavefront_mtl',
    version='1.0',
    packages=find_packages(include=['wavefront_mtl', 'wavefront_mtl.*']),
    package_data={'wavefront_mtl.config': ['defaults.yaml']},
    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.20.0',
        'matplotlib>=3.3.0',
        'PyYAML>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'wavefront-mtl=wavefront_mtl.cli:main',
        ],
    },
)
