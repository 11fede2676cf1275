# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="rotalog",
    version="1.0.0",
    description="Leveled, thread-safe logging to the console or to a size-rotated file",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["rotalog", "rotalog.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rotalog=rotalog.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
