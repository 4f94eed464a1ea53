# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="rotalog",
    version="1.0.0",
    description="Leveled logging to stdout or time/size rolling files",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["rotalog", "rotalog.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rotalog=rotalog.interface.cli.app:main',  # Pipes stdin or a message through a rolling logger
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
