# setup.py
from setuptools import setup, find_packages

setup(
    name="monkey",
    version="0.1.0",
    packages=find_packages(include=["monkey", "monkey.*"]),
    python_requires=">=3.10",
    install_requires=["termcolor"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["monkey=monkey.repl:main"]},
    zip_safe=False,
)
