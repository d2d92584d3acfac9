# setup.py
from setuptools import setup, find_packages

setup(
    name="wisp",
    version="0.1.0",
    description="A small expression-language interpreter",
    packages=find_packages(include=["wisp", "wisp.*"]),
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["wisp = wisp.cli:main"]},
    zip_safe=False,
)
