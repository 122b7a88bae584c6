# setup.py
from setuptools import setup, find_packages

setup(
    name="runtime-schema",            # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # runtime_schema/
    install_requires=["pandas"],      # DataFrame validation (runtime_schema.frames)
    python_requires=">=3.8",
    description="Plain-data schemas and a recursive runtime validator for untyped input",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
