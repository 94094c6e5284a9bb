import os
import io

from setuptools import setup, find_packages


def read(fname):
    with io.open(os.path.join(os.path.dirname(__file__), fname), encoding="utf-8") as f:
        return f.read()


setup(
    name="efpinput",
    version="0.1.0",
    author="efpinput developers",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "ase>=3.21",
        "torch>=1.9",
        "omegaconf>=2.1",
        "rich",
    ],
    package_data={"efpinput": ["fraglib/*"]},
    include_package_data=True,
    extras_require={"test": ["pytest", "pytest-datadir"]},
    license="MIT",
    description="Reader for EFP molecular dynamics input files",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
)
