from setuptools import setup, find_packages
import pathlib

# Detect layout
use_src = pathlib.Path("src/recmap").exists()
pkg_args = {"package_dir": {"": "src"}, "packages": find_packages(where="src")} if use_src \
           else {"packages": find_packages(where=".")}

setup(
    name="rec-mapper",
    version="0.1.0",
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=6.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    **pkg_args
)
