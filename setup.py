# setup.py
from setuptools import setup, find_packages

setup(
    name="fluent-contracts",          # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["pandas"],      # DataFrameContract
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "fluent-contracts-docs=fluent_contracts.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Fluent argument contracts: must(x).not_be_null().and_.be_greater_than(0)",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
