from setuptools import find_packages, setup

setup(
    name="combiter",
    version="0.1.0",
    description="In-place enumeration of tuples, multisets, subsets and permutations",
    packages=find_packages(exclude=("combiter.tests",)),
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
)
