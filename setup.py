from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="invariant-collections",
    version="0.1.0",
    description="Sequences with structural invariants: non-empty lists and slices, and sorted deduplicated vectors.",
    packages=find_packages(include=["invariant_collections", "invariant_collections.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    author="Jack Nguyen",
    author_email="jackyeenguyen@gmail.com",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
