from setuptools import setup, find_packages

setup(
    name="filetools",
    version="1.0.0",
    description="Helpers for simple file and folder operations: creation, listing, filtering and naming",
    author="Ashwin Nair",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"filetools": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
        "rich>=13.0",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
