from setuptools import find_packages, setup

setup(
    name="lazy_frames",
    packages=find_packages(include=["lazy_frames", "lazy_frames.*"]),
    version="0.1.0",
    description="Lazily evaluated data frames and series built on pull-based cursors",
    author="Adam Amer",
    license="MIT License",
    python_requires=">=3.11",
    install_requires=[
        "numpy",
        "polars",
        "beartype",
        "typing_extensions",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "typeguard",
        ],
    },
)
