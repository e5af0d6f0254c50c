from setuptools import setup, find_packages

setup(
    name="sao-simulator",
    version="0.1.0",
    description="Behavior statistics for stochastic actor-oriented network/behavior models",
    author="adamfilli",
    packages=find_packages(include=["saosim", "saosim.*"]),
    install_requires=[
        "matplotlib",
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
