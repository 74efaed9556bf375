from setuptools import setup, find_packages

setup(
    name="cfrac",
    version="0.1.0",
    description="Exact lazy continued-fraction arithmetic with Gosper's algorithms",
    author="VesterlundCoder",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "sympy>=1.9",
        "mpmath>=1.2.0",
    ],
    extras_require={
        "scripts": ["tqdm>=4.0.0"],
        "test": ["pytest>=6.0.0"],
        "dev": ["pytest>=6.0.0", "tqdm>=4.0.0"],
    },
)
