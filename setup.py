# Setup script - run: pip install -e ".[test]"
from setuptools import setup, find_packages

setup(
    name="nncore",
    version="0.1.0",
    description="Numeric primitives for transformer inference: RMS norm, softmax, matvec, sampling",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["numpy>=1.22", "numba>=0.57"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["nncore-decode=nncore.run_decode:main"]},
    zip_safe=False,
    python_requires=">=3.8",
)
