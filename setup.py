from setuptools import find_packages, setup


setup(
    name="parallelway",
    version="0.1.0",
    description="Parallel (offset) copies of connected polylines",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "numpy",
        "shapely>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "parallelway=parallelway.cli:main",
        ]
    },
)
