from setuptools import setup, find_packages

setup(
    name="r3dy",
    version="1.0.0",
    description="Rename .NEV files to .R3D (or back) across a directory tree",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
        "rich>=13.0",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "r3dy = r3dy.cli:main"
        ],
    },
)
