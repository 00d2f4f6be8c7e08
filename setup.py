from setuptools import setup, find_packages

setup(
    name="measurement_generator",
    version="0.1.0",
    packages=find_packages(),
    install_requires=[
        "tqdm>=4.62",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "generate-measurements=measurement_generator.cli.generate:main",
        ],
    },
    description="A tool for generating synthetic weather station measurement files",
    keywords="weather, measurements, benchmark, one billion row challenge",
    python_requires=">=3.8",
)
