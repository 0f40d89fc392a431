from setuptools import setup, find_packages

setup(
    name="wahoo_sim",
    version="0.1.0",
    packages=find_packages(include=["wahoo_sim", "wahoo_sim.*"]),
    install_requires=[
        "numpy>=1.24.3",
        "scipy>=1.10.1",
        "matplotlib>=3.7.1",
        "seaborn>=0.12.2",
        "tqdm>=4.65.0",
        "pandas>=2.0.3",
        "pytest>=7.4.0",
        "click>=8.0.0",
    ],
    entry_points={
        'console_scripts': [
            'wahoo-sim=wahoo_sim.cli.main:cli',
        ],
    },
    python_requires=">=3.9",
)
