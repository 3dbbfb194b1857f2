from setuptools import setup, find_packages

setup(
    name="nba-betting-predictor",
    version="0.1.0",
    description="NBA spread and moneyline picks from a weighted multi-factor model with cached, mock-backed data feeds",
    author="Ben Rosen",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=1.5.3",
        "pytz>=2022.7",
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
        "flask>=2.3.0",
        "flask-cors>=4.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "nba-predictor=nba_predictor.main:main",
        ],
    },
)
