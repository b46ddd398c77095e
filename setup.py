from setuptools import setup, find_packages

setup(
    name="tvdbapi",
    version="0.1.0",
    description="Client for the TVDB XML API",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
        "fuzzywuzzy>=0.18.0",
        "python-Levenshtein>=0.23.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
