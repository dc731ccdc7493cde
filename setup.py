"""
Setup file for the Portfolio Backend application.
"""

from setuptools import setup, find_packages

setup(
    name="portfolio-backend",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "scripts", "scripts.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "python-dotenv",
        "python-multipart",
        "PyJWT",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    python_requires=">=3.8",
)
