# setup.py
from setuptools import setup, find_packages

setup(
    name="lis",
    version="0.1.0",
    description="A minimal Scheme-like expression interpreter",
    packages=find_packages(include=["lis", "lis.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lis=lis.repl:main"],
    },
    zip_safe=False,
)
