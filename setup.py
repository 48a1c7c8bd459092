from setuptools import setup, find_packages

setup(
    name="rebalance-trigger",
    version="1.0.0",
    author="Rebalance Trigger Team",
    description="Price-change factors that push a portfolio asset across its rebalancing threshold",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "pydantic==2.11.7",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    entry_points={
        "console_scripts": [
            "rebalance-trigger=rebalance_trigger.main:main",
        ],
    },
    python_requires=">=3.11",
)
