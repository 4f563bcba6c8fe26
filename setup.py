from setuptools import setup, find_packages

setup(
    name="transit-journeys",
    version="0.1.0",
    description="Direct and one-transfer journey planning over a static GTFS schedule.",
    packages=find_packages(exclude=["tests"]),
    py_modules=["main_cli"],
    install_requires=[
        "pytz",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
