from setuptools import find_packages, setup

with open("README.md") as f:
    long_description = f.read()

setup(
    name="etafmt",
    version="0.1.0",
    author="PAL",
    author_email="info@predictive-analytics-lab.com",
    description="Compact, human-readable ETA strings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache License 2.0",
    packages=find_packages(exclude=["tests.*", "tests"]),
    package_data={"etafmt": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        "hydra-core >= 1.3",
        "backports.strenum >= 1.2; python_version < '3.11'",
    ],
    extras_require={
        "test": ["pytest >= 7"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Typing :: Typed",
    ],
    keywords=["eta", "duration", "formatting", "python"],
)
