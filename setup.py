from setuptools import setup, find_packages

with open("README.md", 'r') as readme:
    long_description = readme.read()

setup(
    name="adaptable-pq",
    version="1.0",
    description="Adaptable indexed priority queue with runtime min / max switching",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "numpy"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    }
)
