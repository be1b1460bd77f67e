from setuptools import find_packages, setup

setup(
    name="semv",
    version="0.1.0",
    python_requires=">=3.11",
    install_requires=["result"],
    extras_require={"tests": ["pytest", "pytest-timeout"]},
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={"console_scripts": ["semv=semv.__main__:main"]},
)
