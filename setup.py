from setuptools import find_packages, setup

setup(
    name="transcode",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["PyYAML>=6.0"],
    entry_points={"console_scripts": ["transcode=transcode.cli:main"]},
)
