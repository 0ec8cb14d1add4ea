import os

from setuptools import find_packages, setup

# https://packaging.python.org/single_source_version/
base_dir = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(base_dir, "README.md")) as f:
    long_description = f.read()


extras = {
    "test": ["pytest"],
}


setup(
    name="vtkexport",
    version="2.3.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    description="Export numpy arrays to legacy VTK files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    platforms="any",
    install_requires=["numpy>=1.20", "rich"],
    python_requires=">=3.8",
    extras_require=extras,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Visualization",
    ],
    entry_points={
        "console_scripts": [
            "vtkexport = vtkexport._cli:main",
        ]
    },
)
