"""
resourcemesh build configuration.
"""

from setuptools import setup, find_packages
import os

# 读取 README 文件
def read_readme():
    if not os.path.exists("README.md"):
        return ""
    with open("README.md", "r", encoding="utf-8") as fh:
        return fh.read()

# 读取版本信息
def read_version():
    with open("resourcemesh/__init__.py", "r", encoding="utf-8") as fh:
        for line in fh:
            stripped = line.strip()
            if stripped.startswith("__version__") and "version(" not in stripped:
                return stripped.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"

# 读取依赖文件
def read_requirements(filename):
    requirements = []
    if os.path.exists(filename):
        with open(filename, "r", encoding="utf-8") as fh:
            requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]
    return requirements

setup(
    name="resourcemesh-core",
    version=read_version(),
    description="Resource inventory and project allocation registry",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=read_requirements("requirements.txt") or ["PyYAML>=5.4"],
    extras_require={
        "dev": read_requirements("requirements-dev.txt") or ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "resourcemesh=resourcemesh.cli:main",
        ],
    },
    include_package_data=True,
    package_data={
        "resourcemesh": [
            "config/*.yaml",
        ],
    },
    zip_safe=False,
    keywords=[
        "inventory",
        "resource-management",
        "allocation",
        "projects",
    ],
)
