"""
Open Assets Protocol Setup
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read() if f else ""

setup(
    name="oap-protocol",
    version="1.0.0",
    author="OAP Contributors",
    description="Open Assets Protocol codec: marker outputs, asset IDs and addresses",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["oap", "oap.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pycryptodome>=3.19.0",
        "python-bitcoinlib>=0.12.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security :: Cryptography",
        "Topic :: Office/Business :: Financial",
    ],
    keywords="bitcoin open-assets colored-coins op_return base58",
)
